"""
Dense matrices over the tropical semirings.

A matrix is a 2-dimensional numpy array (dtype=object) whose entries are scalars of a single semiring type.
Nested lists of numbers are accepted wherever a matrix is expected, see `as_matrix`.

>>> a = [[2, 4], [1, 0]]
>>> b = [[5, float('-inf')], [6, -3]]
>>> to_real(max_matrix_add(a, b)).tolist()
[[5.0, 4.0], [6.0, 0.0]]
>>> to_real(max_matrix_multiply(a, b)).tolist()
[[10.0, 1.0], [6.0, -3.0]]
>>> to_real(min_matrix_multiply(a, [[5, float('inf')], [6, -3]])).tolist()
[[7.0, 1.0], [6.0, -3.0]]
"""

import logging
import numbers

import numpy as np
from tabulate import tabulate

from tropical.exception import DimensionMismatch
from tropical.scalar import Tropical, MaxTropical, MinTropical


log = logging.getLogger(__name__)


def as_matrix(data, scalar_type):
    """
    Construct a fresh matrix of `scalar_type` entries.

    :param data: a 2-dimensional numpy array or a rectangular nested sequence of real numbers and/or scalars
    :param scalar_type: a subclass of Tropical
    :return: numpy array with dtype=object

    >>> m = as_matrix([[1, MaxTropical(2)], [3.5, float('-inf')]], MaxTropical)
    >>> m.shape
    (2, 2)
    >>> m[1, 1]
    MaxTropical(-inf)
    """
    if isinstance(data, np.ndarray) and data.ndim != 2:
        raise ValueError('Expected a 2-dimensional matrix, got %d dimension(s)' % data.ndim)
    if isinstance(data, np.ndarray):
        rows, cols = data.shape
    else:
        try:
            data = [list(row) for row in data]
        except TypeError:
            raise ValueError('Expected a 2-dimensional matrix (a sequence of rows)')
        rows = len(data)
        cols = len(data[0]) if rows else 0
        for i, row in enumerate(data):
            if len(row) != cols:
                raise ValueError('Expected a rectangular matrix: row 0 has %d columns, row %d has %d' % (cols, i, len(row)))
    matrix = np.empty((rows, cols), dtype=object)
    for i in range(rows):
        for j in range(cols):
            matrix[i, j] = _as_scalar(data[i][j], scalar_type)
    return matrix


def _as_scalar(x, scalar_type):
    if isinstance(x, scalar_type):
        return scalar_type(x.value)
    if isinstance(x, Tropical):
        raise TypeError('Expected %s entries, got %s' % (scalar_type.__name__, type(x).__name__))
    if isinstance(x, numbers.Real):
        return scalar_type(x)
    raise TypeError('Expected a real number or a %s, got %s' % (scalar_type.__name__, type(x).__name__))


def zeros(rows, cols, scalar_type):
    """A matrix filled with the additive identity."""
    matrix = np.empty((rows, cols), dtype=object)
    for i in range(rows):
        for j in range(cols):
            matrix[i, j] = scalar_type.additive_identity()
    return matrix


def identity(n, scalar_type):
    """
    The n-by-n multiplicative identity: `one` on the diagonal and `zero` elsewhere.

    >>> to_real(identity(2, MinTropical)).tolist()
    [[0.0, inf], [inf, 0.0]]
    """
    matrix = zeros(n, n, scalar_type)
    for i in range(n):
        matrix[i, i] = scalar_type.multiplicative_identity()
    return matrix


def to_real(matrix):
    """Return the underlying values as a float array."""
    out = np.empty(matrix.shape, dtype=float)
    for index, x in np.ndenumerate(matrix):
        out[index] = float(x)
    return out


def pp(matrix):
    """Pretty print a matrix as a plain table."""
    return tabulate([[str(x) for x in row] for row in matrix], tablefmt='plain', disable_numparse=True)


def matrix_add(lhs, rhs, scalar_type):
    """
    Elementwise tropical sum of two matrices with the same shape.

    :param lhs: r-by-c matrix
    :param rhs: r-by-c matrix
    :param scalar_type: MaxTropical or MinTropical
    :return: a new r-by-c matrix
    :raises DimensionMismatch: if the shapes differ
    """
    lhs = as_matrix(lhs, scalar_type)
    rhs = as_matrix(rhs, scalar_type)
    if lhs.shape != rhs.shape:
        raise DimensionMismatch('add', lhs.shape, rhs.shape)
    log.debug('%s matrix add: %dx%d', scalar_type.__name__, lhs.shape[0], lhs.shape[1])
    rows, cols = lhs.shape
    result = np.empty((rows, cols), dtype=object)
    for i in range(rows):
        for j in range(cols):
            result[i, j] = lhs[i, j].add(rhs[i, j])
    return result


def matrix_multiply(lhs, rhs, scalar_type):
    """
    Tropical product of an m-by-k matrix and a k-by-n matrix.

    Each cell starts from the additive identity and accumulates
        acc = acc + (lhs[i, t] * rhs[t, j])
    in the semiring, for t = 0, ..., k - 1 (in this order).
    A NaN product (e.g. -inf times +inf) is absorbed by a non-NaN accumulator (fmax/fmin).

    :param lhs: m-by-k matrix
    :param rhs: k-by-n matrix
    :param scalar_type: MaxTropical or MinTropical
    :return: a new m-by-n matrix
    :raises DimensionMismatch: if lhs has a different number of columns than rhs has rows
    """
    lhs = as_matrix(lhs, scalar_type)
    rhs = as_matrix(rhs, scalar_type)
    if lhs.shape[1] != rhs.shape[0]:
        raise DimensionMismatch('multiply', lhs.shape, rhs.shape)
    m, k = lhs.shape
    n = rhs.shape[1]
    log.debug('%s matrix multiply: %dx%d by %dx%d', scalar_type.__name__, m, k, k, n)
    result = np.empty((m, n), dtype=object)
    for i in range(m):
        for j in range(n):
            acc = scalar_type.additive_identity()
            for t in range(k):
                acc.add_assign(lhs[i, t].multiply(rhs[t, j]))
            result[i, j] = acc
    return result


def max_matrix_add(lhs, rhs):
    """Elementwise max of two matrices over the max-plus semiring."""
    return matrix_add(lhs, rhs, MaxTropical)


def max_matrix_multiply(lhs, rhs):
    """Matrix product over the max-plus semiring."""
    return matrix_multiply(lhs, rhs, MaxTropical)


def min_matrix_add(lhs, rhs):
    """Elementwise min of two matrices over the min-plus semiring."""
    return matrix_add(lhs, rhs, MinTropical)


def min_matrix_multiply(lhs, rhs):
    """Matrix product over the min-plus semiring."""
    return matrix_multiply(lhs, rhs, MinTropical)
