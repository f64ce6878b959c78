"""
The min-plus semiring (also known as the min tropical semiring).
Shortest-path problems live here.

NaN follows IEEE fmin: if only one operand is NaN, the other one is returned.
"""

import numpy as np


class MinPlus(object):
    """
    >>> semi = MinPlus
    >>> semi.one
    0.0
    >>> semi.zero
    inf
    >>> print(semi.plus(5.0, semi.zero))  # additive identity
    5.0
    >>> print(semi.plus(5.0, 1.0))  # min
    1.0
    >>> print(semi.times(5.0, semi.one))  # multiplicative identity
    5.0
    >>> print(semi.times(5.0, 1.0))
    6.0
    >>> print(semi.plus(2.0, np.nan))
    2.0
    >>> print(semi.plus.reduce([1.0, 4.0, -2.0]))
    -2.0
    """

    one = 0.0
    zero = np.inf
    plus = np.fmin
    times = np.add
