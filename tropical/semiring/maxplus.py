"""
The max-plus semiring (also known as the max tropical semiring).

NaN follows IEEE fmax: if only one operand is NaN, the other one is returned.
"""

import numpy as np


class MaxPlus(object):
    """
    >>> semi = MaxPlus
    >>> semi.one
    0.0
    >>> semi.zero
    -inf
    >>> print(semi.plus(5.0, semi.zero))  # additive identity
    5.0
    >>> print(semi.plus(5.0, 1.0))  # max
    5.0
    >>> print(semi.times(5.0, semi.one))  # multiplicative identity
    5.0
    >>> print(semi.times(5.0, 1.0))
    6.0
    >>> print(semi.plus(np.nan, 2.0))
    2.0
    >>> print(semi.plus.reduce([1.0, 4.0, -2.0]))
    4.0
    """

    one = 0.0
    zero = -np.inf
    plus = np.fmax
    times = np.add
