"""
A tropical semiring policy defines the following

    one => the multiplicative identity (0.0)
    zero => the additive identity (-inf for max-plus, +inf for min-plus)
    plus => addition (fmax or fmin)
    times => multiplication (ordinary sum)

The operators `plus` and `times` are numpy ufuncs.
That is, they can be applied to a pair of elements, or, a list of elements can be reduced through op.reduce.

Scalar types (see `tropical.scalar`) bind to a policy through their `semiring` attribute.
"""

from .maxplus import MaxPlus
from .minplus import MinPlus
