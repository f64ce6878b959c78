"""
Scalar types of the tropical semirings.

A single generic implementation (`Tropical`) is parameterised by a semiring policy (see `tropical.semiring`).
`MaxTropical` binds it to max-plus and `MinTropical` binds it to min-plus.

Nothing here raises on numeric grounds: the algebra is total over the extended reals.
In particular `(-inf) + (+inf)` is NaN under float rules and we let it be.
"""

import math

import numpy as np

from tropical.semiring import MaxPlus, MinPlus


class Tropical(object):
    """
    Base class of tropical scalars. Subclasses set `semiring` to a policy.

    Equality and ordering delegate to the underlying float (IEEE-754 rules included).
    Scalars are not hashable because `add_assign` and `multiply_assign` mutate them.
    """

    semiring = None

    __slots__ = ('_value',)

    __hash__ = None

    def __init__(self, value):
        self.policy()
        self._value = float(value)

    @property
    def value(self):
        """The underlying float."""
        return self._value

    @classmethod
    def policy(cls):
        """The semiring policy bound to this type."""
        if cls.semiring is None:
            raise TypeError('%s has no semiring, use MaxTropical or MinTropical' % cls.__name__)
        return cls.semiring

    @classmethod
    def additive_identity(cls):
        return cls(cls.policy().zero)

    @classmethod
    def multiplicative_identity(cls):
        return cls(cls.policy().one)

    zero = additive_identity
    one = multiplicative_identity

    def _check(self, other):
        if not isinstance(other, self.__class__):
            raise TypeError('Expected %s, got %s' % (self.__class__.__name__, type(other).__name__))
        return other

    def add(self, other):
        """Tropical sum, i.e. the semiring's plus (max or min)."""
        self._check(other)
        return self.__class__(self.semiring.plus(self._value, other._value))

    def multiply(self, other):
        """Tropical product, i.e. the ordinary sum of the underlying floats."""
        self._check(other)
        return self.__class__(self._times(other))

    def _times(self, other):
        # -inf + inf is NaN and stays NaN
        with np.errstate(invalid='ignore'):
            return float(self.semiring.times(self._value, other._value))

    def add_assign(self, other):
        self._check(other)
        self._value = float(self.semiring.plus(self._value, other._value))
        return self

    def multiply_assign(self, other):
        self._check(other)
        self._value = self._times(other)
        return self

    def __add__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.multiply(other)

    def __iadd__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.add_assign(other)

    def __imul__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.multiply_assign(other)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._value >= other._value

    def __float__(self):
        return self._value

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._value)

    def __str__(self):
        if math.isnan(self._value):
            return 'NaN'
        return str(self._value)


class MaxTropical(Tropical):
    """
    An element of the max-plus semiring.

    >>> MaxTropical(5.0) + MaxTropical(1.0)
    MaxTropical(5.0)
    >>> MaxTropical(5.0) * MaxTropical(1.0)
    MaxTropical(6.0)
    >>> MaxTropical.add(MaxTropical(5.0), MaxTropical.ninf())
    MaxTropical(5.0)
    >>> MaxTropical(5.0).multiply(MaxTropical.multiplicative_identity())
    MaxTropical(5.0)
    >>> x = MaxTropical(2.0)
    >>> x += MaxTropical(3.0)
    >>> x
    MaxTropical(3.0)
    >>> print(MaxTropical.ninf() * MaxTropical(float('inf')))
    NaN
    """

    __slots__ = ()

    semiring = MaxPlus

    @classmethod
    def ninf(cls):
        """Negative infinity, the additive identity."""
        return cls(-math.inf)


class MinTropical(Tropical):
    """
    An element of the min-plus semiring.

    >>> MinTropical(5.0) + MinTropical(1.0)
    MinTropical(1.0)
    >>> MinTropical(5.0) * MinTropical(1.0)
    MinTropical(6.0)
    >>> MinTropical.add(MinTropical(5.0), MinTropical.inf())
    MinTropical(5.0)
    >>> print(MinTropical.additive_identity())
    inf
    """

    __slots__ = ()

    semiring = MinPlus

    @classmethod
    def inf(cls):
        """Positive infinity, the additive identity."""
        return cls(math.inf)
