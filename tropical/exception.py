"""
Errors raised by tropical matrix operations.
"""


class DimensionMismatch(ValueError):
    """Exception raised when the shapes of two matrices are incompatible with an operation.

    Attributes:
    operation -- name of the operation that refused to proceed
    lhs_shape -- (rows, cols) of the left operand
    rhs_shape -- (rows, cols) of the right operand
    """

    def __init__(self, operation, lhs_shape, rhs_shape):
        self.operation = operation
        self.lhs_shape = tuple(lhs_shape)
        self.rhs_shape = tuple(rhs_shape)
        super(DimensionMismatch, self).__init__(operation, self.lhs_shape, self.rhs_shape)

    def __repr__(self):
        return 'DimensionMismatch(%r, %r, %r)' % (self.operation, self.lhs_shape, self.rhs_shape)

    def __str__(self):
        return 'Cannot %s a %dx%d matrix and a %dx%d matrix' % ((self.operation,) + self.lhs_shape + self.rhs_shape)
