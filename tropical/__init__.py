"""
Max-plus and min-plus tropical semirings: scalar types and dense matrix algebra.
"""

import logging

from .exception import DimensionMismatch
from .scalar import Tropical, MaxTropical, MinTropical
from .matrix import as_matrix, zeros, identity, to_real, pp
from .matrix import matrix_add, matrix_multiply
from .matrix import max_matrix_add, max_matrix_multiply, min_matrix_add, min_matrix_multiply

logging.getLogger(__name__).addHandler(logging.NullHandler())
