"""
PyMatrix: a dense, row-major 2D float matrix for Python.

A value type with explicit copy/move ownership, checked and unchecked
element access, elementwise and scalar arithmetic, matrix product and
transpose, backed by a single contiguous numpy buffer per matrix.

Submodules:
    matrix: The Matrix type
    core: Exceptions, validation, precision configuration
"""

__version__ = "0.1.0"

from pymatrix.core.compute.precision import DEFAULT_DTYPE
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)
from pymatrix.matrix import Matrix

__all__ = [
    "__version__",
    "Matrix",
    "DEFAULT_DTYPE",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
