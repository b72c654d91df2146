"""
Core infrastructure for PyMatrix.

This module provides the exception hierarchy, input validators, and the
numeric configuration shared by the matrix type.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Dtype configuration, precision utilities, tolerance tiers
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
