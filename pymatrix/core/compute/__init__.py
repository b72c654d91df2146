"""
Shared numeric infrastructure for PyMatrix.

Submodules:
    precision: Element dtype configuration, epsilon, checked casts
    tolerances: Tolerance tiers for floating-point comparison
"""

from pymatrix.core.compute.precision import (
    DEFAULT_DTYPE,
    SUPPORTED_DTYPES,
    EPSILON_32,
    EPSILON_64,
    cast_values,
    is_close,
    machine_epsilon,
    resolve_dtype,
)
from pymatrix.core.compute.tolerances import (
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Precision
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "EPSILON_32",
    "EPSILON_64",
    "cast_values",
    "is_close",
    "machine_epsilon",
    "resolve_dtype",
    # Tolerances
    "FP32",
    "FP64",
    "ToleranceTier",
    "select_tolerance",
]
