"""
Numerical precision constants and utilities.

Provides the element dtype configuration, machine epsilon, checked casts
into the matrix dtype, and the closeness test used by Matrix.allclose().
"""

import warnings

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pymatrix.core.exceptions import ValidationError


# Element type of a Matrix unless dtype= says otherwise (single precision)
DEFAULT_DTYPE: np.dtype = np.dtype(np.float32)

# Element types a Matrix may hold
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float32),
    np.dtype(np.float64),
)

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def resolve_dtype(dtype: DTypeLike | None) -> np.dtype:
    """
    Normalize a dtype argument to one of SUPPORTED_DTYPES.

    Args:
        dtype: Requested dtype, or None for DEFAULT_DTYPE

    Returns:
        The resolved numpy dtype

    Raises:
        ValidationError: If the dtype is not understood or not supported
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a valid dtype: {dtype!r}") from e
    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(d.name for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: {resolved.name} is not supported, expected one of {supported}"
        )
    return resolved


def machine_epsilon(dtype: np.dtype | type = np.float32) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def cast_values(
    values: ArrayLike,
    dtype: np.dtype,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Cast numeric values into the matrix dtype, warning on overflow.

    Finite inputs that become infinite in the target dtype (1e39 into
    float32, for example) are reported with a single RuntimeWarning.
    numpy's own cast warning is suppressed in favour of this one.

    Args:
        values: Numeric array-like to cast
        dtype: Target dtype (one of SUPPORTED_DTYPES)
        name: Parameter name for the warning message

    Returns:
        A newly allocated C-contiguous array of the target dtype
    """
    source = np.asarray(values)
    with np.errstate(over='ignore', invalid='ignore'):
        result = np.array(source, dtype=dtype, order='C', copy=True)

    if result.size and np.issubdtype(source.dtype, np.floating):
        n_overflow = int(np.sum(np.isinf(result) & np.isfinite(source)))
        if n_overflow:
            warnings.warn(
                f"{name}: {n_overflow} finite value(s) overflow {dtype.name} "
                f"and were stored as inf",
                RuntimeWarning,
                stacklevel=2,
            )
    return result


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
