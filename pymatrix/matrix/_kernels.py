"""
Array kernels behind the Matrix operators.

Every kernel takes plain 2D numpy arrays, allocates a fresh C-contiguous
result, and never returns a view of its inputs. Shape validation happens
in the caller, before any kernel runs.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray


FloatArray = NDArray[np.floating[Any]]
BinaryOp = Callable[[Any, Any], Any]


def elementwise(
    left: FloatArray,
    right: FloatArray,
    op: BinaryOp,
    dtype: np.dtype,
) -> FloatArray:
    """
    Combine two equally shaped arrays position by position.

    Args:
        left: Left operand (r x c)
        right: Right operand (r x c)
        op: Binary operation (operator.add, operator.sub, operator.mul)
        dtype: Result dtype

    Returns:
        New (r x c) array with out[i, j] = op(left[i, j], right[i, j])
    """
    out = np.empty(left.shape, dtype=dtype)
    out[...] = op(left.astype(dtype, copy=False), right.astype(dtype, copy=False))
    return out


def scalar(
    values: FloatArray,
    value: float,
    op: BinaryOp,
    dtype: np.dtype,
) -> FloatArray:
    """
    Apply op(element, value) to every element.

    The scalar is converted to the result dtype first so a float64 scalar
    does not promote a float32 matrix.
    """
    out = np.empty(values.shape, dtype=dtype)
    out[...] = op(values, dtype.type(value))
    return out


def reflected_sub(values: FloatArray, value: Any) -> FloatArray:
    """value - element, for scalar - Matrix."""
    return value - values


def matmul(
    left: FloatArray,
    right: FloatArray,
    dtype: np.dtype,
) -> FloatArray:
    """
    Matrix product out[i, j] = sum_k left[i, k] * right[k, j].

    The output starts zero-filled, so an empty inner dimension yields an
    all-zero result and an empty outer dimension an empty one.

    Args:
        left: (r x n) array
        right: (n x c) array
        dtype: Result dtype

    Returns:
        New (r x c) array
    """
    out = np.zeros((left.shape[0], right.shape[1]), dtype=dtype)
    if left.shape[1] == 0 or out.size == 0:
        return out
    np.matmul(left.astype(dtype, copy=False), right.astype(dtype, copy=False), out=out)
    return out


def transpose(values: FloatArray) -> FloatArray:
    """Return a new C-contiguous array holding values transposed."""
    # .T of a single row or column is already C-contiguous, so
    # ascontiguousarray would hand back a view. Copy explicitly.
    return values.T.copy(order='C')
