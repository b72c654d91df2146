"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Every check runs before any buffer is allocated
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_integer(value: Any, name: str) -> int:
    """
    Validate that a value is an integer and return it as int.

    Accepts anything implementing __index__ (int, numpy integers).

    Raises:
        ValidationError: If value is not an integer
    """
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_real(value: Any, name: str) -> float:
    """
    Validate that a value is a real number and return it as float.

    Python ints beyond the float64 range are rejected rather than left
    to fail inside numpy with a bare OverflowError.

    Raises:
        ValidationError: If value is not a real number or is too large
            to represent as a float
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} value too large to represent as a float"
        ) from e


def check_size(value: Any, name: str) -> int:
    """
    Validate a matrix dimension: a non-negative integer.

    Args:
        value: Requested dimension
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    size = check_integer(value, name)
    if size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {size}")
    return size


def check_bounds(row: int, column: int, shape: tuple[int, int]) -> None:
    """
    Verify a (row, column) pair addresses an existing element.

    Args:
        row: Row index
        column: Column index
        shape: (rows, columns) of the matrix

    Raises:
        IndexOutOfRangeError: If either index is negative or too large
    """
    rows, columns = shape
    if not 0 <= row < rows or not 0 <= column < columns:
        raise IndexOutOfRangeError(
            f"Index ({row}, {column}) out of range for matrix of shape {shape}",
            row=row,
            column=column,
            shape=shape,
        )


def check_nested_rows(
    nested: Sequence,
    name: str,
) -> tuple[int, int]:
    """
    Validate a nested literal and return its (rows, columns).

    The column count is the length of the first row; every other row must
    match it.

    Args:
        nested: Outer sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (rows, columns)

    Raises:
        ValidationError: If a row is not a sequence (or is a string)
        DimensionError: If a row's length differs from the first row's
    """
    rows = len(nested)
    if rows == 0:
        return 0, 0

    for i, row in enumerate(nested):
        if (
            isinstance(row, (str, bytes))
            or not isinstance(row, (Sequence, np.ndarray))
            or (isinstance(row, np.ndarray) and row.ndim == 0)
        ):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of numbers"
            )

    columns = len(nested[0])
    for i, row in enumerate(nested):
        if len(row) != columns:
            raise DimensionError(
                f"Inconsistent dimensions. Expected {columns} but got {len(row)} (row {i})",
                operation='literal',
            )
    return rows, columns


def _object_to_float(result: NDArray[Any], name: str) -> NDArray[np.float64]:
    """
    Retry an object array whose entries are all real numbers as float64.

    Python ints beyond the int64/uint64 range make np.asarray fall back
    to object dtype even though every entry is numeric.
    """
    if not all(isinstance(value, numbers.Real) for value in result.flat):
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    try:
        return result.astype(np.float64)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: integer too large to represent as a float"
        ) from e


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like and converts to numpy array. Object dtype is
    accepted only when every entry is a real number (large Python ints);
    such data comes back as float64. Anything else that lands in object
    dtype (None, mixed types) is rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype (not yet cast to the matrix dtype)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _object_to_float(result, name)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have equal shapes.

    Both the row counts and the column counts must agree.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Verb used in the message ('add', 'subtract', 'multiply')

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"Cannot {operation} matrices {left} and {right}: shapes must match.",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Args:
        left: Shape of the left factor (r1, c1)
        right: Shape of the right factor (r2, c2)

    Raises:
        DimensionError: If c1 != r2
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"Cannot multiply matrices {left} and {right}.",
            left_shape=left,
            right_shape=right,
            operation='dot',
        )
