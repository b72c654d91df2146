"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_integer / check_size: index and dimension arguments
    - check_real: scalar values
    - check_bounds: checked-access bounds
    - check_nested_rows: literal row consistency
    - check_array: conversion, object/string/complex rejection
    - check_2d: dimensionality
    - check_same_shape / check_inner_dimensions: operand compatibility
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_bounds,
    check_inner_dimensions,
    check_integer,
    check_nested_rows,
    check_real,
    check_same_shape,
    check_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_integer / check_size / check_real
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:
    """check_size accepts non-negative integers only."""

    def test_int_passes(self):
        assert check_size(3, "rows") == 3

    def test_zero_passes(self):
        assert check_size(0, "rows") == 0

    def test_numpy_integer_passes(self):
        result = check_size(np.int64(4), "rows")
        assert result == 4
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative, got -1"):
            check_size(-1, "rows")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer, got float"):
            check_size(2.0, "rows")

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            check_size("2", "rows")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="columns"):
            check_size(-5, "columns")

    def test_check_integer_allows_negative(self):
        """Sign is a bounds question, not a type question."""
        assert check_integer(-1, "row") == -1


class TestCheckReal:
    """check_real accepts real numbers representable as a float."""

    def test_int_becomes_float(self):
        result = check_real(3, "value")
        assert result == 3.0
        assert type(result) is float

    def test_numpy_scalar_passes(self):
        assert check_real(np.float32(0.5), "value") == 0.5

    def test_large_int_within_float_range(self):
        assert check_real(2**64, "value") == float(2**64)

    def test_int_beyond_float_range_rejected(self):
        with pytest.raises(ValidationError, match="value: .* too large to represent as a float"):
            check_real(10**400, "value")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="expected a real number, got str"):
            check_real("1", "value")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="got complex"):
            check_real(1 + 2j, "value")


# ═══════════════════════════════════════════════════════════════════════
# check_bounds
# ═══════════════════════════════════════════════════════════════════════


class TestCheckBounds:
    """check_bounds rejects positions outside [0, rows) x [0, columns)."""

    def test_inside_passes(self):
        check_bounds(1, 2, (2, 3))

    def test_origin_passes(self):
        check_bounds(0, 0, (1, 1))

    def test_row_equal_to_rows_raises(self):
        with pytest.raises(IndexOutOfRangeError):
            check_bounds(2, 0, (2, 3))

    def test_column_equal_to_columns_raises(self):
        with pytest.raises(IndexOutOfRangeError):
            check_bounds(0, 3, (2, 3))

    def test_negative_row_raises(self):
        with pytest.raises(IndexOutOfRangeError):
            check_bounds(-1, 0, (2, 3))

    def test_negative_column_raises(self):
        with pytest.raises(IndexOutOfRangeError):
            check_bounds(0, -1, (2, 3))

    def test_empty_shape_rejects_everything(self):
        with pytest.raises(IndexOutOfRangeError):
            check_bounds(0, 0, (0, 0))

    def test_error_carries_position_and_shape(self):
        with pytest.raises(IndexOutOfRangeError, match=r"\(5, 1\).*\(2, 3\)") as exc_info:
            check_bounds(5, 1, (2, 3))
        assert exc_info.value.row == 5
        assert exc_info.value.column == 1
        assert exc_info.value.shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_nested_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNestedRows:
    """check_nested_rows returns (rows, columns) or rejects ragged literals."""

    def test_rectangular(self):
        assert check_nested_rows([[1, 2, 3], [4, 5, 6]], "literal") == (2, 3)

    def test_tuples(self):
        assert check_nested_rows(((1.0,), (2.0,)), "literal") == (2, 1)

    def test_empty_outer(self):
        assert check_nested_rows([], "literal") == (0, 0)

    def test_single_empty_row(self):
        assert check_nested_rows([[]], "literal") == (1, 0)

    def test_short_second_row_raises(self):
        with pytest.raises(DimensionError, match="Expected 2 but got 1"):
            check_nested_rows([[1, 2], [3]], "literal")

    def test_long_later_row_raises(self):
        with pytest.raises(DimensionError, match=r"Expected 1 but got 2 \(row 2\)"):
            check_nested_rows([[1], [2], [3, 4]], "literal")

    def test_columns_taken_from_first_row(self):
        """A longer first row makes the others the inconsistent ones."""
        with pytest.raises(DimensionError, match="Expected 3 but got 2"):
            check_nested_rows([[1, 2, 3], [4, 5]], "literal")

    def test_dimension_error_names_operation(self):
        with pytest.raises(DimensionError) as exc_info:
            check_nested_rows([[1, 2], [3]], "literal")
        assert exc_info.value.operation == "literal"

    def test_scalar_row_rejected(self):
        with pytest.raises(ValidationError, match="row 1 is int"):
            check_nested_rows([[1, 2], 3], "literal")

    def test_string_row_rejected(self):
        with pytest.raises(ValidationError, match="row 0 is str"):
            check_nested_rows(["ab", "cd"], "literal")

    def test_numpy_rows_accepted(self):
        assert check_nested_rows([np.ones(2), np.zeros(2)], "literal") == (2, 2)

    def test_zero_dim_array_row_rejected(self):
        with pytest.raises(ValidationError, match="row 0 is ndarray"):
            check_nested_rows([np.array(1.0)], "literal")


# ═══════════════════════════════════════════════════════════════════════
# check_array / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_array(self):
        result = check_array([[1, 2], [3, 4]], "data")
        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 2)

    def test_float32_preserved(self):
        arr = np.array([[1.0, 2.0]], dtype=np.float32)
        assert check_array(arr, "data").dtype == np.float32

    def test_bool_accepted(self):
        result = check_array([[True, False]], "data")
        assert result.dtype == np.bool_

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[None, 1.0]], "data")

    def test_large_python_ints_become_float64(self):
        """Ints past uint64 make numpy fall back to object dtype."""
        result = check_array([[2**64, 1]], "data")
        assert result.dtype == np.float64
        assert result[0, 0] == float(2**64)

    def test_rejects_int_beyond_float_range(self):
        with pytest.raises(ValidationError, match="too large to represent as a float"):
            check_array([[10**400, 1]], "data")

    def test_rejects_large_int_mixed_with_none(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[2**64, None]], "data")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "data")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([[1 + 2j]], "data")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_data"):
            check_array([["x"]], "my_data")


class TestCheck2d:
    """check_2d enforces exactly two dimensions."""

    def test_2d_passes(self):
        check_2d(np.ones((2, 3)), "data")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.ones(3), "data")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match=r"shape \(2, 3, 4\)"):
            check_2d(np.ones((2, 3, 4)), "data")


# ═══════════════════════════════════════════════════════════════════════
# check_same_shape / check_inner_dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestOperandShapes:
    """Operand compatibility checks for elementwise ops and dot."""

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_rows_different_columns_raises(self):
        with pytest.raises(DimensionError, match=r"Cannot add matrices \(2, 3\) and \(2, 2\)"):
            check_same_shape((2, 3), (2, 2), "add")

    def test_different_rows_raises(self):
        with pytest.raises(DimensionError):
            check_same_shape((3, 2), (2, 2), "subtract")

    def test_same_shape_error_attributes(self):
        with pytest.raises(DimensionError) as exc_info:
            check_same_shape((1, 2), (2, 1), "multiply")
        assert exc_info.value.left_shape == (1, 2)
        assert exc_info.value.right_shape == (2, 1)
        assert exc_info.value.operation == "multiply"

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5))

    def test_inner_dimensions_mismatch(self):
        with pytest.raises(
            DimensionError,
            match=r"Cannot multiply matrices \(2, 3\) and \(2, 2\)\.",
        ):
            check_inner_dimensions((2, 3), (2, 2))

    def test_inner_dimensions_zero_passes(self):
        check_inner_dimensions((2, 0), (0, 4))
