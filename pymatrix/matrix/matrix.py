"""
Matrix: a dense, row-major 2D matrix of floating-point values.

Each Matrix exclusively owns one C-contiguous numpy buffer of shape
(rows, columns), or no buffer at all in the empty state (0 x 0).
Copies are always deep; moves hand the buffer to a new owner and leave
the source empty.

Construction:
    Matrix()                        empty
    Matrix(2, 3)                    zero-filled 2 x 3
    Matrix([[1, 2], [3, 4]])        from a nested literal
    Matrix(other)                   deep copy
    Matrix.move(other)              take other's buffer, other becomes empty
    Matrix.from_array(array)        from any 2D array-like

Access:
    m[row]                          unchecked, writable view of a row
    m.at(row, column)               checked read
    m.set_at(row, column, value)    checked write

Operators:
    m + n, m - n, m * n             elementwise, shapes must match
    m + s, m - s, m * s             with a real scalar
    m.dot(n), m @ n                 matrix product
    m.transpose(), m.T              transpose
"""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterator, Sequence
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.compute.precision import cast_values, is_close, resolve_dtype
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.exceptions import ValidationError
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
from pymatrix.matrix import _kernels
from pymatrix.matrix._format import render


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _require_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
    return value


def _literal_values(nested: Sequence, dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """Validate a nested literal completely, then copy it into a new buffer."""
    rows, columns = check_nested_rows(nested, 'literal')
    if rows == 0:
        return np.zeros((0, 0), dtype=dtype)
    values = check_array(nested, 'literal')
    check_2d(values, 'literal')
    return cast_values(values, dtype, 'literal')


def _array_values(data: ArrayLike, dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """Validate a 2D array-like and copy it into a new buffer."""
    values = check_array(data, 'data')
    check_2d(values, 'data')
    return cast_values(values, dtype, 'data')


class Matrix:
    """
    Dense row-major matrix of floats with exclusive buffer ownership.

    Invariants:
        - rows == 0 and columns == 0 iff there is no buffer (empty state)
        - the buffer shape is always (rows, columns)
        - no two Matrix instances share a buffer

    The element dtype is float32 unless dtype= selects float64.
    """

    # numpy scalars/arrays on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, *args: Any, dtype: DTypeLike | None = None):
        self._rows = 0
        self._columns = 0
        self._elements: NDArray[np.floating[Any]] | None = None

        if len(args) == 1 and isinstance(args[0], Matrix):
            source = args[0]
            self._dtype = source._dtype if dtype is None else resolve_dtype(dtype)
            self._adopt(cast_values(source._view(), self._dtype, 'other'))
            return

        self._dtype = resolve_dtype(dtype)

        if not args:
            return

        if len(args) == 2:
            rows = check_size(args[0], 'rows')
            columns = check_size(args[1], 'columns')
            self._adopt(np.zeros((rows, columns), dtype=self._dtype))
            return

        if len(args) == 1:
            source = args[0]
            if isinstance(source, np.ndarray):
                self._adopt(_array_values(source, self._dtype))
                return
            if isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
                self._adopt(_literal_values(source, self._dtype))
                return
            raise ValidationError(
                f"Matrix: cannot construct from {type(source).__name__}"
            )

        raise ValidationError(
            f"Matrix: expected at most 2 positional arguments, got {len(args)}"
        )

    # === Factories ===

    @classmethod
    def move(cls, source: Matrix) -> Matrix:
        """
        Move-construct: take over source's buffer without copying.

        source is left in the empty state (0 x 0, no buffer).
        """
        _require_matrix(source, 'source')
        result = cls.__new__(cls)
        result._rows = source._rows
        result._columns = source._columns
        result._elements = source._elements
        result._dtype = source._dtype
        source._release()
        return result

    @classmethod
    def from_array(cls, data: ArrayLike, *, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Args:
            data: 2D numeric data. numpy arrays, nested sequences and
                objects exposing a ``.values`` array (pandas DataFrame)
                are accepted. The data is always copied.
            dtype: float32 or float64. Defaults to float32.

        Raises:
            DimensionError: If data is not 2D
            ValidationError: If data is not numeric
        """
        if not isinstance(data, np.ndarray) and hasattr(data, 'values') \
                and not callable(data.values):
            data = data.values
        resolved = resolve_dtype(dtype)
        return cls._wrap(_array_values(data, resolved), resolved)

    @classmethod
    def zeros(cls, rows: int, columns: int, *, dtype: DTypeLike | None = None) -> Matrix:
        """Zero-filled rows x columns matrix."""
        return cls(rows, columns, dtype=dtype)

    @classmethod
    def identity(cls, size: int, *, dtype: DTypeLike | None = None) -> Matrix:
        """size x size matrix with ones on the diagonal."""
        size = check_size(size, 'size')
        resolved = resolve_dtype(dtype)
        return cls._wrap(np.eye(size, dtype=resolved), resolved)

    @classmethod
    def _wrap(cls, values: NDArray[np.floating[Any]], dtype: np.dtype) -> Matrix:
        """Take ownership of a freshly allocated array without validation."""
        result = cls.__new__(cls)
        result._rows = 0
        result._columns = 0
        result._elements = None
        result._dtype = dtype
        result._adopt(values)
        return result

    # === Ownership ===

    def _adopt(self, values: NDArray[np.floating[Any]]) -> None:
        rows, columns = values.shape
        if rows == 0 and columns == 0:
            self._release()
            return
        self._rows = rows
        self._columns = columns
        self._elements = values

    def _release(self) -> None:
        self._rows = 0
        self._columns = 0
        self._elements = None

    def _view(self) -> NDArray[np.floating[Any]]:
        """The buffer, or a 0 x 0 stand-in for the empty state."""
        if self._elements is None:
            return np.zeros((0, 0), dtype=self._dtype)
        return self._elements

    def assign(self, source: Matrix) -> Matrix:
        """
        Copy-assign: replace this matrix's contents with a deep copy of source.

        Assigning a matrix to itself is a no-op. Returns self.
        """
        _require_matrix(source, 'source')
        if source is self:
            return self
        values = source._view().copy()
        self._release()
        self._dtype = source._dtype
        self._adopt(values)
        return self

    def move_assign(self, source: Matrix) -> Matrix:
        """
        Move-assign: drop this matrix's buffer and take over source's.

        source is left empty. Moving a matrix into itself is a no-op.
        Returns self.
        """
        _require_matrix(source, 'source')
        if source is self:
            return self
        self._release()
        self._rows = source._rows
        self._columns = source._columns
        self._elements = source._elements
        self._dtype = source._dtype
        source._release()
        return self

    def copy(self) -> Matrix:
        """Deep copy with an independent buffer."""
        return type(self)(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    # === Queries ===

    def row_size(self) -> int:
        return self._rows

    def column_size(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._rows * self._columns

    @property
    def dtype(self) -> np.dtype:
        """Element dtype (float32 or float64)."""
        return self._dtype

    def data(self) -> NDArray[np.floating[Any]] | None:
        """
        View of the underlying buffer, not writeable by default.

        Returns None in the empty state. Writing through the view raises
        ValueError unless the caller flips its writeable flag, which numpy
        allows; use m[row] or set_at() to mutate.
        """
        if self._elements is None:
            return None
        view = self._elements.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, row: int) -> NDArray[np.floating[Any]]:
        # Unchecked: no bounds validation beyond what numpy itself does.
        return self._elements[row]  # type: ignore[index]

    def __setitem__(self, row: int, values: ArrayLike) -> None:
        self._elements[row] = values  # type: ignore[index]

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        for row in range(self._rows):
            yield self._elements[row]  # type: ignore[index]

    def at(self, row: int, column: int) -> float:
        """
        Checked element read.

        Raises:
            ValidationError: If an index is not an integer
            IndexOutOfRangeError: If row >= rows, column >= columns,
                or either index is negative
        """
        row = check_integer(row, 'row')
        column = check_integer(column, 'column')
        check_bounds(row, column, self.shape)
        return float(self._elements[row, column])  # type: ignore[index]

    def set_at(self, row: int, column: int, value: float) -> None:
        """
        Checked element write. Same index rules as at().

        Raises:
            ValidationError: If an index is not an integer or value is not
                a real number
            IndexOutOfRangeError: If the position is outside the matrix
        """
        row = check_integer(row, 'row')
        column = check_integer(column, 'column')
        check_bounds(row, column, self.shape)
        value = check_real(value, 'value')
        self._elements[row, column] = cast_values(value, self._dtype, 'value')  # type: ignore[index]

    # === Arithmetic ===

    def _elementwise(self, other: Matrix, op: Any, verb: str) -> Matrix:
        check_same_shape(self.shape, other.shape, verb)
        dtype = np.promote_types(self._dtype, other._dtype)
        return type(self)._wrap(
            _kernels.elementwise(self._view(), other._view(), op, dtype), dtype
        )

    def _scalar(self, value: float, op: Any) -> Matrix:
        value = check_real(value, 'scalar')
        return type(self)._wrap(
            _kernels.scalar(self._view(), value, op, self._dtype), self._dtype
        )

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._elementwise(other, operator.add, 'add')
        if _is_scalar(other):
            return self._scalar(other, operator.add)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._scalar(other, operator.add)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._elementwise(other, operator.sub, 'subtract')
        if _is_scalar(other):
            return self._scalar(other, operator.sub)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._scalar(other, _kernels.reflected_sub)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._elementwise(other, operator.mul, 'multiply')
        if _is_scalar(other):
            return self._scalar(other, operator.mul)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._scalar(other, operator.mul)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return type(self)._wrap(np.negative(self._view()), self._dtype)

    def dot(self, matrix: Matrix) -> Matrix:
        """
        Matrix product.

        Requires self.columns == matrix.rows. The result has shape
        (self.rows, matrix.columns) with
        out[i][j] = sum_k self[i][k] * matrix[k][j].

        Raises:
            DimensionError: If the inner dimensions differ
        """
        _require_matrix(matrix, 'matrix')
        check_inner_dimensions(self.shape, matrix.shape)
        dtype = np.promote_types(self._dtype, matrix._dtype)
        return type(self)._wrap(
            _kernels.matmul(self._view(), matrix._view(), dtype), dtype
        )

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.dot(other)
        return NotImplemented

    def transpose(self) -> Matrix:
        """New (columns x rows) matrix with out[i][j] = self[j][i]."""
        return type(self)._wrap(_kernels.transpose(self._view()), self._dtype)

    @property
    def T(self) -> Matrix:
        """Transpose (always a new matrix)."""
        return self.transpose()

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._view(), other._view()))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Elementwise closeness within a tolerance.

        Tolerances default to the tier for the operands' dtypes
        (see pymatrix.core.compute.tolerances). Different shapes compare
        as not close.
        """
        _require_matrix(other, 'other')
        if self.shape != other.shape:
            return False
        tier = select_tolerance(self._dtype, other._dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.all(is_close(self._view(), other._view(), rtol, atol)))

    # === Conversion ===

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Owned copy of the elements, shape (rows, columns)."""
        return self._view().copy()

    def tolist(self) -> list[list[float]]:
        """Nested Python lists of floats."""
        return self._view().tolist()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray:
        if copy is False:
            raise ValueError("Matrix does not share its buffer; a copy is required")
        return np.array(self._view(), dtype=dtype, copy=True)

    # === Rendering ===

    def __str__(self) -> str:
        return render(self._view())

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return render(self._view(), spec)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, dtype={self._dtype.name})"
