"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Input problems (bad sizes, mismatched shapes,
out-of-range indices) are all ValidationErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: negative
    sizes, non-numeric entries, unsupported dtypes, non-integer indices.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a literal has rows of different lengths, when two operands
    of an elementwise operation differ in shape, or when the inner
    dimensions of a matrix product disagree.

    Attributes:
        left_shape: Shape of the left operand, if the error involves two operands
        right_shape: Shape of the right operand, if the error involves two operands
        operation: Name of the failing operation ('add', 'dot', 'literal', ...)
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Checked element access outside the matrix bounds.

    Raised by Matrix.at() and Matrix.set_at() when either index is negative
    or not smaller than the corresponding dimension. Also an IndexError so
    generic sequence-handling code can catch it.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the matrix at the time of access
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape
