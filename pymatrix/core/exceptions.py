"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape problems are ValidationErrors; numerical
breakdowns reported by the decomposition layer are NumericalErrors.

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

    Raised when user-provided inputs fail validation checks.
    """
    pass


class NullInputError(ValidationError):
    """
    A required operand is absent.

    Attributes:
        operand: Name of the missing operand
    """

    def __init__(self, message: str, operand: str | None = None):
        super().__init__(message)
        self.operand = operand


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an operand has the wrong number of dimensions. Subclasses
    describe the more specific shape failures.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operand: Name of the operand whose size disagreed
        axis: Which dimension disagreed ('rows', 'columns', 'length', ...)
        expected: Size required by the other operand(s)
        actual: Size actually found
    """

    def __init__(
        self,
        message: str,
        operand: str | None = None,
        axis: str | None = None,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operand = operand
        self.axis = axis
        self.expected = expected
        self.actual = actual


class InvalidDimensionError(DimensionError):
    """
    Operand does not have the fixed size the operation requires.

    Raised, for example, when a cross product receives a vector that is
    not 3-dimensional.

    Attributes:
        operand: Name of the offending operand
        expected: Required size
        actual: Size actually found
    """

    def __init__(
        self,
        message: str,
        operand: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.operand = operand
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operand: Name of the offending operand
        shape: Shape actually found
    """

    def __init__(
        self,
        message: str,
        operand: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operand = operand
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by the decomposition layer when a solve requires invertibility
    but the matrix is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
