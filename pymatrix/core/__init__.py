"""
Core infrastructure for PyMatrix.

Shared abstractions used by the algebra kernel and the regression layer.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision, tolerances and decompositions
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    NullInputError,
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "NullInputError",
    "DimensionError",
    "DimensionMismatchError",
    "InvalidDimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
