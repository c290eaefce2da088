"""
Shared operand handling for the algebra kernel.

Every public operation converts its operands here, at the boundary, and
allocates (or validates) its output buffer here before any arithmetic
runs. Nothing in this module writes to an output.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    ValidationError,
)
from pymatrix.core.validation import check_array, check_not_none, check_scalar


class OperandKind(Enum):
    """Shape tag used by the dispatching entry points."""
    SCALAR = 'scalar'
    VECTOR = 'vector'
    MATRIX = 'matrix'


def classify(value: Any, name: str) -> tuple[OperandKind, Any]:
    """
    Tag an operand and convert it.

    Args:
        value: Real scalar, vector-like or matrix-like operand
        name: Parameter name for error messages

    Returns:
        (kind, converted) where converted is a float/NumPy scalar for
        SCALAR and a floating ndarray otherwise

    Raises:
        NullInputError: If value is None
        ValidationError: If value is not numeric
        DimensionError: If value has more than 2 dimensions
    """
    check_not_none(value, name)

    if isinstance(value, numbers.Number) and not isinstance(value, np.ndarray):
        return OperandKind.SCALAR, check_scalar(value, name)

    array = check_array(value, name)
    if array.ndim == 0:
        return OperandKind.SCALAR, array[()]
    if array.ndim == 1:
        return OperandKind.VECTOR, array
    if array.ndim == 2:
        return OperandKind.MATRIX, array
    raise DimensionError(
        f"{name}: expected a scalar, 1D or 2D operand, got {array.ndim}D with shape {array.shape}"
    )


def check_operand_array(value: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert an operand that may be either a vector or a matrix."""
    array = check_array(value, name)
    if array.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {array.ndim}D with shape {array.shape}"
        )
    return array


def unsupported(operation: str, kind_a: OperandKind, kind_b: OperandKind) -> ValidationError:
    """Build the error raised for a kind pair with no dispatch entry."""
    return ValidationError(
        f"{operation}: unsupported operand kinds ({kind_a.value}, {kind_b.value})"
    )


def result_dtype(*operands: Any) -> np.dtype:
    """Floating dtype an operation computes in (float32 only if every array operand is)."""
    dtype = np.result_type(*operands)
    if not np.issubdtype(dtype, np.floating):
        return np.dtype(np.float64)
    return dtype


def prepare_out(
    out: NDArray[np.floating[Any]] | None,
    shape: tuple[int, ...],
    dtype: np.dtype,
    operands: dict[str, Any],
) -> NDArray[np.floating[Any]]:
    """
    Allocate the result buffer, or validate a caller-supplied one.

    A supplied buffer must be an ndarray of exactly `shape`, floating,
    writeable, able to hold `dtype` under same-kind casting, and must not
    share memory with any array operand. Validation completes before the
    caller writes anything, so a rejected buffer is left untouched.

    Args:
        out: Caller-owned buffer, or None to allocate
        shape: Exact shape of the result
        dtype: dtype the result is computed in
        operands: Converted operands by name, checked for aliasing

    Returns:
        The buffer to write into

    Raises:
        ValidationError: If out is not a usable, non-aliased buffer
        DimensionMismatchError: If out has the wrong shape
    """
    if out is None:
        return np.empty(shape, dtype=dtype)

    if not isinstance(out, np.ndarray):
        raise ValidationError(
            f"out: expected numpy.ndarray, got {type(out).__name__}"
        )
    if out.shape != shape:
        raise DimensionMismatchError(
            f"out: shape must equal result shape {shape}, got {out.shape}",
            operand='out',
            axis='shape',
            expected=shape,
            actual=out.shape,
        )
    if not np.issubdtype(out.dtype, np.floating):
        raise ValidationError(
            f"out: expected floating dtype, got {out.dtype}"
        )
    if not np.can_cast(dtype, out.dtype, casting='same_kind'):
        raise ValidationError(
            f"out: cannot store {dtype} result in {out.dtype} buffer"
        )
    if not out.flags.writeable:
        raise ValidationError("out: buffer is read-only")
    for name, operand in operands.items():
        if isinstance(operand, np.ndarray) and np.may_share_memory(out, operand):
            raise ValidationError(
                f"out: buffer overlaps operand {name}; in-place operations "
                f"require disjoint input and output storage"
            )
    return out
