"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    NullInputError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
)


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required operand is present.

    Args:
        value: Operand to check
        name: Parameter name for error messages

    Raises:
        NullInputError: If value is None
    """
    if value is None:
        raise NullInputError(f"{name}: required operand is None", operand=name)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and ragged nested sequences.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype (float32 input is preserved)

    Raises:
        NullInputError: If input is None
        ValidationError: If input cannot be converted to numeric array
    """
    check_not_none(array, name)

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # Integer data is promoted, floating data keeps its precision
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar operand.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float (NumPy floating scalars are kept so
        their precision survives)

    Raises:
        NullInputError: If value is None
        ValidationError: If value is not a real number
    """
    check_not_none(value, name)
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    if isinstance(value, np.floating):
        return value
    return float(value)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_vector(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a vector operand.

    Returns:
        1D floating array

    Raises:
        NullInputError: If input is None
        ValidationError: If input is not numeric
        DimensionError: If input is not 1D
    """
    result = check_array(array, name)
    check_1d(result, name)
    return result


def check_matrix(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a matrix operand.

    Returns:
        2D floating array

    Raises:
        NullInputError: If input is None
        ValidationError: If input is not numeric or is ragged
        DimensionError: If input is not 2D
    """
    result = check_array(array, name)
    check_2d(result, name)
    return result


def check_square(matrix: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        NotSquareError: If rows != columns
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: expected a square matrix, got shape {matrix.shape}",
            operand=name,
            shape=matrix.shape,
        )


def check_dimension_match(
    actual: int,
    expected: int,
    *,
    operand: str,
    axis: str,
    against: str,
) -> None:
    """
    Verify one dimension of an operand agrees with another operand.

    Args:
        actual: Size found on the checked operand
        expected: Size required by the other operand
        operand: Name of the checked operand
        axis: Which dimension of the checked operand ('rows', 'columns', 'length')
        against: Description of where the expected size came from

    Raises:
        DimensionMismatchError: If sizes differ
    """
    if actual != expected:
        raise DimensionMismatchError(
            f"{operand}: {axis} must equal {against} ({expected}), got {actual}",
            operand=operand,
            axis=axis,
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two arrays have identical shape.

    Raises:
        DimensionMismatchError: On the first disagreeing axis
    """
    name_a, name_b = names
    if a.ndim != b.ndim:
        raise DimensionError(
            f"{name_b}: expected {a.ndim}D array to match {name_a}, got {b.ndim}D"
        )
    axes = ('length',) if a.ndim == 1 else ('rows', 'columns')
    for axis, size_a, size_b in zip(axes, a.shape, b.shape):
        check_dimension_match(
            size_b, size_a, operand=name_b, axis=axis, against=f"{axis} of {name_a}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionMismatchError(
            f"Inconsistent lengths: {details}",
            operand=names[1],
            axis='length',
            expected=lengths[0],
            actual=lengths[1],
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )
