"""
Addition, subtraction and scalar division.

Element-wise operations over same-shape operands, a vector broadcast
across one matrix dimension, and scalar offsets and quotients. Operand
order is always significant: subtract_scalar(a, x) is a - x while
subtract_from_scalar(x, a) is x - a, and likewise for the two divides.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra._common import (
    OperandKind,
    check_operand_array,
    classify,
    prepare_out,
    result_dtype,
    unsupported,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_dimension_match,
    check_matrix,
    check_same_shape,
    check_scalar,
    check_vector,
)

Array = NDArray[np.floating[Any]]

# dimension argument of add_vector / subtract_vector
ROWWISE = 0
COLUMNWISE = 1


def _elementwise(ufunc, a: ArrayLike, b: ArrayLike, out: Array | None) -> Array:
    a = check_operand_array(a, 'a')
    b = check_operand_array(b, 'b')
    check_same_shape(a, b, names=('a', 'b'))
    result = prepare_out(out, a.shape, result_dtype(a, b), {'a': a, 'b': b})
    ufunc(a, b, out=result)
    return result


def add_arrays(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Element-wise a + b for two vectors or two matrices of identical shape.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    return _elementwise(np.add, a, b, out)


def subtract_arrays(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Element-wise a - b for two vectors or two matrices of identical shape.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    return _elementwise(np.subtract, a, b, out)


def _broadcast(matrix: Array, vector: Array, dimension: int) -> Array:
    """
    Shape `vector` so it broadcasts along the requested matrix dimension.

    dimension=0 (ROWWISE): vector[j] applies to every row, len == columns.
    dimension=1 (COLUMNWISE): vector[i] applies to every column, len == rows.
    """
    if isinstance(dimension, bool) or dimension not in (ROWWISE, COLUMNWISE):
        raise ValidationError(
            f"dimension: expected 0 (row-wise) or 1 (column-wise), got {dimension!r}"
        )
    rows, cols = matrix.shape
    if dimension == ROWWISE:
        check_dimension_match(
            vector.shape[0], cols, operand='v', axis='length', against='columns of a'
        )
        return vector[np.newaxis, :]
    check_dimension_match(
        vector.shape[0], rows, operand='v', axis='length', against='rows of a'
    )
    return vector[:, np.newaxis]


def _vector_broadcast(ufunc, a: ArrayLike, v: ArrayLike, dimension: int, out: Array | None) -> Array:
    a = check_matrix(a, 'a')
    v = check_vector(v, 'v')
    shaped = _broadcast(a, v, dimension)
    result = prepare_out(out, a.shape, result_dtype(a, v), {'a': a, 'v': v})
    ufunc(a, shaped, out=result)
    return result


def add_vector(
    a: ArrayLike, v: ArrayLike, dimension: int, *, out: Array | None = None
) -> Array:
    """
    Add a vector to every row or every column of a matrix.

    Args:
        a: Matrix (m x n)
        v: Vector, length n for dimension=0, length m for dimension=1
        dimension: 0 adds v[j] to each row, 1 adds v[i] to each column
        out: Optional (m x n) buffer

    Raises:
        ValidationError: If dimension is not 0 or 1
        DimensionMismatchError: If len(v) does not match that dimension
    """
    return _vector_broadcast(np.add, a, v, dimension, out)


def subtract_vector(
    a: ArrayLike, v: ArrayLike, dimension: int, *, out: Array | None = None
) -> Array:
    """
    Subtract a vector from every row or every column of a matrix.

    See add_vector for the meaning of `dimension`.
    """
    return _vector_broadcast(np.subtract, a, v, dimension, out)


def _with_scalar(ufunc, a: ArrayLike, x: float, out: Array | None, reverse: bool = False) -> Array:
    a = check_operand_array(a, 'a')
    x = check_scalar(x, 'x')
    result = prepare_out(out, a.shape, result_dtype(a, x), {'a': a})
    with np.errstate(divide='ignore', invalid='ignore'):
        if reverse:
            ufunc(x, a, out=result)
        else:
            ufunc(a, x, out=result)
    return result


def add_scalar(a: ArrayLike, x: float, *, out: Array | None = None) -> Array:
    """r[i] = a[i] + x for a vector or matrix a."""
    return _with_scalar(np.add, a, x, out)


def subtract_scalar(a: ArrayLike, x: float, *, out: Array | None = None) -> Array:
    """r[i] = a[i] - x for a vector or matrix a."""
    return _with_scalar(np.subtract, a, x, out)


def subtract_from_scalar(x: float, a: ArrayLike, *, out: Array | None = None) -> Array:
    """r[i] = x - a[i] for a vector or matrix a."""
    return _with_scalar(np.subtract, a, x, out, reverse=True)


def divide_by_scalar(a: ArrayLike, x: float, *, out: Array | None = None) -> Array:
    """
    r[i] = a[i] / x for a vector or matrix a.

    x == 0 yields inf/NaN entries; no error is raised.
    """
    return _with_scalar(np.divide, a, x, out)


def divide_scalar_by(x: float, a: ArrayLike, *, out: Array | None = None) -> Array:
    """
    r[i] = x / a[i] for a vector or matrix a.

    Zero entries of a yield inf/NaN; no error is raised.
    """
    return _with_scalar(np.divide, a, x, out, reverse=True)


def _dispatch_additive(
    operation: str,
    same_kind: Callable[..., Array],
    broadcast: Callable[..., Array],
    array_scalar: Callable[..., Array],
    scalar_array: Callable[..., Array],
    scalar_scalar: Callable[[Any, Any], Any],
    a: Any,
    b: Any,
    dimension: int | None,
    out: Array | None,
) -> Any:
    kind_a, a = classify(a, 'a')
    kind_b, b = classify(b, 'b')

    if dimension is not None and (kind_a, kind_b) != (OperandKind.MATRIX, OperandKind.VECTOR):
        raise ValidationError(
            f"{operation}: dimension applies only to a matrix with a vector, "
            f"got ({kind_a.value}, {kind_b.value})"
        )

    if kind_a is OperandKind.SCALAR and kind_b is OperandKind.SCALAR:
        if out is not None:
            raise ValidationError("out: not supported for a scalar result")
        return scalar_scalar(a, b)
    if kind_a is OperandKind.SCALAR:
        return scalar_array(a, b, out=out)
    if kind_b is OperandKind.SCALAR:
        return array_scalar(a, b, out=out)
    if kind_a is kind_b:
        return same_kind(a, b, out=out)
    if kind_a is OperandKind.MATRIX and kind_b is OperandKind.VECTOR:
        if dimension is None:
            raise ValidationError(
                f"{operation}: a matrix with a vector requires dimension=0 or dimension=1"
            )
        return broadcast(a, b, dimension, out=out)
    raise unsupported(operation, kind_a, kind_b)


def add(a: Any, b: Any, *, dimension: int | None = None, out: Array | None = None) -> Any:
    """
    Sum of two operands, dispatched on their kinds.

    Same-kind arrays add element-wise, a scalar offsets every entry, and a
    matrix plus vector broadcasts along `dimension`. A vector plus matrix
    (vector first) is rejected.
    """
    return _dispatch_additive(
        'add', add_arrays, add_vector, add_scalar,
        lambda x, arr, out: add_scalar(arr, x, out=out),
        lambda x, y: x + y,
        a, b, dimension, out,
    )


def subtract(a: Any, b: Any, *, dimension: int | None = None, out: Array | None = None) -> Any:
    """
    Difference a - b of two operands, dispatched on their kinds.

    Same kinds subtract element-wise, an array minus a scalar uses
    subtract_scalar, a scalar minus an array uses subtract_from_scalar, and
    a matrix minus vector broadcasts along `dimension`.
    """
    return _dispatch_additive(
        'subtract', subtract_arrays, subtract_vector, subtract_scalar,
        subtract_from_scalar,
        lambda x, y: x - y,
        a, b, dimension, out,
    )
