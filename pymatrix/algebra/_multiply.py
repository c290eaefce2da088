"""
Multiplication family.

Matrix-matrix, matrix-vector, transposed and diagonal products plus
uniform scaling. Each operation checks shapes before the output buffer
is allocated or touched, then hands the fused multiply-add loop to
NumPy (BLAS gemm/gemv for the dense products).

Transposed products pass a transposed view to matmul; no transpose is
ever materialized.
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
    check_scalar,
    check_vector,
)

Array = NDArray[np.floating[Any]]


def _matmul(left: Array, right: Array, result: Array) -> None:
    # An empty inner dimension is a sum over nothing
    if left.shape[-1] == 0:
        result.fill(0.0)
        return
    np.matmul(left, right, out=result)


def multiply_matrices(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Matrix product C = A·B.

    Args:
        a: Matrix (m x n)
        b: Matrix (n x p)
        out: Optional (m x p) buffer, must not overlap a or b

    Returns:
        C (m x p) with C[i, j] = sum_k a[i, k] * b[k, j]

    Raises:
        DimensionMismatchError: If columns(a) != rows(b)
    """
    a = check_matrix(a, 'a')
    b = check_matrix(b, 'b')
    check_dimension_match(
        b.shape[0], a.shape[1], operand='b', axis='rows', against='columns of a'
    )
    result = prepare_out(
        out, (a.shape[0], b.shape[1]), result_dtype(a, b), {'a': a, 'b': b}
    )
    _matmul(a, b, result)
    return result


def multiply_matrix_vector(a: ArrayLike, v: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Matrix times column vector, A·v.

    Args:
        a: Matrix (m x n)
        v: Vector (n,)
        out: Optional (m,) buffer

    Raises:
        DimensionMismatchError: If len(v) != columns(a)
    """
    a = check_matrix(a, 'a')
    v = check_vector(v, 'v')
    check_dimension_match(
        v.shape[0], a.shape[1], operand='v', axis='length', against='columns of a'
    )
    result = prepare_out(out, (a.shape[0],), result_dtype(a, v), {'a': a, 'v': v})
    _matmul(a, v, result)
    return result


def multiply_vector_matrix(v: ArrayLike, a: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Row vector times matrix, v'·A.

    Args:
        v: Vector (m,)
        a: Matrix (m x n)
        out: Optional (n,) buffer

    Raises:
        DimensionMismatchError: If len(v) != rows(a)
    """
    v = check_vector(v, 'v')
    a = check_matrix(a, 'a')
    check_dimension_match(
        v.shape[0], a.shape[0], operand='v', axis='length', against='rows of a'
    )
    result = prepare_out(out, (a.shape[1],), result_dtype(v, a), {'v': v, 'a': a})
    _matmul(v, a, result)
    return result


def multiply_by_transpose(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    C = A·B' without forming B'.

    Args:
        a: Matrix (m x n)
        b: Matrix (p x n)
        out: Optional (m x p) buffer

    Raises:
        DimensionMismatchError: If columns(a) != columns(b)
    """
    a = check_matrix(a, 'a')
    b = check_matrix(b, 'b')
    check_dimension_match(
        b.shape[1], a.shape[1], operand='b', axis='columns', against='columns of a'
    )
    result = prepare_out(
        out, (a.shape[0], b.shape[0]), result_dtype(a, b), {'a': a, 'b': b}
    )
    _matmul(a, b.T, result)
    return result


def transpose_and_multiply(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    C = A'·B without forming A'.

    Args:
        a: Matrix (n x m)
        b: Matrix (n x p)
        out: Optional (m x p) buffer

    Raises:
        DimensionMismatchError: If rows(a) != rows(b)
    """
    a = check_matrix(a, 'a')
    b = check_matrix(b, 'b')
    check_dimension_match(
        b.shape[0], a.shape[0], operand='b', axis='rows', against='rows of a'
    )
    result = prepare_out(
        out, (a.shape[1], b.shape[1]), result_dtype(a, b), {'a': a, 'b': b}
    )
    _matmul(a.T, b, result)
    return result


def transpose_and_multiply_vector(
    a: ArrayLike, v: ArrayLike, *, out: Array | None = None
) -> Array:
    """
    A'·v without forming A'.

    Args:
        a: Matrix (n x m)
        v: Vector (n,)
        out: Optional (m,) buffer

    Raises:
        DimensionMismatchError: If len(v) != rows(a)
    """
    a = check_matrix(a, 'a')
    v = check_vector(v, 'v')
    check_dimension_match(
        v.shape[0], a.shape[0], operand='v', axis='length', against='rows of a'
    )
    result = prepare_out(out, (a.shape[1],), result_dtype(a, v), {'a': a, 'v': v})
    _matmul(a.T, v, result)
    return result


def multiply_by_diagonal(a: ArrayLike, d: ArrayLike, *, out: Array | None = None) -> Array:
    """
    C = A·diag(d), i.e. column j of A scaled by d[j].

    Args:
        a: Matrix (m x n)
        d: Diagonal entries (n,)
        out: Optional (m x n) buffer

    Raises:
        DimensionMismatchError: If len(d) != columns(a)
    """
    a = check_matrix(a, 'a')
    d = check_vector(d, 'd')
    check_dimension_match(
        d.shape[0], a.shape[1], operand='d', axis='length', against='columns of a'
    )
    result = prepare_out(out, a.shape, result_dtype(a, d), {'a': a, 'd': d})
    np.multiply(a, d[np.newaxis, :], out=result)
    return result


def divide_by_diagonal(a: ArrayLike, d: ArrayLike, *, out: Array | None = None) -> Array:
    """
    C = A·diag(d)⁻¹, i.e. column j of A divided by d[j].

    Zero entries in d are not rejected: they produce inf or NaN in the
    affected column, following IEEE-754.

    Raises:
        DimensionMismatchError: If len(d) != columns(a)
    """
    a = check_matrix(a, 'a')
    d = check_vector(d, 'd')
    check_dimension_match(
        d.shape[0], a.shape[1], operand='d', axis='length', against='columns of a'
    )
    result = prepare_out(out, a.shape, result_dtype(a, d), {'a': a, 'd': d})
    with np.errstate(divide='ignore', invalid='ignore'):
        np.divide(a, d[np.newaxis, :], out=result)
    return result


def scale(x: ArrayLike, s: float, *, out: Array | None = None) -> Array:
    """
    Multiply every entry of a vector or matrix by a scalar.

    Args:
        x: Vector or matrix
        s: Scalar factor
        out: Optional buffer of x's shape
    """
    x = check_operand_array(x, 'x')
    s = check_scalar(s, 's')
    result = prepare_out(out, x.shape, result_dtype(x, s), {'x': x})
    np.multiply(x, s, out=result)
    return result


def _scale_left(a: Any, b: Any, out: Array | None) -> Array:
    return scale(b, a, out=out)


def _scale_right(a: Any, b: Any, out: Array | None) -> Array:
    return scale(a, b, out=out)


def _scalar_product(a: Any, b: Any, out: Array | None) -> Any:
    if out is not None:
        raise ValidationError("out: not supported for a scalar result")
    return a * b


_MULTIPLY: dict[tuple[OperandKind, OperandKind], Callable[[Any, Any, Any], Any]] = {
    (OperandKind.SCALAR, OperandKind.SCALAR): _scalar_product,
    (OperandKind.SCALAR, OperandKind.VECTOR): _scale_left,
    (OperandKind.SCALAR, OperandKind.MATRIX): _scale_left,
    (OperandKind.VECTOR, OperandKind.SCALAR): _scale_right,
    (OperandKind.MATRIX, OperandKind.SCALAR): _scale_right,
    (OperandKind.MATRIX, OperandKind.MATRIX):
        lambda a, b, out: multiply_matrices(a, b, out=out),
    (OperandKind.MATRIX, OperandKind.VECTOR):
        lambda a, b, out: multiply_matrix_vector(a, b, out=out),
    (OperandKind.VECTOR, OperandKind.MATRIX):
        lambda a, b, out: multiply_vector_matrix(a, b, out=out),
}


def multiply(a: Any, b: Any, *, out: Array | None = None) -> Any:
    """
    Product of two operands, dispatched on their kinds.

    | a      | b      | operation              |
    |--------|--------|------------------------|
    | scalar | scalar | a * b                  |
    | scalar | array  | scale(b, a)            |
    | array  | scalar | scale(a, b)            |
    | matrix | matrix | multiply_matrices      |
    | matrix | vector | multiply_matrix_vector |
    | vector | matrix | multiply_vector_matrix |

    Two vectors are rejected: use inner_product or outer_product.

    Raises:
        ValidationError: For an unsupported kind pair
    """
    kind_a, a = classify(a, 'a')
    kind_b, b = classify(b, 'b')
    handler = _MULTIPLY.get((kind_a, kind_b))
    if handler is None:
        raise unsupported('multiply', kind_a, kind_b)
    return handler(a, b, out)
