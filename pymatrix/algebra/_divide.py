"""
Matrix right-division and the divide dispatcher.

divide_matrices computes A·B⁻¹ by solving X·B = A, which is the same as
B'·X' = A'. It never forms B⁻¹: a square B goes through LU with partial
pivoting, anything else through QR of B' in the least-squares sense.
Singular or rank-deficient B surfaces as SingularMatrixError from the
decomposition, never as a NaN-filled result.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra._arithmetic import divide_by_scalar, divide_scalar_by
from pymatrix.algebra._common import OperandKind, classify, prepare_out, result_dtype, unsupported
from pymatrix.core.compute.linalg import lu_decompose, qr_decompose
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_dimension_match, check_matrix

Array = NDArray[np.floating[Any]]


def divide_matrices(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    X = A·B⁻¹, the solution of X·B = A.

    Args:
        a: Matrix (m x n)
        b: Matrix (k x n); square (n x n) is solved exactly via LU,
           otherwise via QR least squares (requires k <= n and full rank)
        out: Optional (m x k) buffer, written only after a successful solve

    Returns:
        X (m x k)

    Raises:
        DimensionMismatchError: If columns(a) != columns(b)
        SingularMatrixError: If b is singular or rank-deficient
    """
    a = check_matrix(a, 'a')
    b = check_matrix(b, 'b')
    check_dimension_match(
        a.shape[1], b.shape[1], operand='a', axis='columns', against='columns of b'
    )
    result = prepare_out(
        out, (a.shape[0], b.shape[0]), result_dtype(a, b), {'a': a, 'b': b}
    )

    if b.shape[0] == b.shape[1]:
        solution_t = lu_decompose(b, name='b').solve_transpose(a.T)
    else:
        solution_t = qr_decompose(b.T, name="b'").solve(a.T)

    np.copyto(result, solution_t.T, casting='same_kind')
    return result


def _scalar_quotient(a: Any, b: Any, out: Array | None) -> Any:
    if out is not None:
        raise ValidationError("out: not supported for a scalar result")
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.divide(a, b)


_DIVIDE: dict[tuple[OperandKind, OperandKind], Callable[[Any, Any, Any], Any]] = {
    (OperandKind.SCALAR, OperandKind.SCALAR): _scalar_quotient,
    (OperandKind.VECTOR, OperandKind.SCALAR):
        lambda a, b, out: divide_by_scalar(a, b, out=out),
    (OperandKind.MATRIX, OperandKind.SCALAR):
        lambda a, b, out: divide_by_scalar(a, b, out=out),
    (OperandKind.SCALAR, OperandKind.VECTOR):
        lambda a, b, out: divide_scalar_by(a, b, out=out),
    (OperandKind.SCALAR, OperandKind.MATRIX):
        lambda a, b, out: divide_scalar_by(a, b, out=out),
    (OperandKind.MATRIX, OperandKind.MATRIX):
        lambda a, b, out: divide_matrices(a, b, out=out),
}


def divide(a: Any, b: Any, *, out: Array | None = None) -> Any:
    """
    Quotient a / b, dispatched on operand kinds.

    | a      | b      | operation          |
    |--------|--------|--------------------|
    | array  | scalar | divide_by_scalar   |
    | scalar | array  | divide_scalar_by   |
    | matrix | matrix | divide_matrices    |
    | scalar | scalar | IEEE quotient      |

    Vector/vector and mixed vector/matrix pairs are rejected; use
    divide_by_diagonal for A·diag(d)⁻¹.
    """
    kind_a, a = classify(a, 'a')
    kind_b, b = classify(b, 'b')
    handler = _DIVIDE.get((kind_a, kind_b))
    if handler is None:
        raise unsupported('divide', kind_a, kind_b)
    return handler(a, b, out)
