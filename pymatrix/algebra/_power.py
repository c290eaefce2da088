"""Integer powers of square matrices."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra._construct import identity
from pymatrix.algebra._multiply import multiply_matrices
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_matrix, check_square


def power(a: ArrayLike, n: int) -> NDArray[np.floating[Any]]:
    """
    Matrix power A^n by repeated squaring.

    Walks the bits of n from the most significant one down: square the
    accumulator at every bit, then multiply by A when the bit is set.
    This takes about 2*log2(n) products instead of n - 1.

    Args:
        a: Square matrix
        n: Non-negative integer exponent

    Returns:
        A^n as a new array; the identity of A's size and dtype when n == 0

    Raises:
        NotSquareError: If a is not square
        ValidationError: If n is negative or not an integer
    """
    a = check_matrix(a, 'a')
    check_square(a, 'a')
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(f"n: expected an integer exponent, got {type(n).__name__}")
    n = int(n)
    if n < 0:
        raise ValidationError(f"n: exponent must be non-negative, got {n}")

    if n == 0:
        return identity(a.shape[0], dtype=a.dtype)

    result = a.copy()
    for bit in range(n.bit_length() - 2, -1, -1):
        result = multiply_matrices(result, result)
        if (n >> bit) & 1:
            result = multiply_matrices(result, a)
    return result
