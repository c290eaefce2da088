"""Identity, diagonal and transpose constructors."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_matrix, check_vector


def identity(n: int, dtype: np.dtype | type = np.float64) -> NDArray[np.floating[Any]]:
    """
    Square identity matrix.

    Raises:
        ValidationError: If n is not a non-negative integer
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
        raise ValidationError(f"n: expected a non-negative integer, got {n!r}")
    return np.eye(int(n), dtype=dtype)


def diagonal_matrix(d: ArrayLike) -> NDArray[np.floating[Any]]:
    """Square matrix with `d` on the main diagonal and zeros elsewhere."""
    d = check_vector(d, 'd')
    return np.diag(d)


def transpose(a: ArrayLike) -> NDArray[np.floating[Any]]:
    """New (contiguous) array holding the transpose of a matrix."""
    a = check_matrix(a, 'a')
    return a.T.copy()
