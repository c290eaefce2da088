"""
Numerical precision constants and utilities.

Machine epsilon, rank tolerances and conditioning helpers shared by the
decomposition layer and the test suite.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def rank_tolerance(
    magnitudes: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    dtype: np.dtype | type,
) -> float:
    """
    Threshold below which a pivot or singular value counts as zero.

    Uses the LAPACK convention max(shape) * eps * max|magnitude|.

    Args:
        magnitudes: Diagonal of R/U or the singular values
        shape: Shape of the factorized matrix
        dtype: Floating dtype the factorization ran in

    Returns:
        Absolute threshold (0.0 for an empty or all-zero diagonal)
    """
    if magnitudes.size == 0:
        return 0.0
    largest = float(np.max(np.abs(magnitudes)))
    return max(shape) * machine_epsilon(dtype) * largest


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """
    Compute condition number of a matrix using SVD.

    Args:
        A: Input matrix

    Returns:
        Condition number (ratio of largest to smallest singular value)
        Returns inf if matrix is singular or empty.
    """
    if A.size == 0:
        return np.inf
    s = np.linalg.svd(A, compute_uv=False)
    if s[-1] == 0:
        return np.inf
    return float(s[0] / s[-1])
