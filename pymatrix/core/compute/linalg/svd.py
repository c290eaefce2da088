"""
Singular value decomposition.

Minimum-norm solver for the regression normal equations. Unlike LU and
QR it does not reject rank-deficient systems: singular values under the
rank tolerance are dropped from the pseudo-inverse.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.precision import rank_tolerance
from pymatrix.core.validation import check_array, check_matrix


@dataclass(frozen=True)
class SVDResult:
    """
    Result of a thin SVD, A = U diag(s) Vt.

    Attributes:
        U: Left singular vectors (n x k)
        s: Singular values, descending (k,)
        Vt: Right singular vectors, transposed (k x p)
        rank: Number of singular values above tolerance
        tolerance: The cut-off used to compute rank
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]
    rank: int
    tolerance: float

    @property
    def condition_number(self) -> float:
        if self.s.size == 0 or self.s[-1] == 0:
            return np.inf
        return float(self.s[0] / self.s[-1])

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Minimum-norm least-squares solution of A @ x = rhs.

        Args:
            rhs: Vector (n,) or matrix (n, k)

        Returns:
            x = V diag(1/s) U' rhs with truncated singular values
        """
        b = check_array(rhs, 'rhs')
        if b.shape[0] != self.U.shape[0]:
            raise ValueError(
                f"rhs has {b.shape[0]} rows, expected {self.U.shape[0]}"
            )

        keep = self.s > self.tolerance
        s_inv = np.zeros_like(self.s)
        s_inv[keep] = 1.0 / self.s[keep]

        Utb = self.U.T @ b
        if b.ndim == 1:
            return self.Vt.T @ (s_inv * Utb)
        return self.Vt.T @ (s_inv[:, np.newaxis] * Utb)


def svd_decompose(A: ArrayLike, name: str = 'A') -> SVDResult:
    """
    Thin SVD using LAPACK gesdd (via NumPy).

    Args:
        A: Matrix to decompose (n x p)
        name: Matrix name for error messages

    Returns:
        SVDResult with factors and numerical rank
    """
    A = check_matrix(A, name)
    U, s, Vt = np.linalg.svd(A, full_matrices=False)

    tol = rank_tolerance(s, A.shape, s.dtype)
    rank = int(np.sum(s > tol))

    return SVDResult(U=U, s=s, Vt=Vt, rank=rank, tolerance=tol)
