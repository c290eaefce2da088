"""
QR decomposition implementations.

Least-squares solver behind non-square matrix right-division and the
QR regression backend. Factorization is LAPACK geqrf via NumPy; the
triangular solve is SciPy's trtrs.
"""

from dataclasses import dataclass
from typing import Literal, Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.compute.precision import rank_tolerance
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.validation import check_array, check_matrix


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
        matrix_name: Name used in error messages
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int
    matrix_name: str = 'X'

    @property
    def n_columns(self) -> int:
        return self.R.shape[1]

    @property
    def full_column_rank(self) -> bool:
        return self.rank == self.n_columns

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Least-squares solution of X @ beta = rhs.

        Solves min ||rhs - X beta||² as beta = R⁻¹ Q'rhs.

        Args:
            rhs: Vector (n,) or matrix (n, k)

        Returns:
            beta with shape (p,) or (p, k)

        Raises:
            SingularMatrixError: If X does not have full column rank
        """
        p = self.n_columns
        if not self.full_column_rank:
            raise SingularMatrixError(
                f"{self.matrix_name} is rank-deficient: rank={self.rank}, expected={p}.",
                matrix_name=self.matrix_name,
                rank=self.rank,
                expected_rank=p,
            )

        b = check_array(rhs, 'rhs')
        if b.shape[0] != self.Q.shape[0]:
            raise ValueError(
                f"rhs has {b.shape[0]} rows, expected {self.Q.shape[0]}"
            )

        # Compute Q'rhs first, then back-substitute through R
        Qtb = self.Q.T @ b
        if p == 0:
            return Qtb[:0]
        return solve_triangular(self.R[:p, :p], Qtb[:p], lower=False)


def qr_decompose(
    X: ArrayLike,
    mode: Literal['reduced', 'complete'] = 'reduced',
    name: str = 'X',
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q is orthogonal and R is upper triangular.

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR (Q is n x k, R is k x p where k = min(n,p))
              'complete' for full QR (Q is n x n, R is n x p)
        name: Matrix name for error messages

    Returns:
        QRResult with Q, R, and numerical rank
    """
    X = check_matrix(X, name)
    Q, R = np.linalg.qr(X, mode=mode)

    # Numerical rank from the R diagonal
    diag_R = np.abs(np.diag(R))
    tol = rank_tolerance(diag_R, X.shape, R.dtype)
    rank = int(np.sum(diag_R > tol))

    return QRResult(Q=Q, R=R, rank=rank, matrix_name=name)

