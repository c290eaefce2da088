"""
LU decomposition with partial pivoting.

Square-system solver behind matrix right-division (A·B⁻¹) and the
LU normal-equations backend for regression. Factorization is done by
LAPACK getrf through SciPy; singularity is decided from the U diagonal.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pymatrix.core.compute.precision import condition_number, rank_tolerance
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.validation import check_matrix, check_square, check_array


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        lu: Packed factors (unit-lower L below the diagonal, U on and above)
        piv: Pivot indices from getrf (row i was interchanged with piv[i])
        rank: Number of U pivots above the rank tolerance
        matrix_name: Name used in error messages
        condition_number: Condition number of the source matrix, computed
            only when the factorization is singular
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    rank: int
    matrix_name: str = 'A'
    condition_number: float | None = None

    @property
    def size(self) -> int:
        return self.lu.shape[0]

    @property
    def is_singular(self) -> bool:
        return self.rank < self.size

    def _require_nonsingular(self) -> None:
        if self.is_singular:
            raise SingularMatrixError(
                f"{self.matrix_name} is singular: rank={self.rank}, expected={self.size}",
                matrix_name=self.matrix_name,
                condition_number=self.condition_number,
                rank=self.rank,
                expected_rank=self.size,
            )

    def _solve(self, rhs: ArrayLike, trans: int) -> NDArray[np.floating[Any]]:
        self._require_nonsingular()
        b = check_array(rhs, 'rhs')
        if b.shape[0] != self.size:
            raise ValueError(
                f"rhs has {b.shape[0]} rows, expected {self.size}"
            )
        if self.size == 0:
            return np.zeros(b.shape, dtype=np.result_type(self.lu, b))
        return lu_solve((self.lu, self.piv), b, trans=trans)

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A @ x = rhs.

        Args:
            rhs: Vector (n,) or matrix (n, k)

        Returns:
            Solution with the same trailing shape as rhs

        Raises:
            SingularMatrixError: If A is singular
        """
        return self._solve(rhs, trans=0)

    def solve_transpose(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A' @ x = rhs without forming A'.

        Raises:
            SingularMatrixError: If A is singular
        """
        return self._solve(rhs, trans=1)


def lu_decompose(A: ArrayLike, name: str = 'A') -> LUResult:
    """
    LU decomposition using LAPACK (via SciPy).

    Computes PA = LU. The factorization itself never fails on a singular
    matrix; singularity is recorded in `rank` and reported when solving.

    Args:
        A: Square matrix (n x n)
        name: Matrix name for error messages

    Returns:
        LUResult with packed factors, pivots and numerical rank

    Raises:
        NotSquareError: If A is not square
    """
    A = check_matrix(A, name)
    check_square(A, name)
    n = A.shape[0]

    if n == 0:
        return LUResult(
            lu=A.copy(), piv=np.empty(0, dtype=np.int32), rank=0, matrix_name=name
        )

    # getrf warns on an exactly zero pivot; singularity is reported by solve()
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)

    diag_U = np.abs(np.diag(lu))
    tol = rank_tolerance(diag_U, A.shape, lu.dtype)
    rank = int(np.sum(diag_U > tol))

    cond = condition_number(A) if rank < n else None

    return LUResult(lu=lu, piv=piv, rank=rank, matrix_name=name, condition_number=cond)
