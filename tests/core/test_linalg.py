"""
Tests for the decomposition kernels (LU, QR, SVD).
"""

import numpy as np
import pytest

from pymatrix.core.compute.linalg import (
    lu_decompose,
    qr_decompose,
    svd_decompose,
)
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import NotSquareError, SingularMatrixError


# ═══════════════════════════════════════════════════════════════════════
# LU
# ═══════════════════════════════════════════════════════════════════════


class TestLU:

    def test_solve_vector(self, well_conditioned, rng):
        b = rng.standard_normal(5)
        x = lu_decompose(well_conditioned).solve(b)
        np.testing.assert_allclose(well_conditioned @ x, b, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_solve_transpose_matrix(self, well_conditioned, rng):
        B = rng.standard_normal((5, 2))
        x = lu_decompose(well_conditioned).solve_transpose(B)
        np.testing.assert_allclose(well_conditioned.T @ x, B, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_full_rank(self, well_conditioned):
        lu = lu_decompose(well_conditioned)
        assert lu.rank == 5
        assert not lu.is_singular
        assert lu.condition_number is None

    def test_singular_raises_on_solve(self):
        lu = lu_decompose([[1.0, 2.0], [2.0, 4.0]], name='B')
        assert lu.is_singular
        with pytest.raises(SingularMatrixError) as exc_info:
            lu.solve([1.0, 1.0])
        err = exc_info.value
        assert err.matrix_name == 'B'
        assert err.rank == 1
        assert err.expected_rank == 2
        assert err.condition_number is not None

    def test_zero_matrix_is_singular(self):
        with pytest.raises(SingularMatrixError):
            lu_decompose(np.zeros((3, 3))).solve(np.ones(3))

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            lu_decompose(np.zeros((2, 3)))

    def test_empty(self):
        lu = lu_decompose(np.zeros((0, 0)))
        assert lu.solve(np.zeros((0, 2))).shape == (0, 2)


# ═══════════════════════════════════════════════════════════════════════
# QR
# ═══════════════════════════════════════════════════════════════════════


class TestQR:

    def test_least_squares_matches_lstsq(self, rng):
        X = rng.standard_normal((20, 3))
        y = rng.standard_normal(20)
        beta = qr_decompose(X).solve(y)
        expected, _, _, _ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(beta, expected, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_rank(self, collinear_data):
        X, _ = collinear_data
        assert qr_decompose(X).rank == 2

    def test_rank_deficient_raises(self, collinear_data):
        X, y = collinear_data
        with pytest.raises(SingularMatrixError) as exc_info:
            qr_decompose(X, name='X').solve(y)
        assert exc_info.value.rank == 2
        assert exc_info.value.expected_rank == 3

    def test_wide_matrix_is_rank_deficient(self, rng):
        with pytest.raises(SingularMatrixError):
            qr_decompose(rng.standard_normal((2, 3))).solve(np.ones(2))


# ═══════════════════════════════════════════════════════════════════════
# SVD
# ═══════════════════════════════════════════════════════════════════════


class TestSVD:

    def test_solve_square(self, well_conditioned, rng):
        b = rng.standard_normal(5)
        x = svd_decompose(well_conditioned).solve(b)
        np.testing.assert_allclose(well_conditioned @ x, b, rtol=1e-9, atol=1e-10)

    def test_rank_deficient_minimum_norm(self):
        A = np.array([[2.0, 0.0], [0.0, 0.0]])
        svd = svd_decompose(A)
        assert svd.rank == 1
        x = svd.solve([1.0, 1.0])
        np.testing.assert_allclose(x, [0.5, 0.0], atol=1e-15)
        assert svd.condition_number == np.inf

    def test_matrix_rhs(self, well_conditioned):
        X = svd_decompose(well_conditioned).solve(np.eye(5))
        np.testing.assert_allclose(well_conditioned @ X, np.eye(5), atol=1e-10)

    def test_condition_number(self):
        svd = svd_decompose(np.diag([4.0, 2.0]))
        assert svd.condition_number == pytest.approx(2.0)


class TestPublicAPI:

    def test_exports(self):
        from pymatrix.core.compute import linalg
        assert set(linalg.__all__) == {
            "LUResult", "lu_decompose",
            "QRResult", "qr_decompose",
            "SVDResult", "svd_decompose",
        }
