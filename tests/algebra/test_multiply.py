"""
Tests for the multiplication family.

Validates:
    - Matrix, matrix-vector and vector-matrix products against definitions
    - Transposed products match explicit transposes
    - Diagonal products match multiplication by diag(d)
    - Dimension failures name the operand and leave out buffers untouched
    - The out= contract (shape, dtype, aliasing)
"""

import numpy as np
import pytest

from pymatrix.algebra import (
    diagonal_matrix,
    divide_by_diagonal,
    multiply,
    multiply_by_diagonal,
    multiply_by_transpose,
    multiply_matrices,
    multiply_matrix_vector,
    multiply_vector_matrix,
    scale,
    transpose,
    transpose_and_multiply,
    transpose_and_multiply_vector,
)
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    NullInputError,
    ValidationError,
)


def assert_close(actual, expected):
    np.testing.assert_allclose(actual, expected, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)


# ═══════════════════════════════════════════════════════════════════════
# multiply_matrices
# ═══════════════════════════════════════════════════════════════════════


class TestMultiplyMatrices:

    def test_worked_example(self, square_pair):
        A, B = square_pair
        np.testing.assert_array_equal(multiply_matrices(A, B), [[19.0, 22.0], [43.0, 50.0]])

    def test_shape_and_entries(self, rng):
        A = rng.standard_normal((4, 3))
        B = rng.standard_normal((3, 5))
        C = multiply_matrices(A, B)
        assert C.shape == (4, 5)
        for i in range(4):
            for j in range(5):
                expected = sum(A[i, k] * B[k, j] for k in range(3))
                assert C[i, j] == pytest.approx(expected, rel=1e-12)

    def test_accepts_nested_lists(self):
        assert_close(multiply_matrices([[1, 2]], [[3], [4]]), [[11.0]])

    def test_inputs_not_mutated(self, square_pair):
        A, B = square_pair
        A0, B0 = A.copy(), B.copy()
        multiply_matrices(A, B)
        np.testing.assert_array_equal(A, A0)
        np.testing.assert_array_equal(B, B0)

    def test_empty_inner_dimension(self):
        C = multiply_matrices(np.zeros((2, 0)), np.zeros((0, 3)))
        np.testing.assert_array_equal(C, np.zeros((2, 3)))

    def test_incompatible_raises(self):
        A = np.ones((2, 3))
        B = np.ones((2, 2))
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply_matrices(A, B)
        err = exc_info.value
        assert err.operand == 'b'
        assert err.axis == 'rows'
        assert err.expected == 3
        assert err.actual == 2

    def test_incompatible_leaves_out_untouched(self):
        out = np.full((2, 2), -7.0)
        with pytest.raises(DimensionMismatchError):
            multiply_matrices(np.ones((2, 3)), np.ones((2, 2)), out=out)
        np.testing.assert_array_equal(out, np.full((2, 2), -7.0))

    def test_none_operand(self):
        with pytest.raises(NullInputError):
            multiply_matrices(None, np.eye(2))

    def test_vector_operand_rejected(self):
        with pytest.raises(DimensionError):
            multiply_matrices(np.ones(2), np.eye(2))


# ═══════════════════════════════════════════════════════════════════════
# out= contract
# ═══════════════════════════════════════════════════════════════════════


class TestOutBuffer:

    def test_writes_into_out(self, square_pair):
        A, B = square_pair
        out = np.empty((2, 2))
        result = multiply_matrices(A, B, out=out)
        assert result is out
        np.testing.assert_array_equal(out, [[19.0, 22.0], [43.0, 50.0]])

    def test_wrong_shape(self, square_pair):
        A, B = square_pair
        out = np.zeros((3, 2))
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply_matrices(A, B, out=out)
        assert exc_info.value.operand == 'out'
        np.testing.assert_array_equal(out, np.zeros((3, 2)))

    def test_aliasing_rejected(self, square_pair):
        A, B = square_pair
        A_before = A.copy()
        with pytest.raises(ValidationError, match="overlaps operand a"):
            multiply_matrices(A, B, out=A)
        np.testing.assert_array_equal(A, A_before)

    def test_integer_out_rejected(self, square_pair):
        A, B = square_pair
        with pytest.raises(ValidationError, match="floating"):
            multiply_matrices(A, B, out=np.zeros((2, 2), dtype=np.int64))

    def test_read_only_rejected(self, square_pair):
        A, B = square_pair
        out = np.zeros((2, 2))
        out.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            multiply_matrices(A, B, out=out)

    def test_list_out_rejected(self, square_pair):
        A, B = square_pair
        with pytest.raises(ValidationError, match="ndarray"):
            multiply_matrices(A, B, out=[[0.0, 0.0], [0.0, 0.0]])


# ═══════════════════════════════════════════════════════════════════════
# Matrix-vector products
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixVector:

    def test_matrix_vector(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(multiply_matrix_vector(A, [1.0, 1.0]), [3.0, 7.0])

    def test_vector_matrix(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(multiply_vector_matrix([1.0, 1.0], A), [4.0, 6.0])

    def test_matrix_vector_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply_matrix_vector(np.ones((2, 3)), np.ones(2))
        assert exc_info.value.operand == 'v'

    def test_vector_matrix_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="rows of a"):
            multiply_vector_matrix(np.ones(3), np.ones((2, 3)))


# ═══════════════════════════════════════════════════════════════════════
# Transposed products
# ═══════════════════════════════════════════════════════════════════════


class TestTransposedProducts:

    def test_transpose_and_multiply_matches_explicit(self, rng):
        A = rng.standard_normal((6, 3))
        B = rng.standard_normal((6, 4))
        assert_close(transpose_and_multiply(A, B), multiply_matrices(transpose(A), B))

    def test_multiply_by_transpose_matches_explicit(self, rng):
        A = rng.standard_normal((3, 6))
        B = rng.standard_normal((4, 6))
        assert_close(multiply_by_transpose(A, B), multiply_matrices(A, transpose(B)))

    def test_transpose_and_multiply_vector(self, rng):
        A = rng.standard_normal((6, 3))
        v = rng.standard_normal(6)
        assert_close(transpose_and_multiply_vector(A, v), A.T @ v)

    def test_transpose_and_multiply_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="rows of a"):
            transpose_and_multiply(np.ones((3, 2)), np.ones((4, 2)))

    def test_multiply_by_transpose_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="columns of a"):
            multiply_by_transpose(np.ones((3, 2)), np.ones((3, 4)))

    def test_out_shape(self, rng):
        A = rng.standard_normal((5, 2))
        out = np.empty((2, 2))
        transpose_and_multiply(A, A, out=out)
        assert_close(out, A.T @ A)


# ═══════════════════════════════════════════════════════════════════════
# Diagonal products
# ═══════════════════════════════════════════════════════════════════════


class TestDiagonal:

    def test_multiply_by_diagonal_matches_full_product(self, rng):
        A = rng.standard_normal((4, 3))
        d = rng.standard_normal(3)
        assert_close(multiply_by_diagonal(A, d), multiply_matrices(A, diagonal_matrix(d)))

    def test_divide_by_diagonal(self):
        A = np.array([[2.0, 9.0], [4.0, 3.0]])
        np.testing.assert_array_equal(divide_by_diagonal(A, [2.0, 3.0]), [[1.0, 3.0], [2.0, 1.0]])

    def test_divide_by_zero_diagonal_propagates_ieee(self):
        A = np.array([[1.0, 0.0], [-1.0, 2.0]])
        result = divide_by_diagonal(A, [0.0, 0.0])
        assert result[0, 0] == np.inf
        assert result[1, 0] == -np.inf
        assert np.isnan(result[0, 1])
        assert result[1, 1] == np.inf

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply_by_diagonal(np.ones((2, 3)), np.ones(2))
        assert exc_info.value.operand == 'd'
        assert exc_info.value.expected == 3


# ═══════════════════════════════════════════════════════════════════════
# Scaling and dispatch
# ═══════════════════════════════════════════════════════════════════════


class TestScaleAndDispatch:

    def test_scale_matrix(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(scale(A, 2), [[2.0, 4.0], [6.0, 8.0]])

    def test_scale_rejects_array_factor(self, square_pair):
        A, _ = square_pair
        with pytest.raises(ValidationError):
            scale(A, [2.0])

    def test_dispatch_matrix_matrix(self, square_pair):
        A, B = square_pair
        np.testing.assert_array_equal(multiply(A, B), [[19.0, 22.0], [43.0, 50.0]])

    def test_dispatch_scalar_either_side(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(multiply(3.0, A), multiply(A, 3.0))

    def test_dispatch_matrix_vector(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(multiply(A, [1.0, 0.0]), [1.0, 3.0])

    def test_dispatch_vector_matrix(self, square_pair):
        A, _ = square_pair
        np.testing.assert_array_equal(multiply([1.0, 0.0], A), [1.0, 2.0])

    def test_dispatch_scalars(self):
        assert multiply(2.0, 4) == 8.0

    def test_dispatch_vector_vector_rejected(self):
        with pytest.raises(ValidationError, match=r"\(vector, vector\)"):
            multiply([1.0, 2.0], [3.0, 4.0])

    def test_dispatch_3d_rejected(self):
        with pytest.raises(DimensionError):
            multiply(np.ones((2, 2, 2)), 2.0)
