"""
Tests for inner, outer, vector (cross), Kronecker and cartesian products.
"""

import numpy as np
import pytest

from pymatrix.algebra import (
    CartesianProduct,
    cartesian_product,
    inner_product,
    kronecker_product,
    outer_product,
    vector_product,
)
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionError,
    NullInputError,
    ValidationError,
)


class TestInnerProduct:

    def test_value(self):
        assert inner_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_commutative(self, rng):
        a = rng.standard_normal(7)
        b = rng.standard_normal(7)
        assert inner_product(a, b) == pytest.approx(inner_product(b, a), rel=1e-15)

    def test_empty(self):
        assert inner_product([], []) == 0.0

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            inner_product([1.0, 2.0], [1.0])
        assert exc_info.value.operand == 'b'


class TestOuterProduct:

    def test_shape_and_entries(self, rng):
        a = rng.standard_normal(3)
        b = rng.standard_normal(4)
        R = outer_product(a, b)
        assert R.shape == (3, 4)
        for i in range(3):
            for j in range(4):
                assert R[i, j] == a[i] * b[j]

    def test_out(self):
        out = np.empty((2, 2))
        outer_product([1.0, 2.0], [3.0, 4.0], out=out)
        np.testing.assert_array_equal(out, [[3.0, 4.0], [6.0, 8.0]])


class TestVectorProduct:

    def test_unit_axes(self):
        np.testing.assert_array_equal(vector_product([1, 0, 0], [0, 1, 0]), [0.0, 0.0, 1.0])

    def test_anticommutative(self, rng):
        a = rng.standard_normal(3)
        b = rng.standard_normal(3)
        np.testing.assert_allclose(vector_product(a, b), -vector_product(b, a))

    def test_orthogonal_to_inputs(self, rng):
        a = rng.standard_normal(3)
        b = rng.standard_normal(3)
        c = vector_product(a, b)
        assert inner_product(a, c) == pytest.approx(0.0, abs=1e-12)
        assert inner_product(b, c) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("a, b, bad", [
        ([1.0, 2.0], [1.0, 2.0, 3.0], 'a'),
        ([1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0], 'b'),
    ])
    def test_requires_three_elements(self, a, b, bad):
        with pytest.raises(InvalidDimensionError) as exc_info:
            vector_product(a, b)
        assert exc_info.value.operand == bad
        assert exc_info.value.expected == 3


class TestKroneckerProduct:

    def test_shape(self, rng):
        A = rng.standard_normal((2, 3))
        B = rng.standard_normal((4, 5))
        assert kronecker_product(A, B).shape == (8, 15)

    def test_matches_definition(self, rng):
        A = rng.standard_normal((2, 3))
        B = rng.standard_normal((3, 2))
        R = kronecker_product(A, B)
        rb, cb = B.shape
        for i in range(2):
            for j in range(3):
                for k in range(rb):
                    for l in range(cb):
                        assert R[i * rb + k, j * cb + l] == A[i, j] * B[k, l]

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((3, 2))
        B = rng.standard_normal((2, 4))
        np.testing.assert_array_equal(kronecker_product(A, B), np.kron(A, B))

    def test_vectors(self):
        np.testing.assert_array_equal(
            kronecker_product([1.0, 2.0], [1.0, 10.0, 100.0]),
            [1.0, 10.0, 100.0, 2.0, 20.0, 200.0],
        )

    def test_non_contiguous_out(self, rng):
        A = rng.standard_normal((2, 2))
        B = rng.standard_normal((2, 2))
        out = np.empty((4, 4)).T
        kronecker_product(A, B, out=out)
        np.testing.assert_array_equal(out, np.kron(A, B))

    def test_mixed_rank_rejected(self):
        with pytest.raises(DimensionError):
            kronecker_product(np.eye(2), [1.0, 2.0])


class TestCartesianProduct:

    def test_first_sequence_varies_slowest(self):
        assert list(cartesian_product([1, 2], ['a', 'b'])) == [
            (1, 'a'), (1, 'b'), (2, 'a'), (2, 'b'),
        ]

    def test_three_sequences(self):
        result = list(cartesian_product([0, 1], [0, 1], [0, 1]))
        assert len(result) == 8
        assert result[0] == (0, 0, 0)
        assert result[-1] == (1, 1, 1)
        assert result[1] == (0, 0, 1)

    def test_restartable(self):
        product = cartesian_product(iter([1, 2]), iter([3]))
        assert list(product) == [(1, 3), (2, 3)]
        assert list(product) == [(1, 3), (2, 3)]

    def test_lazy(self):
        product = cartesian_product(range(10 ** 4), range(10 ** 4))
        first = next(iter(product))
        assert first == (0, 0)
        assert len(product) == 10 ** 8

    def test_no_sequences_single_empty_tuple(self):
        assert list(cartesian_product()) == [()]
        assert len(cartesian_product()) == 1

    def test_empty_sequence_empty_product(self):
        assert list(cartesian_product([1, 2], [])) == []

    def test_is_cartesian_product(self):
        assert isinstance(cartesian_product([1]), CartesianProduct)

    def test_none_sequence(self):
        with pytest.raises(NullInputError):
            cartesian_product([1], None)

    def test_non_iterable(self):
        with pytest.raises(ValidationError, match=r"sequences\[0\]"):
            cartesian_product(5)
