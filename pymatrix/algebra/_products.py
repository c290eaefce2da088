"""
Vector and matrix products.

Inner, outer, cross (vector), Kronecker and cartesian products. The
cartesian product is combinatorial rather than numeric; it lives here
because, like the Kronecker product, it enumerates all pairings of its
inputs in a fixed order.
"""

from __future__ import annotations

import itertools
import math
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra._common import check_operand_array, prepare_out, result_dtype
from pymatrix.core.exceptions import DimensionError, InvalidDimensionError, ValidationError
from pymatrix.core.validation import check_dimension_match, check_not_none, check_vector

Array = NDArray[np.floating[Any]]


def inner_product(a: ArrayLike, b: ArrayLike) -> np.floating:
    """
    Scalar product a'b = sum_i a[i] * b[i].

    Returns:
        NumPy floating scalar in the operands' precision

    Raises:
        DimensionMismatchError: If lengths differ
    """
    a = check_vector(a, 'a')
    b = check_vector(b, 'b')
    check_dimension_match(
        b.shape[0], a.shape[0], operand='b', axis='length', against='length of a'
    )
    return np.dot(a, b)


def outer_product(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Outer product R[i, j] = a[i] * b[j], shape (len(a), len(b)).
    """
    a = check_vector(a, 'a')
    b = check_vector(b, 'b')
    result = prepare_out(
        out, (a.shape[0], b.shape[0]), result_dtype(a, b), {'a': a, 'b': b}
    )
    np.multiply(a[:, np.newaxis], b[np.newaxis, :], out=result)
    return result


def vector_product(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Cross product of two 3-dimensional vectors.

    Raises:
        InvalidDimensionError: If either vector does not have exactly 3 elements
    """
    a = check_vector(a, 'a')
    b = check_vector(b, 'b')
    for name, v in (('a', a), ('b', b)):
        if v.shape[0] != 3:
            raise InvalidDimensionError(
                f"{name}: cross product requires exactly 3 elements, got {v.shape[0]}",
                operand=name,
                expected=3,
                actual=v.shape[0],
            )
    result = prepare_out(out, (3,), result_dtype(a, b), {'a': a, 'b': b})
    result[0] = a[1] * b[2] - a[2] * b[1]
    result[1] = a[2] * b[0] - a[0] * b[2]
    result[2] = a[0] * b[1] - a[1] * b[0]
    return result


def kronecker_product(a: ArrayLike, b: ArrayLike, *, out: Array | None = None) -> Array:
    """
    Kronecker product of two matrices or of two vectors.

    Matrices: shape (ra*rb, ca*cb) with R[i*rb + k, j*cb + l] = a[i, j] * b[k, l].
    Vectors: length len(a)*len(b) with r[i*len(b) + j] = a[i] * b[j].

    Raises:
        DimensionError: If one operand is a vector and the other a matrix
    """
    a = check_operand_array(a, 'a')
    b = check_operand_array(b, 'b')
    if a.ndim != b.ndim:
        raise DimensionError(
            f"b: Kronecker product requires operands of equal rank, "
            f"got {a.ndim}D a and {b.ndim}D b"
        )

    if a.ndim == 1:
        shape = (a.shape[0] * b.shape[0],)
        blocks = (a.shape[0], b.shape[0])
        left, right = a[:, np.newaxis], b[np.newaxis, :]
    else:
        (ra, ca), (rb, cb) = a.shape, b.shape
        shape = (ra * rb, ca * cb)
        # Block (i, j) of the result is a[i, j] * b
        blocks = (ra, rb, ca, cb)
        left = a[:, np.newaxis, :, np.newaxis]
        right = b[np.newaxis, :, np.newaxis, :]

    result = prepare_out(out, shape, result_dtype(a, b), {'a': a, 'b': b})
    if result.flags.c_contiguous:
        np.multiply(left, right, out=result.reshape(blocks))
    else:
        np.copyto(result, np.multiply(left, right).reshape(shape))
    return result


class CartesianProduct:
    """
    Lazy, restartable cartesian product of finite sequences.

    Iteration yields one tuple per combination. The first sequence varies
    slowest and ties follow input order. Inputs are snapshotted when the
    product is created, so each iteration enumerates the same tuples even
    if the inputs were one-shot iterators.

    Example:
        >>> list(cartesian_product([1, 2], 'ab'))
        [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
    """

    def __init__(self, sequences: Iterable[Iterable[Any]]):
        pools = []
        for index, sequence in enumerate(sequences):
            check_not_none(sequence, f"sequences[{index}]")
            try:
                pools.append(tuple(sequence))
            except TypeError as e:
                raise ValidationError(
                    f"sequences[{index}]: expected an iterable, got {type(sequence).__name__}"
                ) from e
        self._pools: tuple[tuple[Any, ...], ...] = tuple(pools)

    @property
    def sequences(self) -> tuple[tuple[Any, ...], ...]:
        return self._pools

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return itertools.product(*self._pools)

    def __len__(self) -> int:
        return math.prod(len(pool) for pool in self._pools)

    def __repr__(self) -> str:
        sizes = " x ".join(str(len(pool)) for pool in self._pools) or "()"
        return f"CartesianProduct({sizes}, n={len(self)})"


def cartesian_product(*sequences: Iterable[Any]) -> CartesianProduct:
    """
    Every combination of one element from each sequence.

    With no sequences the product holds exactly one empty tuple.
    """
    return CartesianProduct(sequences)
