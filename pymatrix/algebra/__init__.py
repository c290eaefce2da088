"""
Dense matrix algebra kernel.

Pure, stateless arithmetic over real vectors (1D arrays) and matrices
(2D arrays). Every operation validates operand shapes before touching
its output, raises DimensionMismatchError naming the operand and axis
that disagreed, and otherwise lets IEEE-754 results (inf, NaN) through
unchanged. Operations marked with `out=` write into a caller-owned
buffer of exactly the result shape that must not overlap any input.

Precision follows the operands: float32 inputs compute in float32,
anything else in float64.

Public API:
    Multiplication: multiply_matrices, multiply_matrix_vector,
        multiply_vector_matrix, multiply_by_transpose, transpose_and_multiply,
        transpose_and_multiply_vector, multiply_by_diagonal,
        divide_by_diagonal, scale
    Addition: add_arrays, subtract_arrays, add_vector, subtract_vector,
        add_scalar, subtract_scalar, subtract_from_scalar
    Division: divide_by_scalar, divide_scalar_by, divide_matrices
    Products: inner_product, outer_product, vector_product,
        kronecker_product, cartesian_product
    Powers: power
    Constructors: identity, diagonal_matrix, transpose
    Dispatch: multiply, add, subtract, divide (over OperandKind pairs)
"""

from pymatrix.algebra._common import OperandKind, classify
from pymatrix.algebra._construct import identity, diagonal_matrix, transpose
from pymatrix.algebra._multiply import (
    multiply,
    multiply_matrices,
    multiply_matrix_vector,
    multiply_vector_matrix,
    multiply_by_transpose,
    transpose_and_multiply,
    transpose_and_multiply_vector,
    multiply_by_diagonal,
    divide_by_diagonal,
    scale,
)
from pymatrix.algebra._arithmetic import (
    ROWWISE,
    COLUMNWISE,
    add,
    subtract,
    add_arrays,
    subtract_arrays,
    add_vector,
    subtract_vector,
    add_scalar,
    subtract_scalar,
    subtract_from_scalar,
    divide_by_scalar,
    divide_scalar_by,
)
from pymatrix.algebra._products import (
    CartesianProduct,
    cartesian_product,
    inner_product,
    outer_product,
    vector_product,
    kronecker_product,
)
from pymatrix.algebra._power import power
from pymatrix.algebra._divide import divide, divide_matrices

__all__ = [
    # Operand tags
    "OperandKind",
    "classify",
    # Constructors
    "identity",
    "diagonal_matrix",
    "transpose",
    # Multiplication
    "multiply",
    "multiply_matrices",
    "multiply_matrix_vector",
    "multiply_vector_matrix",
    "multiply_by_transpose",
    "transpose_and_multiply",
    "transpose_and_multiply_vector",
    "multiply_by_diagonal",
    "divide_by_diagonal",
    "scale",
    # Addition and subtraction
    "ROWWISE",
    "COLUMNWISE",
    "add",
    "subtract",
    "add_arrays",
    "subtract_arrays",
    "add_vector",
    "subtract_vector",
    "add_scalar",
    "subtract_scalar",
    "subtract_from_scalar",
    # Division
    "divide",
    "divide_by_scalar",
    "divide_scalar_by",
    "divide_matrices",
    # Products
    "CartesianProduct",
    "cartesian_product",
    "inner_product",
    "outer_product",
    "vector_product",
    "kronecker_product",
    # Powers
    "power",
]
