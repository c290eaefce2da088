"""
PyMatrix: a dense matrix algebra kernel for Python.

Dimension-checked arithmetic over real vectors and matrices, product
operations, matrix powers and decomposition-backed matrix division,
plus a normal-equations linear regression built on top of them.

Submodules:
    algebra: The arithmetic kernel (re-exported here)
    regression: Multiple linear regression via the normal equations
    core: Exceptions, validation, decompositions, tolerances
"""

__version__ = "0.1.0"

from pymatrix import algebra
from pymatrix import regression
from pymatrix.algebra import *  # noqa: F401,F403
from pymatrix.algebra import __all__ as _algebra_all

__all__ = [
    "__version__",
    "algebra",
    "regression",
    *_algebra_all,
]
