"""
Multiple linear regression via the normal equations.

Public API:
    fit(X, y, intercept=..., backend=...) -> LinearSolution

Example:
    >>> from pymatrix.regression import fit
    >>> result = fit(X, y, intercept=True)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import LinearSolution, LinearParams
from pymatrix.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
