"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from pymatrix.core.protocols import Backend
from pymatrix.regression.backends.cpu import CPULUBackend, CPUQRBackend, CPUSVDBackend
from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import LinearParams, LinearSolution


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_svd', 'cpu_lu', 'cpu_qr']


def fit(
    X: ArrayLike,
    y: ArrayLike,
    *,
    intercept: bool = False,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a multiple linear regression model.

    Finds c minimizing ||y - V c||² where V is X with a trailing column of
    ones when intercept=True. The normal equations V'V c = V'y are formed
    with the algebra kernel and solved by the selected backend.

    Args:
        X: Predictors (n x p). Can be any array-like.
        y: Response vector (n,). Can be any array-like.
        intercept: Fit a constant term (stored as the last coefficient)
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_svd': SVD of the normal equations
            - 'cpu_lu': LU of the normal equations
            - 'cpu_qr': QR of the design matrix

    Returns:
        LinearSolution with coefficients, goodness of fit and predict()

    Raises:
        ValidationError: If inputs are invalid
        DimensionMismatchError: If X and y have inconsistent lengths
        SingularMatrixError: If the design is rank-deficient (LU and QR only)

    Example:
        >>> import numpy as np
        >>> from pymatrix.regression import fit
        >>>
        >>> X = np.random.randn(100, 2)
        >>> y = X @ [2.0, 3.0] + 1.0
        >>>
        >>> result = fit(X, y, intercept=True)
        >>> print(result.coefficients)   # ~[2.0, 3.0, 1.0]
        >>> print(result.formula())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.from_arrays(X, y, intercept=intercept)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend[RegressionDesign, LinearParams]:
    """
    Instantiate the requested backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_svd'):
        return CPUSVDBackend()

    elif choice == 'cpu_lu':
        return CPULUBackend()

    elif choice == 'cpu_qr':
        return CPUQRBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
