"""
Regression Design.

Holds the validated predictors and response and builds the augmented
design matrix (predictors plus an optional trailing constant column)
from which the normal equations are formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra import transpose_and_multiply, transpose_and_multiply_vector
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Linear regression design specification.

    Immutable after construction. Build with RegressionDesign.from_arrays.

    When intercept=True the constant column is appended after the
    predictors, so the intercept is the LAST coefficient.
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _intercept: bool
    _n: int
    _p: int

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        intercept: bool = False,
    ) -> RegressionDesign:
        """
        Build a design directly from arrays.

        Args:
            X: Predictors (n x p); a 1D X is a single predictor
            y: Response (n,) or (n, 1)
            intercept: Append a constant column to X

        Raises:
            ValidationError: If inputs are non-numeric, non-finite, or
                there are fewer observations than coefficients
            DimensionMismatchError: If X and y disagree in length
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))

        n, p = X_arr.shape
        check_min_samples(X_arr, max(p + int(intercept), 1), 'X')

        return cls(_X=X_arr, _y=y_arr, _intercept=bool(intercept), _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Predictor matrix (n x p), without the constant column."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors (excluding the intercept)."""
        return self._p

    @property
    def intercept(self) -> bool:
        return self._intercept

    @property
    def n_coefficients(self) -> int:
        return self._p + int(self._intercept)

    def augmented(self) -> NDArray[np.floating[Any]]:
        """Design matrix V with the constant column appended when requested."""
        if not self._intercept:
            return self._X
        return np.hstack([self._X, np.ones((self._n, 1), dtype=self._X.dtype)])

    def normal_equations(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Left and right sides of V'V c = V'y.

        Returns:
            (V'V, V'y) with shapes (k, k) and (k,)
        """
        V = self.augmented()
        return transpose_and_multiply(V, V), transpose_and_multiply_vector(V, self._y)
