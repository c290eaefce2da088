"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra import add_scalar, multiply_matrix_vector, subtract_arrays
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_dimension_match,
)

if TYPE_CHECKING:
    from pymatrix.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends. With an intercept
    the constant term is the last entry of `coefficients`.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    sse: float
    tss: float
    rank: int


def r_squared(sse: float, tss: float) -> float:
    """Coefficient of determination 1 - SSe/SSt; 1.0 when SSt is zero."""
    if tss == 0:
        return 1.0
    return 1.0 - sse / tss


def adjusted_r_squared(r2: float, n: int, p: int) -> float:
    """
    Adjusted R² for n observations and p predictors.

    1.0 for a perfect fit and NaN when n == p + 1, where the adjustment
    divides by zero.
    """
    if r2 == 1.0:
        return 1.0
    if n == p + 1:
        warnings.warn(
            f"Adjusted R-squared is undefined with n={n} observations and "
            f"p={p} predictors.",
            RuntimeWarning,
            stacklevel=3,
        )
        return float('nan')
    return 1.0 - (1.0 - r2) * ((n - 1.0) / (n - p - 1.0))


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides accessors for coefficients,
    goodness of fit and prediction on new inputs.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Coefficients of the predictors, without the intercept."""
        return self.coefficients[:self._design.p]

    @property
    def intercept(self) -> float:
        """Constant term, 0.0 when the model was fit without one."""
        if not self._design.intercept:
            return 0.0
        return float(self.coefficients[-1])

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def sse(self) -> float:
        """Sum of squared errors on the training data."""
        return self._result.params.sse

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        return r_squared(self.sse, self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        return adjusted_r_squared(self.r_squared, self._design.n, self._design.p)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Model output for new inputs.

        Args:
            X: Inputs (m x p), or a single input vector (p,). With one
                predictor a 1D X holds one value per observation, the
                same reading fit() uses.

        Returns:
            Predictions (m,), or a NumPy scalar for a single input vector
        """
        X_arr = check_array(X, 'X')
        single = X_arr.ndim == 1 and self._design.p != 1
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(1, -1) if single else X_arr.reshape(-1, 1)
        check_dimension_match(
            X_arr.shape[1], self._design.p, operand='X', axis='columns',
            against='number of predictors',
        )
        output = multiply_matrix_vector(X_arr, self.weights)
        if self._design.intercept:
            output = add_scalar(output, self.intercept)
        return output[0] if single else output

    def coefficient_of_determination(
        self,
        X: ArrayLike,
        y: ArrayLike,
        adjust: bool = False,
    ) -> float:
        """
        R² of this model evaluated on (X, y).

        Args:
            X: Inputs (n x p)
            y: Observed outputs (n,)
            adjust: Return adjusted R² instead

        Returns:
            R² (or adjusted R²) on the given data
        """
        y_arr = check_array(y, 'y')
        check_1d(y_arr, 'y')
        predictions = np.atleast_1d(self.predict(X))
        check_consistent_length(predictions, y_arr, names=('X', 'y'))

        errors = subtract_arrays(y_arr, predictions)
        deviations = y_arr - np.mean(y_arr) if y_arr.size else y_arr
        r2 = r_squared(float(errors @ errors), float(deviations @ deviations))
        if not adjust:
            return r2
        return adjusted_r_squared(r2, y_arr.shape[0], self._design.p)

    def formula(self) -> str:
        """Fitted equation, e.g. 'y(x0, x1) = 2*x0 + -1*x1 + 0.5'."""
        p = self._design.p
        names = ", ".join(f"x{i}" for i in range(p))
        terms = " + ".join(f"{self.weights[i]:g}*x{i}" for i in range(p))
        text = f"y({names}) = {terms}"
        if self._design.intercept:
            text += f" + {self.intercept:g}"
        return text

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Predictors: {self._design.p}",
            f"Intercept: {'yes' if self._design.intercept else 'no'}",
            f"Rank: {self.rank}",
            f"Sum of squared errors: {self.sse:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.weights):
            lines.append(f"  x{i}: {coef:14.6f}")
        if self._design.intercept:
            lines.append(f"  (intercept): {self.intercept:14.6f}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.formula()

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"intercept={self._design.intercept}, rank={self.rank}, "
            f"r_squared={self.r_squared:.4f})"
        )
