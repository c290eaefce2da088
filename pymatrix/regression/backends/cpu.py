"""
CPU backends for linear regression.

All three backends fit the same model and differ only in how the
coefficients are solved for:

    CPUSVDBackend: SVD of the normal equations V'V c = V'y. Tolerates
        rank-deficient designs (minimum-norm solution) and reports them
        as a warning. This is the default.
    CPULUBackend: LU of the normal equations. Fastest; raises
        SingularMatrixError on a rank-deficient design.
    CPUQRBackend: QR of the design V itself, avoiding the squared
        condition number of V'V. Raises SingularMatrixError on a
        rank-deficient design.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.algebra import inner_product, multiply_matrix_vector, subtract_arrays
from pymatrix.core.compute.linalg import lu_decompose, qr_decompose, svd_decompose
from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import LinearParams


def _build_result(
    design: RegressionDesign,
    coefficients: NDArray[np.floating[Any]],
    rank: int,
    timer: Timer,
    backend_name: str,
    info: dict[str, Any],
    warnings: tuple[str, ...] = (),
) -> Result[LinearParams]:
    """Residuals, sums of squares and the Result envelope, shared by all backends."""
    y = design.y

    with timer.section('residuals'):
        fitted_values = multiply_matrix_vector(design.augmented(), coefficients)
        residuals = subtract_arrays(y, fitted_values)

    with timer.section('statistics'):
        sse = float(inner_product(residuals, residuals))
        deviations = y - np.mean(y)
        tss = float(inner_product(deviations, deviations))

    timer.stop()

    params = LinearParams(
        coefficients=coefficients,
        residuals=residuals,
        fitted_values=fitted_values,
        sse=sse,
        tss=tss,
        rank=rank,
    )

    return Result(
        params=params,
        info={**info, 'rank': rank},
        timing=timer.result(),
        backend_name=backend_name,
        warnings=warnings,
    )


class CPUSVDBackend:
    """
    Normal equations solved by singular value decomposition.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve V'V c = V'y via SVD of V'V.

        Returns:
            Result containing LinearParams; a rank-deficient design adds
            a warning and yields the minimum-norm coefficients
        """
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            VtV, Vty = design.normal_equations()

        with timer.section('decomposition'):
            svd = svd_decompose(VtV, name="V'V")

        with timer.section('solve'):
            coefficients = svd.solve(Vty)

        k = design.n_coefficients
        warnings: tuple[str, ...] = ()
        if svd.rank < k:
            warnings = (
                f"Design is rank-deficient (rank={svd.rank}, expected={k}); "
                f"minimum-norm coefficients returned.",
            )

        return _build_result(
            design, coefficients, svd.rank, timer, self.name,
            info={'method': 'svd', 'condition_number': svd.condition_number},
            warnings=warnings,
        )


class CPULUBackend:
    """Normal equations solved by LU decomposition with partial pivoting."""

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve V'V c = V'y via LU of V'V.

        Raises:
            SingularMatrixError: If V'V is singular
        """
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            VtV, Vty = design.normal_equations()

        with timer.section('decomposition'):
            lu = lu_decompose(VtV, name="V'V")

        with timer.section('solve'):
            coefficients = lu.solve(Vty)

        return _build_result(
            design, coefficients, lu.rank, timer, self.name,
            info={'method': 'lu'},
        )


class CPUQRBackend:
    """Least squares solved by QR decomposition of the design matrix."""

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve min ||y - V c||² via V = QR.

        Raises:
            SingularMatrixError: If V is rank-deficient
        """
        timer = Timer()
        timer.start()

        with timer.section('decomposition'):
            qr = qr_decompose(design.augmented(), mode='reduced', name='V')

        with timer.section('solve'):
            coefficients = qr.solve(design.y)

        return _build_result(
            design, coefficients, qr.rank, timer, self.name,
            info={'method': 'qr'},
        )
