"""
Decomposition kernels for PyMatrix.

All functions follow these conventions:
    - Factorizations use NumPy/SciPy (LAPACK under the hood)
    - Each decomposition returns a frozen result dataclass with solve methods
    - Singular systems raise SingularMatrixError from solve(), except SVD
      which truncates small singular values instead

Submodules:
    lu: LU decomposition with partial pivoting (square systems)
    qr: QR decomposition (least squares)
    svd: Singular value decomposition (minimum-norm solve)
"""

from pymatrix.core.compute.linalg.lu import LUResult, lu_decompose
from pymatrix.core.compute.linalg.qr import QRResult, qr_decompose
from pymatrix.core.compute.linalg.svd import SVDResult, svd_decompose

__all__ = [
    # LU decomposition
    "LUResult",
    "lu_decompose",
    # QR decomposition
    "QRResult",
    "qr_decompose",
    # SVD
    "SVDResult",
    "svd_decompose",
]
