"""
Regression backends.

Available backends:
    CPUSVDBackend: Normal equations via SVD (default, rank-tolerant)
    CPULUBackend: Normal equations via LU
    CPUQRBackend: Least squares via QR of the design
"""

from pymatrix.regression.backends.cpu import CPULUBackend, CPUQRBackend, CPUSVDBackend

__all__ = [
    "CPUSVDBackend",
    "CPULUBackend",
    "CPUQRBackend",
]
