"""
Shared compute infrastructure for PyMatrix.

This module provides timing utilities, precision constants, tolerance
tiers and the decomposition kernels the algebra layer delegates to.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for FP64 / FP32 comparison
    linalg: Decompositions (LU, QR, SVD) with solve methods
"""

from pymatrix.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
