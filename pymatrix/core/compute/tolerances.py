"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two arithmetic paths:
- FP64 (reference): double precision, the default for every operation
- FP32: the single-precision variant, relaxed for reduced mantissa

Used by the test suite and by callers comparing kernel output against
an independent reference.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Double precision, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Single precision variant
CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='CPU single precision',
)

# Single precision, ill-conditioned
CPU_FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='cpu_fp32_ill_conditioned',
    description='CPU single precision, ill-conditioned',
)

# Condition number above which a problem counts as ill-conditioned
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(
    dtype: np.dtype | type = np.float64,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for the dtype a result was computed in."""
    if np.dtype(dtype) == np.float32:
        if is_ill_conditioned:
            return CPU_FP32_ILL_CONDITIONED
        return CPU_FP32
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
