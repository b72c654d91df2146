"""
Tolerance tiers for numerical comparison.

Defines precision expectations per element dtype:
- FP32: single precision, the default Matrix dtype
- FP64: double precision

Used by Matrix.allclose() and the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Single precision: a few ulps of accumulated rounding in dot products
FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, allows accumulated float32 rounding',
)

# Double precision reference
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, near machine precision',
)


def select_tolerance(*dtypes: DTypeLike) -> ToleranceTier:
    """
    Select the tolerance tier for comparing values of the given dtypes.

    The loosest tier wins: any float32 operand means FP32.
    """
    if not dtypes:
        return FP32
    if any(np.dtype(d) == np.float32 for d in dtypes):
        return FP32
    return FP64
