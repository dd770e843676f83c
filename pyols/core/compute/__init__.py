"""
Shared compute infrastructure for pyols.

IMPORTANT: This is NOT where regression backends live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and the default singular-pivot tolerance
    linalg: Linear algebra kernels (dense Gauss-Jordan, QR)
"""

from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import (
    ToleranceTier,
    REFERENCE_FP64,
    ILL_CONDITIONED_FP64,
    ILL_CONDITION_THRESHOLD,
    DEFAULT_SINGULAR_RTOL,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "REFERENCE_FP64",
    "ILL_CONDITIONED_FP64",
    "ILL_CONDITION_THRESHOLD",
    "DEFAULT_SINGULAR_RTOL",
    "select_tolerance",
]
