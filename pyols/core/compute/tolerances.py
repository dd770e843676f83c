"""
Tolerance tiers for numerical validation.

Defines precision expectations for the solver against a LAPACK reference
(numpy.linalg.lstsq / numpy.linalg.inv):
- Reference FP64: well-conditioned problems, near machine precision
- Ill-conditioned FP64: relaxed, for designs with cond(X'X) > 1e8

Also holds the default singular-pivot tolerance used by the kernel.
Used by the test suite and by pyols._config.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Normal equations on well-conditioned data
REFERENCE_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='reference_fp64',
    description='Double precision normal equations vs LAPACK lstsq',
)

# Normal equations square the condition number of X
ILL_CONDITIONED_FP64 = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='ill_conditioned_fp64',
    description='Double precision, ill-conditioned (cond(X\'X) > 1e8)',
)

# Threshold separating the two tiers, on cond(X'X)
ILL_CONDITION_THRESHOLD = 1e8

# Pivot tolerance for Gauss-Jordan inversion, relative to max|M|.
# The solver equilibrates X'X to unit diagonal first, so this bounds the
# reciprocal condition number that is still treated as invertible.
DEFAULT_SINGULAR_RTOL = 1e-10


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a problem."""
    if is_ill_conditioned:
        return ILL_CONDITIONED_FP64
    return REFERENCE_FP64
