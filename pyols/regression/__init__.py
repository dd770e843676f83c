"""
Ordinary least squares regression.

Public API:
    fit(y, x_flat, n_observations, n_predictors) -> RegressionResult
    fit_arrays(X, y) -> RegressionResult

fit() is the core entry point. It handles:
    - Input validation
    - Design construction (intercept column prepended)
    - Backend selection
    - Result assembly

Helpers built on fit():
    rolling_fit: trailing-window fits
    hedge_ratio, rolling_hedge_ratio, half_life, rolling_half_life:
        pair-series estimates

Example:
    >>> from pyols.regression import fit
    >>> result = fit(y, x_flat, n_observations=100, n_predictors=2)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pyols.regression.design import RegressionDesign
from pyols.regression.solution import RegressionResult
from pyols.regression.solvers import fit, fit_arrays
from pyols.regression.rolling import RollingResult, rolling_fit
from pyols.regression.pairs import (
    HedgeRatio,
    hedge_ratio,
    rolling_hedge_ratio,
    half_life,
    rolling_half_life,
)

__all__ = [
    "fit",
    "fit_arrays",
    "RegressionDesign",
    "RegressionResult",
    "rolling_fit",
    "RollingResult",
    "hedge_ratio",
    "rolling_hedge_ratio",
    "half_life",
    "rolling_half_life",
    "HedgeRatio",
]
