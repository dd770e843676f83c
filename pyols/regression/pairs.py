"""
Pair-series regressions.

Hedge ratio (one price series regressed on another) and the
mean-reversion half-life of a spread. These only estimate; turning the
estimates into trading decisions is left to the caller.
"""

import math
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.exceptions import ValidationError
from pyols.core.validation import check_array, check_1d, check_finite, check_window
from pyols.regression.rolling import rolling_fit
from pyols.regression.solution import RegressionResult
from pyols.regression.solvers import fit_arrays


@dataclass(frozen=True)
class HedgeRatio:
    """a ≈ alpha + beta · b, with the full fit attached."""
    alpha: float
    beta: float
    result: RegressionResult


def hedge_ratio(series_a: ArrayLike, series_b: ArrayLike) -> HedgeRatio:
    """
    Regress series_a on series_b with an intercept.

    Raises:
        ShapeMismatchError: If the series lengths differ
        InsufficientObservationsError: If fewer than 3 observations
        SingularMatrixError: If series_b is constant
    """
    result = fit_arrays(series_b, series_a)
    return HedgeRatio(
        alpha=result.intercept,
        beta=float(result.slopes[0]),
        result=result,
    )


def rolling_hedge_ratio(
    series_a: ArrayLike,
    series_b: ArrayLike,
    window: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Hedge ratio over each trailing window.

    Returns:
        (alphas, betas), each of length n, NaN before the first full
        window and where a window could not be fitted
    """
    rolled = rolling_fit(series_a, series_b, window)
    return rolled.intercepts.copy(), rolled.slopes[:, 0].copy()


def half_life(spread: ArrayLike) -> float:
    """
    Mean-reversion half-life of a spread, in observations.

    Fits Δs_t = c + λ s_{t-1} and returns -ln(2) / λ. A non-negative λ
    means the spread does not revert, reported as inf.

    Requires at least 4 observations (3 differences).

    Raises:
        ValidationError: If the spread contains NaN/Inf
        InsufficientObservationsError: If the spread is too short
        SingularMatrixError: If the spread is constant
    """
    s = check_array(spread, 'spread')
    check_1d(s, 'spread')
    check_finite(s, 'spread')

    result = fit_arrays(s[:-1], np.diff(s))
    lam = float(result.slopes[0])
    if lam >= 0.0:
        return math.inf
    return -math.log(2.0) / lam


def rolling_half_life(spread: ArrayLike, window: int) -> NDArray[np.floating[Any]]:
    """
    Half-life over each trailing window of the spread.

    Each window of `window` spread values gives window - 1 differences,
    fitted as in half_life(). Entry t covers spread[t - window + 1 .. t].

    Args:
        spread: Spread series (n,); NaN/Inf rows are dropped per window
        window: Window length in spread observations, 4 <= window <= n

    Returns:
        Array of length n: NaN before the first full window and where a
        window could not be fitted, inf where the spread does not revert

    Raises:
        ValidationError: If window is out of range
    """
    s = check_array(spread, 'spread')
    check_1d(s, 'spread')
    window = check_window(window, s.shape[0])
    if window < 4:
        raise ValidationError(
            f"window: must be at least 4 for a half-life (3 differences), got {window}"
        )

    rolled = rolling_fit(np.diff(s), s[:-1], window - 1)
    lam = rolled.slopes[:, 0]

    out = np.full(s.shape[0], np.nan)
    with np.errstate(divide='ignore'):
        out[1:] = np.where(lam < 0.0, -math.log(2.0) / lam, np.inf)
    out[1:][np.isnan(lam)] = np.nan
    return out
