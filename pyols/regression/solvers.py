"""
Solver dispatch for regression.

This module provides fit() and fit_arrays() (public API) and backend
selection.
"""

import logging
from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from pyols.core.exceptions import ValidationError
from pyols.core.protocols import Backend
from pyols.core.validation import check_array
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import RegressionResult
from pyols.regression.backends.normal_equations import NormalEquationsBackend
from pyols.regression.backends.qr import QRBackend

logger = logging.getLogger(__name__)

# Type alias for backend selection
BackendChoice = Literal['auto', 'normal_equations', 'qr']


def fit(
    y: ArrayLike,
    x_flat: ArrayLike,
    n_observations: int,
    n_predictors: int,
    *,
    backend: BackendChoice = 'auto',
) -> RegressionResult:
    """
    Fit an ordinary least squares regression with an intercept.

    Solves:
        min_β ||y - Xβ||²
    where X is the feature matrix with a leading column of ones.

    This is the primary public API. All input validation, design
    construction and backend selection happens here.

    Args:
        y: Response vector, length n_observations
        x_flat: Feature matrix flattened row-major, length
            n_observations * n_predictors. Observation i's feature j is
            x_flat[i * n_predictors + j].
        n_observations: Number of observations n
        n_predictors: Number of predictors p (excluding the intercept)
        backend: Coefficient path:
            - 'auto' / 'normal_equations': β = (X'X)⁻¹ X'y (default)
            - 'qr': β = R⁻¹ Q'y, a cross-check

    Returns:
        RegressionResult with p + 1 coefficients (intercept first) and
        standard errors

    Raises:
        ShapeMismatchError: If len(x_flat) != n * p or len(y) != n
        InsufficientObservationsError: If n <= p + 1, leaving no residual
            degrees of freedom
        SingularMatrixError: If X'X cannot be inverted (collinear or
            constant predictors)
        ValidationError: If inputs are non-numeric or non-finite

    Example:
        >>> from pyols import fit
        >>> result = fit([2, 4, 5, 4, 5], [1, 2, 3, 4, 5], 5, 1)
        >>> result.coefficients.round(6)
        array([2.2, 0.6])
    """
    backend_impl = _get_backend(backend)

    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.from_flat(y, x_flat, n_observations, n_predictors)

    logger.debug(
        "Fitting OLS: n=%d, p=%d, backend=%s",
        design.n, design.p, backend_impl.name,
    )

    result = backend_impl.solve(design)

    if result.timing is not None:
        logger.debug("OLS fit finished in %.6fs", result.timing['total_seconds'])
    return result


def fit_arrays(
    X: ArrayLike,
    y: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> RegressionResult:
    """
    Fit from a 2D feature array instead of a flat buffer.

    Args:
        X: Features, shape (n, p). A 1D array is a single predictor.
        y: Response vector (n,)
        backend: See fit()

    Returns:
        RegressionResult, exactly as fit() on X flattened row-major
    """
    X_arr = check_array(X, 'X')
    if X_arr.ndim == 1:
        X_arr = X_arr.reshape(-1, 1)
    if X_arr.ndim != 2:
        raise ValidationError(
            f"X: expected 1D or 2D array, got {X_arr.ndim}D with shape {X_arr.shape}"
        )

    y_arr = check_array(y, 'y')
    if y_arr.ndim == 2 and y_arr.shape[1] == 1:
        y_arr = y_arr.ravel()

    n, p = X_arr.shape
    return fit(y_arr, np.ravel(X_arr, order='C'), n, p, backend=backend)


def _get_backend(choice: BackendChoice) -> Backend:
    """
    Select and instantiate the backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'normal_equations'):
        return NormalEquationsBackend()

    elif choice == 'qr':
        return QRBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
