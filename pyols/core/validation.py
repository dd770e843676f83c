"""
Input validation utilities for pyols.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyols.core.exceptions import (
    ValidationError,
    ShapeMismatchError,
    InsufficientObservationsError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    The result is always a fresh copy, so later mutation of the caller's
    buffer cannot leak into a computation or a result.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Booleans are numbers to numpy but never a meaningful regressor here
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional (a flat buffer).

    Raises:
        ShapeMismatchError: If array is not 1D
    """
    if array.ndim != 1:
        raise ShapeMismatchError(
            f"{name}: expected a flat 1D array, got {array.ndim}D with shape {array.shape}",
            name=name,
        )


def check_count(value: Any, name: str) -> int:
    """
    Verify a declared dimension is a non-negative integer.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_length(
    array: NDArray[np.floating[Any]],
    expected: int,
    name: str,
    detail: str = "",
) -> None:
    """
    Verify a flat array has exactly the expected number of elements.

    Args:
        array: 1D array to check
        expected: Required length
        name: Parameter name for error messages
        detail: Optional explanation of where `expected` comes from

    Raises:
        ShapeMismatchError: If the length differs
    """
    actual = int(array.shape[0])
    if actual != expected:
        suffix = f" ({detail})" if detail else ""
        raise ShapeMismatchError(
            f"{name}: expected length {expected}{suffix}, got {actual}",
            name=name,
            expected=expected,
            actual=actual,
        )


def check_degrees_of_freedom(n_observations: int, n_params: int) -> int:
    """
    Verify residual degrees of freedom are positive.

    Args:
        n_observations: Number of observations
        n_params: Number of coefficients (predictors + intercept)

    Returns:
        Residual degrees of freedom, n_observations - n_params

    Raises:
        InsufficientObservationsError: If n_observations <= n_params
    """
    dof = n_observations - n_params
    if dof <= 0:
        n_predictors = n_params - 1
        noun = "predictor" if n_predictors == 1 else "predictors"
        raise InsufficientObservationsError(
            f"insufficient observations: {n_observations} observations for "
            f"{n_params} parameters ({n_predictors} {noun} + intercept); "
            f"need at least {n_params + 1}",
            n_observations=n_observations,
            n_params=n_params,
        )
    return dof


def check_window(window: Any, n: int, name: str = 'window') -> int:
    """
    Verify a rolling window length is usable for n observations.

    Raises:
        ValidationError: If window is not an integer in [3, n]
    """
    window = check_count(window, name)
    if window < 3:
        raise ValidationError(f"{name}: must be at least 3, got {window}")
    if window > n:
        raise ValidationError(f"{name}: {window} exceeds series length {n}")
    return window
