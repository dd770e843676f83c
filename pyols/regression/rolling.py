"""
Rolling-window regression.

Refits OLS over each trailing window of a series. Windows that cannot be
fitted (collinear, or too few finite rows) produce NaN rows rather than
aborting the whole scan; how many were skipped is reported.
"""

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.exceptions import (
    InsufficientObservationsError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)
from pyols.core.validation import check_array, check_degrees_of_freedom, check_window
from pyols.regression.solvers import BackendChoice, fit_arrays


@dataclass(frozen=True)
class RollingResult:
    """
    Per-window OLS estimates aligned to the end of each window.

    Row t holds the fit over observations t - window + 1 .. t. Rows before
    the first full window, and rows for skipped windows, are NaN.

    Attributes:
        coefficients: (n, p + 1), intercept in column 0
        std_errors: (n, p + 1)
        ssr: (n,)
        window: Window length
        n_skipped: Full windows that could not be fitted
    """
    coefficients: NDArray[np.floating[Any]]
    std_errors: NDArray[np.floating[Any]]
    ssr: NDArray[np.floating[Any]]
    window: int
    n_skipped: int

    @property
    def n_windows(self) -> int:
        """Number of full windows in the series."""
        return self.ssr.shape[0] - self.window + 1

    @property
    def intercepts(self) -> NDArray[np.floating[Any]]:
        return self.coefficients[:, 0]

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        return self.coefficients[:, 1:]


def rolling_fit(
    y: ArrayLike,
    X: ArrayLike,
    window: int,
    *,
    backend: BackendChoice = 'auto',
) -> RollingResult:
    """
    Fit OLS over every trailing window of length `window`.

    Rows with NaN/Inf in y or X are dropped inside each window before
    fitting, so gaps in a price series only shrink the windows they fall in.

    Args:
        y: Response series (n,), or a column vector (n, 1)
        X: Predictors, (n,) or (n, p)
        window: Window length, 3 <= window <= n and window > p + 1
        backend: See pyols.fit()

    Returns:
        RollingResult

    Raises:
        ShapeMismatchError: If X and y have different lengths
        ValidationError: If window is out of range
        InsufficientObservationsError: If window <= p + 1
    """
    y_arr = check_array(y, 'y')
    X_arr = check_array(X, 'X')
    if X_arr.ndim == 1:
        X_arr = X_arr.reshape(-1, 1)
    if y_arr.ndim == 2 and y_arr.shape[1] == 1:
        y_arr = y_arr.ravel()
    if y_arr.ndim != 1 or X_arr.ndim != 2:
        raise ValidationError(
            f"expected y 1D and X 1D/2D, got y {y_arr.shape} and X {X_arr.shape}"
        )

    n, p = X_arr.shape
    if y_arr.shape[0] != n:
        raise ShapeMismatchError(
            f"y: expected length {n} to match X, got {y_arr.shape[0]}",
            name='y',
            expected=n,
            actual=int(y_arr.shape[0]),
        )

    window = check_window(window, n)
    check_degrees_of_freedom(window, p + 1)

    coefficients = np.full((n, p + 1), np.nan)
    std_errors = np.full((n, p + 1), np.nan)
    ssr = np.full(n, np.nan)
    finite_rows = np.isfinite(y_arr) & np.all(np.isfinite(X_arr), axis=1)

    n_skipped = 0
    for end in range(window - 1, n):
        rows = slice(end - window + 1, end + 1)
        keep = finite_rows[rows]
        try:
            result = fit_arrays(X_arr[rows][keep], y_arr[rows][keep], backend=backend)
        except (SingularMatrixError, InsufficientObservationsError):
            n_skipped += 1
            continue
        coefficients[end] = result.coefficients
        std_errors[end] = result.std_errors
        ssr[end] = result.ssr

    if n_skipped:
        warnings.warn(
            f"{n_skipped} of {n - window + 1} rolling windows could not be fitted "
            f"(collinear predictors or too few finite observations); "
            f"their estimates are NaN",
            RuntimeWarning,
            stacklevel=2,
        )

    for arr in (coefficients, std_errors, ssr):
        arr.setflags(write=False)

    return RollingResult(
        coefficients=coefficients,
        std_errors=std_errors,
        ssr=ssr,
        window=window,
        n_skipped=n_skipped,
    )
