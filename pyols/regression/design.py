"""
Regression Design.

Design takes the caller's flat buffers and lays them out as the
intercept-augmented design matrix X and the response y. It is built per
fit, owns copies of its data, and is discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.validation import (
    check_array,
    check_1d,
    check_count,
    check_length,
    check_degrees_of_freedom,
    check_finite,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Intercept-augmented design matrix and response.

    X has shape (n, p + 1): column 0 is all ones, columns 1..p are the
    features in the order supplied. Arrays are read-only.

    Construction:
        RegressionDesign.from_flat(y, x_flat, n_observations, n_predictors)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_flat(
        cls,
        y: ArrayLike,
        x_flat: ArrayLike,
        n_observations: int,
        n_predictors: int,
    ) -> RegressionDesign:
        """
        Build a design from a row-major feature buffer.

        Observation i's feature j is read from x_flat[i * n_predictors + j].

        Raises:
            ValidationError: If inputs are non-numeric, counts are not
                non-negative integers, or values are non-finite
            ShapeMismatchError: If a buffer length disagrees with the
                declared dimensions
            InsufficientObservationsError: If n_observations <= n_predictors + 1
                would leave no residual degrees of freedom
        """
        y_arr = check_array(y, 'y')
        x_arr = check_array(x_flat, 'x_flat')
        check_1d(y_arr, 'y')
        check_1d(x_arr, 'x_flat')

        n = check_count(n_observations, 'n_observations')
        p = check_count(n_predictors, 'n_predictors')

        check_length(
            x_arr, n * p, 'x_flat',
            detail=f"n_observations * n_predictors = {n} * {p}",
        )
        check_length(y_arr, n, 'y', detail="n_observations")
        check_degrees_of_freedom(n, p + 1)

        check_finite(x_arr, 'x_flat')
        check_finite(y_arr, 'y')

        X = np.empty((n, p + 1), dtype=np.float64)
        X[:, 0] = 1.0
        X[:, 1:] = x_arr.reshape(n, p)

        X.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(_X=X, _y=y_arr, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x (p + 1)), intercept in column 0."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors, excluding the intercept."""
        return self._p

    @property
    def n_params(self) -> int:
        """Number of coefficients, p + 1."""
        return self._p + 1

    @property
    def df_residual(self) -> int:
        return self._n - self.n_params
