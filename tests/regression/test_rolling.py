"""
Tests for rolling_fit().
"""

import pytest
import numpy as np

from pyols import fit_arrays
from pyols.core.exceptions import (
    InsufficientObservationsError,
    ShapeMismatchError,
    ValidationError,
)
from pyols.regression import RollingResult, rolling_fit


@pytest.fixture
def series(rng):
    n = 50
    x = np.cumsum(rng.standard_normal(n)) + 100.0
    y = 5.0 + 1.3 * x + rng.standard_normal(n) * 0.5
    return x, y


class TestRollingFit:

    def test_shapes_and_warm_up(self, series):
        x, y = series
        rolled = rolling_fit(y, x, 10)
        assert isinstance(rolled, RollingResult)
        assert rolled.coefficients.shape == (50, 2)
        assert rolled.std_errors.shape == (50, 2)
        assert rolled.ssr.shape == (50,)
        assert np.all(np.isnan(rolled.coefficients[:9]))
        assert np.all(np.isfinite(rolled.coefficients[9:]))
        assert rolled.n_windows == 41
        assert rolled.n_skipped == 0

    def test_rows_match_window_fits(self, series):
        x, y = series
        rolled = rolling_fit(y, x, 10)
        for end in (9, 25, 49):
            expected = fit_arrays(x[end - 9:end + 1], y[end - 9:end + 1])
            np.testing.assert_allclose(rolled.coefficients[end], expected.coefficients, rtol=1e-12)
            np.testing.assert_allclose(rolled.std_errors[end], expected.std_errors, rtol=1e-12)
            assert rolled.ssr[end] == pytest.approx(expected.ssr, rel=1e-12)

    def test_views(self, series):
        x, y = series
        rolled = rolling_fit(y, x, 10)
        np.testing.assert_array_equal(rolled.intercepts, rolled.coefficients[:, 0])
        np.testing.assert_array_equal(rolled.slopes, rolled.coefficients[:, 1:])

    def test_multiple_predictors(self, rng):
        X = rng.standard_normal((30, 2))
        y = 1.0 + X @ [2.0, -1.0]
        rolled = rolling_fit(y, X, 8)
        np.testing.assert_allclose(rolled.coefficients[7:], np.tile([1.0, 2.0, -1.0], (23, 1)), atol=1e-9)

    def test_full_length_window(self, series):
        x, y = series
        rolled = rolling_fit(y, x, 50)
        np.testing.assert_allclose(rolled.coefficients[49], fit_arrays(x, y).coefficients, rtol=1e-12)
        assert rolled.n_windows == 1

    def test_column_vector_response(self, series):
        x, y = series
        flat = rolling_fit(y, x, 10)
        column = rolling_fit(y.reshape(-1, 1), x, 10)
        np.testing.assert_array_equal(column.coefficients, flat.coefficients)

    def test_read_only(self, series):
        x, y = series
        rolled = rolling_fit(y, x, 10)
        with pytest.raises(ValueError):
            rolled.coefficients[20, 0] = 0.0

    def test_backend_forwarded(self, series):
        x, y = series
        ne = rolling_fit(y, x, 10)
        qr = rolling_fit(y, x, 10, backend='qr')
        np.testing.assert_allclose(qr.coefficients[9:], ne.coefficients[9:], rtol=1e-8)


class TestRollingSkippedWindows:

    def test_constant_stretch_skipped_with_warning(self, series):
        x, y = series
        x = x.copy()
        x[20:30] = 101.0
        with pytest.warns(RuntimeWarning, match="1 of 41 rolling windows"):
            rolled = rolling_fit(y, x, 10)
        assert rolled.n_skipped == 1
        assert np.all(np.isnan(rolled.coefficients[29]))
        assert np.all(np.isfinite(rolled.coefficients[30]))

    def test_missing_values_dropped_within_window(self, series):
        x, y = series
        y = y.copy()
        y[15] = np.nan
        rolled = rolling_fit(y, x, 10)
        keep = np.r_[10:15, 16:20]
        expected = fit_arrays(x[keep], y[keep])
        np.testing.assert_allclose(rolled.coefficients[19], expected.coefficients, rtol=1e-12)
        assert rolled.n_skipped == 0

    def test_too_few_finite_rows_skipped(self, series):
        x, y = series
        x = x.copy()
        x[10:18] = np.nan
        with pytest.warns(RuntimeWarning):
            rolled = rolling_fit(y, x, 10)
        assert rolled.n_skipped > 0
        assert np.all(np.isnan(rolled.coefficients[17]))


class TestRollingValidation:

    def test_window_too_small(self, series):
        x, y = series
        with pytest.raises(ValidationError, match="at least 3"):
            rolling_fit(y, x, 2)

    def test_window_too_large(self, series):
        x, y = series
        with pytest.raises(ValidationError, match="exceeds"):
            rolling_fit(y, x, 51)

    def test_window_without_residual_dof(self, rng):
        X = rng.standard_normal((20, 2))
        with pytest.raises(InsufficientObservationsError):
            rolling_fit(rng.standard_normal(20), X, 3)

    def test_length_mismatch(self, series):
        x, y = series
        with pytest.raises(ShapeMismatchError):
            rolling_fit(y[:40], x, 10)

    def test_bad_dimensions(self, series):
        x, y = series
        with pytest.raises(ValidationError):
            rolling_fit(np.column_stack([y, y]), x, 10)
