"""
Property tests for fit().

Shape invariant, exact-fit recovery, a hand-computed example,
singularity detection, the degrees-of-freedom boundary, permutation
invariance and determinism.
"""

import pytest
import numpy as np

from pyols import fit
from pyols.core.compute.tolerances import REFERENCE_FP64
from pyols.core.exceptions import (
    InsufficientObservationsError,
    PyOLSError,
    SingularMatrixError,
)

TOL = REFERENCE_FP64


class TestShapeInvariant:

    @pytest.mark.parametrize("n, p", [(3, 1), (5, 2), (10, 0), (25, 4), (40, 8)])
    def test_lengths_are_p_plus_one(self, rng, n, p):
        y = rng.standard_normal(n)
        x_flat = rng.standard_normal(n * p)
        result = fit(y, x_flat, n, p)
        assert len(result.coefficients) == p + 1
        assert len(result.std_errors) == p + 1
        assert result.nparams == p + 1
        assert result.nobs == n

    @pytest.mark.parametrize("n, p", [(0, 0), (1, 0), (2, 1), (3, 2), (3, 5)])
    def test_small_problems_fail_with_named_error(self, rng, n, p):
        with pytest.raises(PyOLSError):
            fit(rng.standard_normal(n), rng.standard_normal(n * p), n, p)


class TestExactFit:

    @pytest.mark.parametrize("a, b", [(2.0, 3.0), (-1.5, 0.25), (100.0, -7.0), (0.0, 1e-3)])
    def test_recovers_line(self, a, b):
        x = np.linspace(-3.0, 7.0, 25)
        y = a + b * x
        result = fit(y, x, 25, 1)
        np.testing.assert_allclose(result.coefficients, [a, b], rtol=TOL.rtol, atol=1e-9)
        assert result.ssr < 1e-18

    def test_recovers_plane(self, rng):
        X = rng.standard_normal((30, 3))
        beta = np.array([0.5, -1.0, 2.0, 4.0])
        y = beta[0] + X @ beta[1:]
        result = fit(y, X.ravel(), 30, 3)
        np.testing.assert_allclose(result.coefficients, beta, rtol=TOL.rtol)
        assert result.ssr < 1e-18


class TestClosedForm:
    """x = [1..5], y = [2, 4, 5, 4, 5] worked by hand."""

    def test_coefficients(self, closed_form_data):
        x, y = closed_form_data
        result = fit(y, x, 5, 1)
        assert result.intercept == pytest.approx(2.2, abs=1e-9)
        assert result.slopes[0] == pytest.approx(0.6, abs=1e-9)

    def test_ssr(self, closed_form_data):
        x, y = closed_form_data
        assert fit(y, x, 5, 1).ssr == pytest.approx(2.4, abs=1e-9)

    def test_std_errors(self, closed_form_data):
        """σ² = 2.4 / 3; SE(b) = sqrt(σ² / Sxx); SE(a) = sqrt(σ² (1/n + x̄² / Sxx))."""
        x, y = closed_form_data
        result = fit(y, x, 5, 1)
        np.testing.assert_allclose(
            result.std_errors, [np.sqrt(0.88), np.sqrt(0.08)], rtol=TOL.rtol
        )


class TestSingularity:

    def test_duplicate_columns_never_nan(self, rng):
        for p in (2, 3, 5):
            X = rng.standard_normal((40, p))
            X[:, -1] = X[:, 0]
            with pytest.raises(SingularMatrixError):
                fit(rng.standard_normal(40), X.ravel(), 40, p)


class TestDegreesOfFreedomBoundary:

    @pytest.mark.parametrize("p", [1, 2, 4])
    def test_dof_one_succeeds(self, rng, p):
        n = p + 2
        result = fit(rng.standard_normal(n), rng.standard_normal(n * p), n, p)
        assert result.df_residual == 1
        assert np.all(np.isfinite(result.std_errors))
        assert np.all(result.std_errors > 0)

    @pytest.mark.parametrize("p", [1, 2, 4])
    def test_dof_zero_rejected(self, rng, p):
        n = p + 1
        with pytest.raises(InsufficientObservationsError) as exc_info:
            fit(rng.standard_normal(n), rng.standard_normal(n * p), n, p)
        assert exc_info.value.df_residual == 0

    @pytest.mark.parametrize("n, p", [(1, 1), (2, 2), (2, 3), (0, 1)])
    def test_fewer_observations_than_predictors(self, rng, n, p):
        with pytest.raises(InsufficientObservationsError):
            fit(rng.standard_normal(n), rng.standard_normal(n * p), n, p)


class TestPermutationInvariance:

    @pytest.mark.parametrize("perm", [[2, 0, 1], [1, 2, 0], [2, 1, 0]])
    def test_reordering_columns(self, simple_regression_data, perm):
        X, y, _ = simple_regression_data
        base = fit(y, X.ravel(), 100, 3)
        permuted = fit(y, X[:, perm].ravel(), 100, 3)

        assert permuted.intercept == pytest.approx(base.intercept, rel=TOL.rtol)
        assert permuted.ssr == pytest.approx(base.ssr, rel=TOL.rtol)
        np.testing.assert_allclose(permuted.slopes, base.slopes[perm], rtol=TOL.rtol)
        np.testing.assert_allclose(
            permuted.std_errors[1:], base.std_errors[1:][perm], rtol=TOL.rtol
        )
        assert permuted.std_errors[0] == pytest.approx(base.std_errors[0], rel=TOL.rtol)


class TestDeterminism:

    @pytest.mark.parametrize("backend", ['normal_equations', 'qr'])
    def test_bit_identical(self, simple_regression_data, backend):
        X, y, _ = simple_regression_data
        first = fit(y, X.ravel(), 100, 3, backend=backend)
        second = fit(y, X.ravel(), 100, 3, backend=backend)
        assert np.array_equal(first.coefficients, second.coefficients)
        assert np.array_equal(first.std_errors, second.std_errors)
        assert first.ssr == second.ssr
        assert first == second
        assert first.to_dict() == second.to_dict()
