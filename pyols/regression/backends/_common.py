"""
Shared helpers for regression backends.

Both backends work on the column-scaled design, invert its normal matrix
for standard errors, and summarize residuals the same way; only the
coefficient path differs.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyols.core.compute.linalg import diagonal, invert, multiply, transpose
from pyols.core.compute.timing import Timer
from pyols.core.exceptions import SingularMatrixError
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import RegressionResult


def column_scales(X: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Power-of-two scale per design column, at least max|X[:, j]|.

    Dividing by a power of two is exact, so X / scales keeps every
    digit of X while bringing each column into [-1, 1]. X'X is then
    formed without overflow or underflow whatever the predictors' units.

    Raises:
        SingularMatrixError: If a design column is all zeros
    """
    max_abs = np.max(np.abs(X), axis=0)
    zero_cols = np.flatnonzero(max_abs == 0.0)
    if zero_cols.size:
        col = int(zero_cols[0])
        raise SingularMatrixError(
            f"X'X is singular: design column {col} is identically zero",
            matrix_name='X',
            column=col,
            pivot=0.0,
            threshold=0.0,
        )
    _, exponents = np.frexp(max_abs)
    return np.ldexp(1.0, exponents)


def scaled_normal_matrix(
    X: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Column-scale X and form its normal matrix.

    Returns:
        (Xs, XsᵀXs, scales) with Xs = X / scales
    """
    scales = column_scales(X)
    Xs = X / scales
    return Xs, multiply(transpose(Xs), Xs), scales


def invert_normal_matrix(XtX: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    (X'X)⁻¹ via Gauss-Jordan on the equilibrated matrix.

    X'X is scaled to unit diagonal, D⁻½ X'X D⁻½, before inversion so the
    singular-pivot threshold compares like with like. The inverse is
    scaled back: (X'X)⁻¹ = D⁻½ A⁻¹ D⁻½.

    Expects the normal matrix of a column-scaled design, whose diagonal
    is strictly positive.

    Raises:
        SingularMatrixError: If the equilibrated matrix has no valid pivot
    """
    s = 1.0 / np.sqrt(diagonal(XtX))
    scale = np.outer(s, s)
    return invert(XtX * scale, name="X'X") * scale


def standard_errors(
    XtX_inv: NDArray[np.floating[Any]],
    sigma_squared: float,
    scales: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    SE(β) = sqrt(σ² · diag((X'X)⁻¹)), from the scaled-design inverse.

    With Xs = X / scales, diag((X'X)⁻¹)_j = diag((XsᵀXs)⁻¹)_j / scales_j²,
    so the square root is taken before unscaling.

    Raises:
        SingularMatrixError: If a variance factor is not strictly positive,
            which only happens when X'X is numerically degenerate
    """
    var_factors = diagonal(XtX_inv)
    bad = np.flatnonzero(~np.isfinite(var_factors) | (var_factors <= 0.0))
    if bad.size:
        col = int(bad[0])
        raise SingularMatrixError(
            f"(X'X)⁻¹ has a non-positive diagonal entry at column {col} "
            f"({var_factors[col]:.3e}); X'X is numerically degenerate",
            matrix_name="(X'X)⁻¹",
            column=col,
        )
    return np.sqrt(sigma_squared * var_factors) / scales


def assemble_result(
    design: RegressionDesign,
    coefficients: NDArray[np.floating[Any]],
    XtX_inv: NDArray[np.floating[Any]],
    scales: NDArray[np.floating[Any]],
    backend_name: str,
    timer: Timer,
) -> RegressionResult:
    """Residuals, SSR, σ² and standard errors for a coefficient vector."""
    y = design.y

    with timer.section('residuals'):
        fitted_values = multiply(design.X, coefficients)
        residuals = y - fitted_values
        ssr = float(residuals @ residuals)
        centered = y - np.mean(y)
        tss = float(centered @ centered)

    with timer.section('standard_errors'):
        sigma_squared = ssr / design.df_residual
        se = standard_errors(XtX_inv, sigma_squared, scales)

    timer.stop()

    return RegressionResult(
        coefficients=coefficients,
        std_errors=se,
        ssr=ssr,
        nobs=design.n,
        nparams=design.n_params,
        tss=tss,
        residuals=residuals,
        fitted_values=fitted_values,
        backend_name=backend_name,
        timing=timer.result(),
    )
