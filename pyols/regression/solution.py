"""
Regression solution types.

RegressionResult is the immutable value returned by fit(). It holds no
references into caller memory and can be converted to plain Python
types with to_dict() for crossing process or language boundaries.
"""

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats

_ARRAY_FIELDS = ('coefficients', 'std_errors', 'residuals', 'fitted_values')


def _frozen_array(values: Any) -> NDArray[np.floating[Any]]:
    arr = np.array(values, dtype=np.float64, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class RegressionResult:
    """
    Ordinary least squares fit of y ≈ Xβ with an intercept.

    Attributes:
        coefficients: nparams estimates; index 0 is the intercept, indices
            1..p are slopes in the order the feature columns were supplied
        std_errors: Standard error per coefficient, same ordering
        ssr: Sum of squared residuals
        nobs: Observations used
        nparams: Number of coefficients (predictors + 1)
        tss: Total sum of squares about the mean of y
        residuals: y - ŷ
        fitted_values: ŷ = Xβ
        backend_name: Backend that produced the coefficients
        timing: Per-section wall time, or None. Not part of equality.
    """
    coefficients: NDArray[np.floating[Any]]
    std_errors: NDArray[np.floating[Any]]
    ssr: float
    nobs: int
    nparams: int
    tss: float
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    backend_name: str = 'normal_equations'
    timing: dict[str, float] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in _ARRAY_FIELDS:
            object.__setattr__(self, name, _frozen_array(getattr(self, name)))
        object.__setattr__(self, 'ssr', float(self.ssr))
        object.__setattr__(self, 'tss', float(self.tss))
        object.__setattr__(self, 'nobs', int(self.nobs))
        object.__setattr__(self, 'nparams', int(self.nparams))
        if self.timing is not None:
            object.__setattr__(self, 'timing', dict(self.timing))

        if not (len(self.coefficients) == len(self.std_errors) == self.nparams):
            raise ValueError(
                f"coefficients ({len(self.coefficients)}) and std_errors "
                f"({len(self.std_errors)}) must both have nparams={self.nparams} entries"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegressionResult):
            return NotImplemented
        return (
            self.nobs == other.nobs
            and self.nparams == other.nparams
            and self.ssr == other.ssr
            and self.tss == other.tss
            and self.backend_name == other.backend_name
            and all(
                np.array_equal(getattr(self, name), getattr(other, name))
                for name in _ARRAY_FIELDS
            )
        )

    __hash__ = None  # type: ignore[assignment]

    # === Coefficient views ===

    @property
    def intercept(self) -> float:
        return float(self.coefficients[0])

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        """Coefficients 1..p, in feature column order."""
        return self.coefficients[1:]

    # === Fit statistics ===

    @property
    def df_residual(self) -> int:
        return self.nobs - self.nparams

    @property
    def sigma_squared(self) -> float:
        """Residual variance, ssr / df_residual."""
        return self.ssr / self.df_residual

    @property
    def residual_std_error(self) -> float:
        return float(np.sqrt(self.sigma_squared))

    def _negligible(self, sum_of_squares: float) -> bool:
        """True if a sum of squares is at round-off level for this response."""
        y = self.fitted_values + self.residuals
        y_max = float(np.max(np.abs(y))) if y.size else 0.0
        return sum_of_squares <= self.nobs * np.finfo(np.float64).eps * y_max ** 2

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination, 1 - SSR / TSS.

        For a response that is constant up to round-off, 1.0 if the fit is
        exact at the same level and 0.0 otherwise.
        """
        if self._negligible(self.tss):
            return 1.0 if self._negligible(self.ssr) else 0.0
        return 1.0 - (self.ssr / self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        if self._negligible(self.tss):
            return self.r_squared
        return 1.0 - (1.0 - self.r_squared) * (self.nobs - 1) / self.df_residual

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """
        t-statistics, coefficient / standard error.

        NaN where the standard error is zero (exact fit).
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.std_errors
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with df_residual degrees of freedom."""
        t = self.t_statistics
        p = 2.0 * stats.t.sf(np.abs(t), self.df_residual)
        return np.where(np.isnan(t), np.nan, p)

    # === Export ===

    def to_dict(self) -> dict[str, Any]:
        """
        Plain-Python representation (lists, floats, ints).

        Contains exactly the fields a foreign caller needs; timing and the
        per-observation arrays are left out.
        """
        return {
            'coefficients': [float(c) for c in self.coefficients],
            'std_errors': [float(s) for s in self.std_errors],
            'ssr': self.ssr,
            'nobs': self.nobs,
            'nparams': self.nparams,
        }

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "OLS Regression Results",
            "=" * 66,
            f"Observations: {self.nobs}",
            f"Parameters: {self.nparams}",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            f"SSR: {self.ssr:.6g}",
            "",
            "Coefficients:",
            "-" * 66,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 66,
        ]

        for i, (coef, se, t, p) in enumerate(zip(
            self.coefficients, self.std_errors, self.t_statistics, self.p_values
        )):
            label = "(Intercept)" if i == 0 else f"x{i}"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            p_str = f"{p:12.4g}" if not np.isnan(p) else "          NA"
            lines.append(f"{label:<12} {coef:14.6f} {se:12.6f} {t_str} {p_str}")

        lines.append("-" * 66)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionResult(nobs={self.nobs}, nparams={self.nparams}, "
            f"ssr={self.ssr:.6g}, r_squared={self.r_squared:.4f})"
        )
