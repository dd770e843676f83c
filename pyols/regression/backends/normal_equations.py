"""
Normal-equations backend for linear regression.

Solves X'Xβ = X'y by explicitly inverting X'X with the dense
Gauss-Jordan kernel. The same inverse supplies the standard errors.
"""

from pyols.core.compute.linalg import multiply, transpose
from pyols.core.compute.timing import Timer
from pyols.regression.backends._common import (
    assemble_result,
    invert_normal_matrix,
    scaled_normal_matrix,
)
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import RegressionResult


class NormalEquationsBackend:
    """
    Default backend: β = (X'X)⁻¹ X'y.

    Stateless; one instance may serve any number of fits.
    """

    @property
    def name(self) -> str:
        return 'normal_equations'

    def solve(self, design: RegressionDesign) -> RegressionResult:
        """
        Fit OLS via the normal equations.

        Algorithm:
            1. Scale each design column by a power of two, then X'X
               (nparams x nparams) and X'y on the scaled design
            2. (X'X)⁻¹ by Gauss-Jordan with partial pivoting
            3. β = (X'X)⁻¹ X'y, unscaled per column
            4. Residuals, SSR, σ² = SSR / dof, SE = sqrt(σ² diag((X'X)⁻¹))

        Raises:
            SingularMatrixError: If X'X has no valid pivot
        """
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            Xs, XtX, scales = scaled_normal_matrix(design.X)
            Xty = multiply(transpose(Xs), design.y)

        with timer.section('inverse'):
            XtX_inv = invert_normal_matrix(XtX)

        with timer.section('coefficients'):
            coefficients = multiply(XtX_inv, Xty) / scales

        return assemble_result(design, coefficients, XtX_inv, scales, self.name, timer)
