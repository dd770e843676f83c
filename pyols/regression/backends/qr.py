"""
QR backend for linear regression.

Coefficients come from a Householder QR of the design matrix, which
avoids squaring the condition number of X. Standard errors still use
(X'X)⁻¹ from the Gauss-Jordan kernel, so singularity is reported the
same way as by the normal-equations backend.
"""

from pyols.core.compute.linalg import qr_solve
from pyols.core.compute.timing import Timer
from pyols.regression.backends._common import (
    assemble_result,
    invert_normal_matrix,
    scaled_normal_matrix,
)
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import RegressionResult


class QRBackend:
    """Cross-check backend: β = R⁻¹ Q'y."""

    @property
    def name(self) -> str:
        return 'qr'

    def solve(self, design: RegressionDesign) -> RegressionResult:
        """
        Raises:
            SingularMatrixError: If X is rank-deficient or X'X has no
                valid pivot
        """
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            Xs, XtX, scales = scaled_normal_matrix(design.X)

        # Rank is judged on the scaled columns, as for the normal equations
        with timer.section('coefficients'):
            coefficients = qr_solve(Xs, design.y) / scales

        with timer.section('inverse'):
            XtX_inv = invert_normal_matrix(XtX)

        return assemble_result(design, coefficients, XtX_inv, scales, self.name, timer)
