"""
QR decomposition for least squares.

Householder QR via LAPACK (through NumPy) with triangular back
substitution via SciPy. Used by the 'qr' regression backend as an
orthogonal-factorization cross-check of the normal equations.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pyols.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of a reduced QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns (n x p)
        R: Upper triangular matrix (p x p)
        rank: Numerical rank determined from the R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_decompose(X: NDArray[np.floating[Any]]) -> QRResult:
    """
    Reduced QR decomposition X = QR.

    The numerical rank counts diagonal entries of R above
    max(n, p) * eps * |R[0, 0]|, the LAPACK-style default.
    """
    Q, R = np.linalg.qr(X, mode='reduced')

    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R[0]
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve min_β ||y - Xβ||² as β = R⁻¹ Q'y.

    Args:
        X: Design matrix (n x p), n >= p
        y: Response vector (n,)

    Returns:
        Coefficient vector β (p,)

    Raises:
        SingularMatrixError: If X is numerically rank-deficient
    """
    p = X.shape[1]
    qr = qr_decompose(X)

    if qr.rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={qr.rank}, expected={p}. "
            f"This indicates perfect multicollinearity.",
            matrix_name='X',
        )

    Qty = qr.Q.T @ y
    return solve_triangular(qr.R[:p, :p], Qty[:p], lower=False)
