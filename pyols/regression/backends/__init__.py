"""
Regression backends.

Available backends:
    NormalEquationsBackend: β = (X'X)⁻¹ X'y via Gauss-Jordan (default)
    QRBackend: β = R⁻¹ Q'y via Householder QR (cross-check)
"""

from pyols.regression.backends.normal_equations import NormalEquationsBackend
from pyols.regression.backends.qr import QRBackend

__all__ = [
    "NormalEquationsBackend",
    "QRBackend",
]
