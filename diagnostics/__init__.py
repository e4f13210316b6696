"""
Diagnostics for simulated paths: ACF/PACF estimation and differencing.
"""

from .autocorrelation import acf, pacf, confidence_band
from .differencing import difference, integrate

__all__ = ['acf', 'pacf', 'confidence_band', 'difference', 'integrate']
