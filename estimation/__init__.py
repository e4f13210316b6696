"""
Model fitting package.
Delegates ARIMA and GARCH estimation to statsmodels and arch.
"""

from .fitter import ModelFitter, FitResult, ARIMA_METHODS

__all__ = ['ModelFitter', 'FitResult', 'ARIMA_METHODS']
