"""Plotting utilities for simulated time series"""

from .plotter import TimeSeriesVisualizer

__all__ = ['TimeSeriesVisualizer']
