"""
Empirical autocorrelation and partial autocorrelation estimators used to read
model order off a simulated path.
"""

import numpy as np
import pandas as pd
from scipy import stats

from simulation.exceptions import InvalidParameter


def _prepare(sequence, maxlag: int, min_lag: int) -> np.ndarray:
    """Validate input and return it as a float array"""
    y = np.asarray(sequence, dtype=float)
    if y.ndim != 1:
        raise InvalidParameter(f"Expected a one-dimensional sequence, got shape {y.shape}")
    if maxlag < min_lag:
        raise InvalidParameter(f"maxlag must be >= {min_lag}, got {maxlag}")
    if maxlag >= len(y):
        raise InvalidParameter(
            f"maxlag {maxlag} must be smaller than the sequence length {len(y)}"
        )
    if np.any(~np.isfinite(y)):
        raise InvalidParameter("Sequence contains NaN or infinite values")
    if np.all(y == y[0]):
        raise InvalidParameter("Autocorrelation is undefined for a constant sequence")
    return y


def _table(values: np.ndarray, first_lag: int, name: str) -> pd.Series:
    index = pd.RangeIndex(first_lag, first_lag + len(values), name='lag')
    return pd.Series(values, index=index, name=name)


def acf(sequence, maxlag: int) -> pd.Series:
    """
    Sample autocorrelation function for lags 0..maxlag.

    r[k] = sum_t (y[t] - m)(y[t+k] - m) / sum_t (y[t] - m)^2

    i.e. the biased (divide by n) autocovariance normalised by the sample
    variance, so r[0] is exactly 1.

    Args:
        sequence: One-dimensional array-like of observations
        maxlag: Largest lag, 0 <= maxlag < len(sequence)

    Returns:
        Series indexed by lag 0..maxlag
    """
    y = _prepare(sequence, maxlag, min_lag=0)
    centered = y - y.mean()
    denom = np.dot(centered, centered)

    values = np.empty(maxlag + 1)
    values[0] = 1.0
    for k in range(1, maxlag + 1):
        values[k] = np.dot(centered[:-k], centered[k:]) / denom

    return _table(values, 0, 'acf')


def pacf(sequence, maxlag: int) -> pd.Series:
    """
    Partial autocorrelation for lags 1..maxlag by direct regression.

    PACF at lag k is the coefficient on y[t-k] in the OLS fit of y[t] on a
    constant and y[t-1], ..., y[t-k] over t = k..n-1. Each lag is its own
    least-squares problem using every observation available for it.
    """
    y = _prepare(sequence, maxlag, min_lag=1)
    n = len(y)

    values = np.empty(maxlag)
    for k in range(1, maxlag + 1):
        target = y[k:]
        lags = [y[k - j:n - j] for j in range(1, k + 1)]
        design = np.column_stack([np.ones(n - k)] + lags)
        coefs = np.linalg.lstsq(design, target, rcond=None)[0]
        values[k - 1] = coefs[-1]

    return _table(values, 1, 'pacf')


def confidence_band(n: int, alpha: float = 0.05) -> float:
    """Half-width of the white-noise band +/- z_{1-alpha/2} / sqrt(n)"""
    if n < 1:
        raise InvalidParameter(f"Sample size must be >= 1, got {n}")
    if not 0 < alpha < 1:
        raise InvalidParameter(f"alpha must lie in (0, 1), got {alpha}")
    return stats.norm.ppf(1 - alpha / 2) / np.sqrt(n)
