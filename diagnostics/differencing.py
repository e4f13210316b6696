"""Differencing and its inverse, for ARIMA(p, d, q) paths."""

import numpy as np

from simulation.exceptions import InvalidParameter


def difference(sequence, d: int = 1) -> np.ndarray:
    """d-th order difference; the result is d observations shorter"""
    y = np.asarray(sequence, dtype=float)
    if d < 0:
        raise InvalidParameter(f"Differencing order must be >= 0, got {d}")
    if d >= len(y):
        raise InvalidParameter(
            f"Cannot difference {d} times a sequence of length {len(y)}"
        )
    return np.diff(y, n=d)


def integrate(sequence, d: int = 1) -> np.ndarray:
    """Undo d rounds of differencing with zero initial conditions"""
    y = np.asarray(sequence, dtype=float)
    if d < 0:
        raise InvalidParameter(f"Integration order must be >= 0, got {d}")
    for _ in range(d):
        y = np.cumsum(y)
    return y
