"""
Seeded normal draws used by every simulator.
"""

from typing import Optional

import numpy as np

from .exceptions import InvalidParameter

DEFAULT_SEED = 42


def _check_request(n: int, stddev: float):
    if n < 1:
        raise InvalidParameter(f"Sequence length must be >= 1, got {n}")
    if stddev < 0:
        raise InvalidParameter(f"Standard deviation must be >= 0, got {stddev}")


class RandomNormalSource:
    """Explicit random stream, seeded once at construction.

    Wraps ``np.random.RandomState`` rather than the newer Generator API: its
    stream is frozen across numpy releases, so a seed reproduces the same
    draws bit for bit.
    """

    def __init__(self, seed: Optional[int] = DEFAULT_SEED):
        self.seed = seed
        self.random_state = np.random.RandomState(seed)

    def normal(self, n: int, mean: float = 0.0, stddev: float = 1.0) -> np.ndarray:
        """Draw n i.i.d. Normal(mean, stddev**2) values"""
        _check_request(n, stddev)
        return self.random_state.normal(mean, stddev, size=n)

    def standard_normal(self, n: int) -> np.ndarray:
        return self.normal(n, 0.0, 1.0)

    def __repr__(self):
        return f"RandomNormalSource(seed={self.seed})"


def draw(seed: Optional[int], n: int, mean: float = 0.0,
         stddev: float = 1.0) -> np.ndarray:
    """
    Draw n normal values from a freshly seeded stream.

    Args:
        seed: Seed for the stream
        n: Number of draws
        mean: Mean of the normal distribution
        stddev: Standard deviation of the normal distribution

    Returns:
        Read-only array of length n
    """
    values = RandomNormalSource(seed).normal(n, mean, stddev)
    values.setflags(write=False)
    return values


def resolve_source(seed: Optional[int],
                   source: Optional[RandomNormalSource]) -> RandomNormalSource:
    """Use the caller's stream if given, else seed a new one for this call"""
    if source is not None:
        return source
    return RandomNormalSource(seed)
