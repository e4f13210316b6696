"""Parameter and result containers for the process simulators."""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class AR1Params:
    """y[t] = beta0 + beta1 * y[t-1] + e[t], e ~ N(0, sigma^2)"""
    beta0: float
    beta1: float
    sigma: float

    @property
    def is_stationary(self) -> bool:
        return abs(self.beta1) < 1

    @property
    def mean(self) -> float:
        """Stationary mean beta0 / (1 - beta1); nan when undefined"""
        if self.beta1 == 1:
            return float('nan')
        return self.beta0 / (1 - self.beta1)


@dataclass(frozen=True)
class MA1Params:
    """y[t] = alpha + e[t] + theta * e[t-1]"""
    alpha: float
    theta: float
    sigma: float


@dataclass(frozen=True)
class ARMA11Params:
    """y[t] = const + phi * y[t-1] + e[t] + theta * e[t-1]"""
    const: float
    phi: float
    theta: float
    sigma: float

    @property
    def is_stationary(self) -> bool:
        return abs(self.phi) < 1


@dataclass(frozen=True)
class GARCH11Params:
    """AR(1) mean equation with GARCH(1,1) conditional variance"""
    phi0: float  # mean intercept
    phi1: float  # mean AR coefficient
    alpha0: float  # variance intercept
    alpha1: float  # ARCH term
    beta1: float  # GARCH term

    @property
    def persistence(self) -> float:
        return self.alpha1 + self.beta1

    @property
    def is_stationary(self) -> bool:
        return self.persistence < 1

    @property
    def unconditional_variance(self) -> float:
        if not self.is_stationary:
            return float('inf')
        return self.alpha0 / (1 - self.persistence)


@dataclass(frozen=True)
class GARCHPath:
    """Simulated AR-GARCH sample path after burn-in"""
    series: np.ndarray  # mean-equation values y[t]
    variance: np.ndarray  # conditional variance v[t]

    def __len__(self):
        return len(self.series)

    @property
    def volatility(self) -> np.ndarray:
        return np.sqrt(self.variance)
