"""
Recursive simulators for the univariate processes used in the time-series
tutorial: white noise, AR(1), unit root, MA(1), ARMA(1,1), ARIMA(1,d,1) and
AR(1)-GARCH(1,1).

Every simulator draws its noise once up front into a preallocated buffer and
fills the output with an explicit forward loop. Outputs are read-only arrays.
"""

import logging
from typing import Optional

import numpy as np

from diagnostics.differencing import integrate
from .exceptions import InvalidParameter, NonStationaryProcess, NonStationaryVariance
from .models import AR1Params, ARMA11Params, GARCH11Params, GARCHPath, MA1Params
from .random_source import DEFAULT_SEED, RandomNormalSource, resolve_source

logger = logging.getLogger(__name__)

# Warm-up steps discarded so the variance recursion forgets its starting value
GARCH_BURN_IN = 500


def _validate_length(n: int):
    if n < 1:
        raise InvalidParameter(f"Requested length must be >= 1, got {n}")


def _validate_scale(sigma: float):
    if sigma < 0:
        raise InvalidParameter(f"Innovation scale must be >= 0, got {sigma}")


def _freeze(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


def _check_ar_coefficient(coef: float, name: str, strict: bool):
    if abs(coef) < 1:
        return
    if strict:
        raise NonStationaryProcess(f"|{name}| = {abs(coef):.4f} >= 1, process is not stationary")
    logger.warning(f"|{name}| = {abs(coef):.4f} >= 1: simulating a non-stationary path")


def white_noise(n: int, sigma: float = 1.0, seed: Optional[int] = DEFAULT_SEED,
                source: Optional[RandomNormalSource] = None) -> np.ndarray:
    """Gaussian white noise, N(0, sigma^2) i.i.d."""
    _validate_length(n)
    _validate_scale(sigma)
    source = resolve_source(seed, source)
    return _freeze(source.normal(n, 0.0, sigma))


def ar1(beta0: float, beta1: float, sigma: float, n: int,
        seed: Optional[int] = DEFAULT_SEED,
        source: Optional[RandomNormalSource] = None,
        strict: bool = False) -> np.ndarray:
    """
    Simulate y[t] = beta0 + beta1 * y[t-1] + e[t].

    The path starts at the stationary mean beta0 / (1 - beta1) plus the first
    shock. |beta1| >= 1 gives a non-stationary path: it is simulated with a
    warning, or rejected with NonStationaryProcess when strict is set. With
    beta1 == 1 the mean is undefined and the path starts at the first shock.

    Args:
        beta0: Intercept
        beta1: Autoregressive coefficient
        sigma: Innovation standard deviation
        n: Number of observations
        seed: Seed for a fresh random stream (ignored if source is given)
        source: Explicit random stream to draw from
        strict: Raise instead of warning on a non-stationary coefficient

    Returns:
        Read-only array of length n
    """
    _validate_length(n)
    _validate_scale(sigma)
    params = AR1Params(beta0, beta1, sigma)
    _check_ar_coefficient(beta1, 'beta1', strict)

    noise = resolve_source(seed, source).normal(n, 0.0, sigma)

    y = np.empty(n)
    y[0] = noise[0] if beta1 == 1 else params.mean + noise[0]
    for t in range(1, n):
        y[t] = beta0 + beta1 * y[t - 1] + noise[t]

    logger.debug(f"Simulated AR(1) {params} with n={n}")
    return _freeze(y)


def unit_root(n: int, sigma: float = 1.0, seed: Optional[int] = DEFAULT_SEED,
              source: Optional[RandomNormalSource] = None) -> np.ndarray:
    """Random walk y[t] = y[t-1] + e[t] starting from y[0] = e[0]"""
    _validate_length(n)
    _validate_scale(sigma)
    noise = resolve_source(seed, source).normal(n, 0.0, sigma)

    y = np.empty(n)
    y[0] = noise[0]
    for t in range(1, n):
        y[t] = y[t - 1] + noise[t]

    return _freeze(y)


def ma1(alpha: float, theta: float, sigma: float, n: int,
        seed: Optional[int] = DEFAULT_SEED,
        source: Optional[RandomNormalSource] = None) -> np.ndarray:
    """
    Simulate y[t] = alpha + e[t] + theta * e[t-1].

    There is no shock before the first observation, so y[0] = alpha + e[0].
    """
    _validate_length(n)
    _validate_scale(sigma)
    params = MA1Params(alpha, theta, sigma)
    noise = resolve_source(seed, source).normal(n, 0.0, sigma)

    y = np.empty(n)
    y[0] = alpha + noise[0]
    for t in range(1, n):
        y[t] = alpha + noise[t] + theta * noise[t - 1]

    logger.debug(f"Simulated MA(1) {params} with n={n}")
    return _freeze(y)


def arma11(const: float, phi: float, theta: float, sigma: float, n: int,
           seed: Optional[int] = DEFAULT_SEED,
           source: Optional[RandomNormalSource] = None,
           strict: bool = False) -> np.ndarray:
    """
    Simulate y[t] = const + phi * y[t-1] + e[t] + theta * e[t-1].

    Initialised like ar1 (stationary mean plus the first shock). Reduces to
    ar1 for theta == 0 and to ma1 for phi == 0.
    """
    _validate_length(n)
    _validate_scale(sigma)
    params = ARMA11Params(const, phi, theta, sigma)
    _check_ar_coefficient(phi, 'phi', strict)

    noise = resolve_source(seed, source).normal(n, 0.0, sigma)

    y = np.empty(n)
    y[0] = noise[0] if phi == 1 else const / (1 - phi) + noise[0]
    for t in range(1, n):
        y[t] = const + phi * y[t - 1] + noise[t] + theta * noise[t - 1]

    logger.debug(f"Simulated ARMA(1,1) {params} with n={n}")
    return _freeze(y)


def arima(const: float, phi: float, theta: float, d: int, sigma: float, n: int,
          seed: Optional[int] = DEFAULT_SEED,
          source: Optional[RandomNormalSource] = None,
          strict: bool = False) -> np.ndarray:
    """ARIMA(1, d, 1): an ARMA(1,1) path integrated d times"""
    if d < 0:
        raise InvalidParameter(f"Integration order must be >= 0, got {d}")
    path = arma11(const, phi, theta, sigma, n, seed=seed, source=source, strict=strict)
    if d == 0:
        return path
    return _freeze(integrate(path, d))


def garch11(phi0: float, phi1: float, alpha0: float, alpha1: float, beta1: float,
            n: int, seed: Optional[int] = DEFAULT_SEED,
            source: Optional[RandomNormalSource] = None,
            burn_in: int = GARCH_BURN_IN,
            strict: bool = True) -> GARCHPath:
    """
    Simulate an AR(1) mean equation with GARCH(1,1) errors.

        v[t] = alpha0 + beta1 * v[t-1] + alpha1 * a[t-1]^2
        a[t] = sqrt(v[t]) * x[t],  x[t] ~ N(0, 1)
        y[t] = phi0 + phi1 * y[t-1] + a[t]

    The recursion runs for n + burn_in steps starting from the long-run
    variance alpha0 / (1 - alpha1 - beta1) and the mean phi0 / (1 - phi1);
    the first burn_in values of both y and v are dropped.

    Args:
        phi0: Mean-equation intercept
        phi1: Mean-equation AR coefficient
        alpha0: Variance intercept, must be > 0
        alpha1: ARCH coefficient, must be >= 0
        beta1: GARCH coefficient, must be >= 0
        n: Number of observations returned
        seed: Seed for a fresh random stream (ignored if source is given)
        source: Explicit random stream to draw from
        burn_in: Number of warm-up steps discarded
        strict: Raise NonStationaryVariance when alpha1 + beta1 >= 1.
            Otherwise warn and start the variance at alpha0.

    Returns:
        GARCHPath with series and variance, each of length n
    """
    _validate_length(n)
    if burn_in < 0:
        raise InvalidParameter(f"Burn-in must be >= 0, got {burn_in}")
    if alpha0 <= 0:
        raise InvalidParameter(f"Variance intercept alpha0 must be > 0, got {alpha0}")
    if alpha1 < 0 or beta1 < 0:
        raise InvalidParameter(
            f"Variance coefficients must be non-negative: alpha1={alpha1}, beta1={beta1}"
        )

    params = GARCH11Params(phi0, phi1, alpha0, alpha1, beta1)
    if params.is_stationary:
        v0 = params.unconditional_variance
    elif strict:
        raise NonStationaryVariance(
            f"alpha1 + beta1 = {params.persistence:.4f} >= 1, "
            f"long-run variance is undefined"
        )
    else:
        logger.warning(
            f"alpha1 + beta1 = {params.persistence:.4f} >= 1: "
            f"starting variance recursion at alpha0={alpha0}"
        )
        v0 = alpha0
    _check_ar_coefficient(phi1, 'phi1', strict=False)

    total = n + burn_in
    shocks = resolve_source(seed, source).standard_normal(total)

    v = np.empty(total)
    a = np.empty(total)
    y = np.empty(total)

    v[0] = v0
    a[0] = np.sqrt(v[0]) * shocks[0]
    y[0] = (0.0 if phi1 == 1 else phi0 / (1 - phi1)) + a[0]
    for t in range(1, total):
        v[t] = alpha0 + beta1 * v[t - 1] + alpha1 * a[t - 1] ** 2
        a[t] = np.sqrt(v[t]) * shocks[t]
        y[t] = phi0 + phi1 * y[t - 1] + a[t]

    logger.debug(
        f"Simulated AR(1)-GARCH(1,1) {params}: {total} steps, "
        f"kept last {n}, mean variance {v[burn_in:].mean():.6f}"
    )
    return GARCHPath(series=_freeze(y[burn_in:].copy()),
                     variance=_freeze(v[burn_in:].copy()))
