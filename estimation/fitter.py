"""
Adapters around external maximum-likelihood estimators.

ARIMA models are fitted with statsmodels and AR-GARCH models with arch. This
module only translates a simulated path into the estimator's call and the
estimator's output into a FitResult.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging

import numpy as np
import pandas as pd
from arch import arch_model
from statsmodels.tsa.arima.model import ARIMA

from simulation.exceptions import InvalidParameter

logger = logging.getLogger(__name__)

# Method tags accepted by fit_arima, mapped onto statsmodels ARIMA.fit methods
ARIMA_METHODS = {
    'mle': 'statespace',
    'innovations_mle': 'innovations_mle',
    'hannan_rissanen': 'hannan_rissanen',
    'innovations': 'innovations',
    'burg': 'burg',
    'yule_walker': 'yule_walker',
}


@dataclass
class FitResult:
    """Container for fitted model output"""
    model_type: str  # 'ARIMA' or 'AR-GARCH'
    order: Tuple[int, ...]
    method: str
    params: Dict[str, float]
    std_errors: Dict[str, float]
    loglik: float
    aic: float
    bic: float
    nobs: int
    extra: Dict[str, float] = field(default_factory=dict)

    def to_frame(self) -> pd.DataFrame:
        """Coefficient table with estimates and standard errors"""
        return pd.DataFrame({
            'estimate': pd.Series(self.params),
            'std_error': pd.Series(self.std_errors),
        })


class ModelFitter:
    """Fits ARIMA and AR-GARCH models to simulated sequences"""

    def __init__(self, min_observations: int = 50):
        """
        Initialize fitter

        Args:
            min_observations: Minimum sequence length accepted for a fit
        """
        self.min_observations = min_observations
        self.logger = logging.getLogger('estimation.fitter')

    def _prepare_series(self, series) -> np.ndarray:
        y = np.asarray(series, dtype=float)
        if y.ndim != 1:
            raise InvalidParameter(f"Expected a one-dimensional series, got shape {y.shape}")
        if len(y) < self.min_observations:
            raise InvalidParameter(
                f"Insufficient observations: {len(y)} < {self.min_observations}"
            )
        if np.any(~np.isfinite(y)):
            raise InvalidParameter("Series contains NaN or infinite values")
        return y

    def fit_arima(self, series, order: Tuple[int, int, int] = (1, 0, 0),
                  method: str = 'mle', trend: Optional[str] = None) -> FitResult:
        """
        Fit an ARIMA(p, d, q) model with statsmodels

        Args:
            series: Observed sequence
            order: (p, d, q)
            method: One of ARIMA_METHODS
            trend: statsmodels trend spec; None uses 'c' for d == 0, else 'n'

        Returns:
            FitResult with coefficients named as statsmodels names them
            (e.g. 'const', 'ar.L1', 'ma.L1', 'sigma2')
        """
        if len(order) != 3 or any(int(o) != o or o < 0 for o in order):
            raise InvalidParameter(f"Order must be three non-negative integers, got {order}")
        if method not in ARIMA_METHODS:
            raise InvalidParameter(
                f"Unknown fitting method '{method}'. Expected one of: {list(ARIMA_METHODS)}"
            )
        y = self._prepare_series(series)
        order = tuple(int(o) for o in order)

        try:
            model = ARIMA(y, order=order, trend=trend)
            result = model.fit(method=ARIMA_METHODS[method])
        except Exception as e:
            self.logger.error(f"Error fitting ARIMA{order} with {method}: {str(e)}")
            raise

        names = list(result.param_names)
        fit = FitResult(
            model_type='ARIMA',
            order=order,
            method=method,
            params=dict(zip(names, np.asarray(result.params, dtype=float))),
            std_errors=dict(zip(names, np.asarray(result.bse, dtype=float))),
            loglik=float(result.llf),
            aic=float(result.aic),
            bic=float(result.bic),
            nobs=int(result.nobs),
        )

        self.logger.info(
            f"Fitted ARIMA{order} ({method}) on {fit.nobs} observations:\n"
            + "\n".join(f"  {name}: {value:.4f}" for name, value in fit.params.items())
            + f"\n  Log-likelihood: {fit.loglik:.2f}  AIC: {fit.aic:.2f}"
        )
        return fit

    def fit_garch(self, series, ar_lags: int = 1, p: int = 1, q: int = 1,
                  dist: str = 'normal') -> FitResult:
        """
        Fit an AR(ar_lags) mean with GARCH(p, q) variance using arch

        Coefficients carry arch's names: 'Const', 'y[1]', 'omega',
        'alpha[1]', 'beta[1]'. Persistence sum(alpha) + sum(beta) is stored
        in extra.
        """
        if ar_lags < 0 or p < 1 or q < 0:
            raise InvalidParameter(
                f"Invalid GARCH specification: ar_lags={ar_lags}, p={p}, q={q}"
            )
        y = self._prepare_series(series)

        try:
            model = arch_model(
                y,
                mean='AR' if ar_lags > 0 else 'Constant',
                lags=ar_lags,
                vol='GARCH',
                p=p,
                q=q,
                dist=dist,
                rescale=False
            )
            result = model.fit(
                disp='off',
                show_warning=False,
                options={'maxiter': 1000},
                update_freq=0
            )
        except Exception as e:
            self.logger.error(f"Error fitting AR({ar_lags})-GARCH({p},{q}): {str(e)}")
            raise

        params = {name: float(value) for name, value in result.params.items()}
        persistence = sum(value for name, value in params.items()
                          if name.startswith(('alpha[', 'beta[')))
        fit = FitResult(
            model_type='AR-GARCH',
            order=(ar_lags, p, q),
            method='mle',
            params=params,
            std_errors={name: float(value) for name, value in result.std_err.items()},
            loglik=float(result.loglikelihood),
            aic=float(result.aic),
            bic=float(result.bic),
            nobs=int(result.nobs),
            extra={'persistence': persistence},
        )

        if persistence >= 1:
            self.logger.warning(f"Fitted variance persistence {persistence:.3f} >= 1")
        self.logger.info(
            f"Fitted AR({ar_lags})-GARCH({p},{q}) {dist} on {fit.nobs} observations:\n"
            + "\n".join(f"  {name}: {value:.4f}" for name, value in params.items())
            + f"\n  Log-likelihood: {fit.loglik:.2f}  AIC: {fit.aic:.2f}"
        )
        return fit


# Example usage
if __name__ == '__main__':
    from simulation import ar1, garch11

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    fitter = ModelFitter()
    fitter.fit_arima(ar1(1.0, 0.5, 0.2, 500, seed=42), order=(1, 0, 0))

    path = garch11(phi0=1.0, phi1=0.5, alpha0=0.02, alpha1=0.3, beta1=0.6, n=2000, seed=42)
    print(fitter.fit_garch(path.series).to_frame())
