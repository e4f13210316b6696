import sys
import os

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.append(project_root)

import pytest
import numpy as np
import pandas as pd
from estimation import ModelFitter, FitResult
from simulation import ar1, ma1, garch11
from simulation.exceptions import InvalidParameter

@pytest.fixture
def fitter():
    """Create fitter instance"""
    return ModelFitter(min_observations=100)

@pytest.fixture
def ar_path():
    return ar1(1.0, 0.5, 0.2, 2000, seed=7)

@pytest.fixture
def garch_path():
    return garch11(phi0=1.0, phi1=0.5, alpha0=0.02, alpha1=0.3, beta1=0.6, n=3000, seed=1)

def test_arima_recovers_ar1(fitter, ar_path):
    """ML fit of an AR(1) path recovers its coefficients"""
    result = fitter.fit_arima(ar_path, order=(1, 0, 0))

    assert isinstance(result, FitResult)
    assert result.model_type == 'ARIMA'
    assert result.order == (1, 0, 0)
    assert result.method == 'mle'
    assert result.nobs == 2000
    assert abs(result.params['ar.L1'] - 0.5) < 0.06
    assert abs(result.params['const'] - 2.0) < 0.05  # statsmodels reports the mean
    assert abs(result.params['sigma2'] - 0.04) < 0.005
    assert all(se > 0 for se in result.std_errors.values())
    assert np.isfinite(result.loglik)
    assert result.aic == pytest.approx(-2 * result.loglik + 2 * len(result.params))

def test_arima_recovers_ma1(fitter):
    path = ma1(0.0, 0.6, 1.0, 2000, seed=3)
    result = fitter.fit_arima(path, order=(0, 0, 1))
    assert abs(result.params['ma.L1'] - 0.6) < 0.08

def test_arima_with_differencing(fitter):
    """A random walk with drift-free steps fits ARIMA(0,1,0) with unit variance"""
    path = np.cumsum(ar1(0.0, 0.0, 1.0, 1000, seed=2))
    result = fitter.fit_arima(path, order=(0, 1, 0))
    assert 'const' not in result.params
    assert abs(result.params['sigma2'] - 1.0) < 0.15

def test_alternative_method(fitter, ar_path):
    centered = ar_path - ar_path.mean()
    result = fitter.fit_arima(centered, order=(1, 0, 0), method='innovations_mle', trend='n')
    assert result.method == 'innovations_mle'
    assert abs(result.params['ar.L1'] - 0.5) < 0.06

def test_coefficient_table(fitter, ar_path):
    table = fitter.fit_arima(ar_path, order=(1, 0, 0)).to_frame()
    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == ['estimate', 'std_error']
    assert set(table.index) == {'const', 'ar.L1', 'sigma2'}

def test_garch_fit(fitter, garch_path):
    """AR(1)-GARCH(1,1) fit of a simulated path"""
    result = fitter.fit_garch(garch_path.series)

    assert result.model_type == 'AR-GARCH'
    assert result.order == (1, 1, 1)
    assert {'omega', 'alpha[1]', 'beta[1]'} <= set(result.params)
    assert result.params['omega'] > 0
    assert result.params['alpha[1]'] > 0
    assert result.params['beta[1]'] > 0
    assert 0.5 < result.extra['persistence'] < 1.0
    assert result.nobs <= 3000
    assert np.isfinite(result.loglik)

    ar_coef = next(value for name, value in result.params.items()
                   if name.endswith('[1]') and not name.startswith(('alpha', 'beta')))
    assert abs(ar_coef - 0.5) < 0.1

def test_error_handling(fitter, ar_path):
    """Bad requests are rejected before reaching the estimators"""
    with pytest.raises(InvalidParameter):
        fitter.fit_arima(ar_path[:50], order=(1, 0, 0))

    with pytest.raises(InvalidParameter):
        fitter.fit_arima(ar_path, order=(1, 0, 0), method='least_squares')

    with pytest.raises(InvalidParameter):
        fitter.fit_arima(ar_path, order=(1, -1, 0))

    with pytest.raises(InvalidParameter):
        fitter.fit_arima(ar_path, order=(1, 0))

    with pytest.raises(InvalidParameter):
        fitter.fit_garch(ar_path, p=0)

    with_nan = np.array(ar_path)
    with_nan[10] = np.nan
    with pytest.raises(InvalidParameter):
        fitter.fit_garch(with_nan)

if __name__ == '__main__':
    pytest.main([__file__])
