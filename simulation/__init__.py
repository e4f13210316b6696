"""
Simulation package for univariate time-series processes.
Seeded random streams and recursive sample-path generators.
"""

from .exceptions import (SimulationError, InvalidParameter,
                         NonStationaryVariance, NonStationaryProcess)
from .random_source import RandomNormalSource, draw
from .models import AR1Params, MA1Params, ARMA11Params, GARCH11Params, GARCHPath
from .processes import (white_noise, ar1, unit_root, ma1, arma11, arima,
                        garch11, GARCH_BURN_IN)

__all__ = ['SimulationError', 'InvalidParameter', 'NonStationaryVariance',
           'NonStationaryProcess', 'RandomNormalSource', 'draw',
           'AR1Params', 'MA1Params', 'ARMA11Params', 'GARCH11Params', 'GARCHPath',
           'white_noise', 'ar1', 'unit_root', 'ma1', 'arma11', 'arima',
           'garch11', 'GARCH_BURN_IN']
