"""Errors raised by the process simulators and diagnostics."""


class SimulationError(ValueError):
    """Base class for invalid simulation or diagnostic requests"""


class InvalidParameter(SimulationError):
    """Bad length, negative scale, or lag outside the usable range"""


class NonStationaryVariance(SimulationError):
    """GARCH variance recursion has alpha1 + beta1 >= 1"""


class NonStationaryProcess(SimulationError):
    """Autoregressive coefficient on or outside the unit circle"""
