# -*- coding: utf-8 -*-
"""
Exceptions raised by the P.528 model.

Each validation error carries the numeric return code of the reference
implementation in ``code`` so callers that log or tabulate results can keep
reporting the historical values.
"""


class P528Error(ValueError):
    """Base class of all errors raised by the model"""
    code = -1


class ValidationError(P528Error):
    """Raised when an input is outside the domain of the model"""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class DistanceError(ValidationError):
    code = 1


class HeightError(ValidationError):
    def __init__(self, message, value=None, terminal=1):
        super().__init__(message, value)
        self.terminal = terminal
        self.code = 2 if terminal == 1 else 3


class TerminalGeometryError(ValidationError):
    code = 4


class FrequencyError(ValidationError):
    def __init__(self, message, value=None, too_low=True):
        super().__init__(message, value)
        self.code = 5 if too_low else 6


class PercentError(ValidationError):
    def __init__(self, message, value=None, too_low=True):
        super().__init__(message, value)
        self.code = 7 if too_low else 8


class PolarizationError(ValidationError):
    code = 9


class AtmosphereHeightError(P528Error):
    """Raised when a reference atmosphere is queried outside 0 - 100 km"""

    def __init__(self, h_km):
        super().__init__(f"Height {h_km} km is outside the reference atmosphere (0 - 100 km)")
        self.h_km = h_km
        self.code = -1 if h_km < 0 else -2
