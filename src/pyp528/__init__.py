# -*- coding: utf-8 -*-
"""
Recommendation ITU-R P.528-5: basic transmission loss for aeronautical
mobile and radionavigation services using the VHF, UHF and SHF bands.
"""
import logging

from .atmosphere import GlobalMeanAtmosphere, ReferenceAtmosphere
from .constants import Const, Polarization, PropagationMode, SearchCase, WarningFlag
from .errors import (AtmosphereHeightError, DistanceError, FrequencyError, HeightError,
                     P528Error, PercentError, PolarizationError, TerminalGeometryError,
                     ValidationError)
from .model import (TABLE_HEIGHTS, bt_loss, bt_loss_ex, compute_loss, loss_curve,
                    loss_table, validate_inputs)
from .models import (DiffractionLine, ExtendedResult, LineOfSightParams, Path, Result,
                     Terminal, TranshorizonResult, TropoParams)
from .nakagami import combine_distributions, find_k_for_ypi_at_99_percent, nakagami_rice

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "AtmosphereHeightError",
    "Const",
    "DiffractionLine",
    "DistanceError",
    "ExtendedResult",
    "FrequencyError",
    "GlobalMeanAtmosphere",
    "HeightError",
    "LineOfSightParams",
    "P528Error",
    "Path",
    "PercentError",
    "Polarization",
    "PolarizationError",
    "PropagationMode",
    "ReferenceAtmosphere",
    "Result",
    "SearchCase",
    "TABLE_HEIGHTS",
    "Terminal",
    "TerminalGeometryError",
    "TranshorizonResult",
    "TropoParams",
    "ValidationError",
    "WarningFlag",
    "bt_loss",
    "bt_loss_ex",
    "combine_distributions",
    "compute_loss",
    "find_k_for_ypi_at_99_percent",
    "loss_curve",
    "loss_table",
    "nakagami_rice",
    "validate_inputs",
]
