# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-instance-attributes
"""
Data structures shared by the components of the model.
"""
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .constants import PropagationMode, SearchCase, WarningFlag


@dataclass(frozen=True)
class Terminal:
    # Heights
    h_r_km: float = 0.0         # Real terminal height
    h_e_km: float = 0.0         # Effective terminal height
    delta_h_km: float = 0.0     # Difference between real and effective height

    # Distances
    d_r_km: float = 0.0         # Ray traced horizon distance
    a_km: float = 0.0           # Total ray path length to horizon

    # Angles
    phi_rad: float = 0.0        # Central angle between the terminal and its smooth earth horizon
    theta_rad: float = 0.0      # Incident angle of the grazing ray at the terminal

    # Losses
    A_a_db: float = 0.0         # Median atmospheric absorption loss, in dB


@dataclass
class Path:
    d_ML_km: float = 0.0        # Maximum line of sight distance
    d_d_km: float = 0.0         # Distance where smooth earth diffraction is 0 dB
    d_0_km: float = 0.0         # Transition between two-ray and diffraction line


@dataclass(frozen=True)
class LineOfSightParams:
    # Heights
    z_km: np.ndarray = field(default_factory=lambda: np.zeros(2))

    # Distances
    d_km: float = 0.0           # Path distance between terminals
    r_0_km: float = 0.0         # Direct ray length
    r_12_km: float = 0.0        # Indirect ray length
    D_km: np.ndarray = field(default_factory=lambda: np.zeros(2))

    # Angles
    theta_h1_rad: float = 0.0   # Take-off angle from low terminal to high terminal
    theta_h2_rad: float = 0.0   # Take-off angle from high terminal to low terminal
    theta: np.ndarray = field(default_factory=lambda: np.zeros(2))

    # Misc
    a_a_km: float = 0.0         # Adjusted earth radius
    delta_r_km: float = 0.0     # Ray length path difference
    A_LOS_db: float = 0.0       # Loss due to LOS path


@dataclass(frozen=True)
class TropoParams:
    d_s_km: float = 0.0         # Scattering distance
    d_z_km: float = 0.0         # Half the scattering distance
    h_v_km: float = 0.0         # Height of the common volume cross-over point
    theta_s: float = 0.0        # Scattering angle
    theta_A: float = 0.0        # Cross-over angle
    A_s_db: float = 0.0         # Troposcatter loss


@dataclass(frozen=True)
class DiffractionLine:
    """Linear smooth earth diffraction loss, A_d = M_d * d + A_d0"""
    M_d: float
    A_d0: float
    A_dML_db: float
    d_d_km: float

    def loss(self, d_km: float) -> float:
        return self.M_d * d_km + self.A_d0


@dataclass(frozen=True)
class TranshorizonResult:
    line: DiffractionLine
    d_crx_km: float
    case: SearchCase
    warnings: WarningFlag = WarningFlag.NONE


@dataclass(frozen=True)
class Result:
    propagation_mode: PropagationMode = PropagationMode.NOT_SET
    warnings: WarningFlag = WarningFlag.NONE
    d_km: float = 0.0           # Path distance used in calculations
    A_db: float = 0.0           # Total loss
    A_fs_db: float = 0.0        # Free space path loss
    A_a_db: float = 0.0         # Atmospheric absorption loss
    theta_h1_rad: float = 0.0   # Elevation angle of the ray at the low terminal


@dataclass(frozen=True)
class ExtendedResult:
    """Result together with the intermediate parameters of the calculation"""
    result: Result
    terminal_1: Optional[Terminal] = None
    terminal_2: Optional[Terminal] = None
    path: Optional[Path] = None
    diffraction_line: Optional[DiffractionLine] = None
    los_params: Optional[LineOfSightParams] = None
    tropo: Optional[TropoParams] = None
    K_LOS: float = 0.0
