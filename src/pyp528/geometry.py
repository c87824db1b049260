# -*- coding: utf-8 -*-
# pylint: disable=invalid-name
"""
Terminal geometry, Annex 2, Section 4 of Recommendation ITU-R P.528-5.
"""
from typing import Optional

import numpy as np

from .atmosphere import ReferenceAtmosphere, slant_path_attenuation
from .constants import Const
from .models import Terminal


def terminal_geometry(f_mhz: float, h_r_km: float,
                      atmosphere: Optional[ReferenceAtmosphere] = None) -> Terminal:
    """
    Compute the geometry of a terminal at height h_r_km by tracing the ray
    that grazes the earth's surface up to the terminal.

    Parameters:
    -----------
    f_mhz : float
        Frequency, in MHz
    h_r_km : float
        Real height of the terminal, in km
    atmosphere : ReferenceAtmosphere, optional
        Atmospheric profile used by the ray tracer

    Returns:
    --------
    Terminal
    """
    theta_tx_rad = 0.0

    ray = slant_path_attenuation(f_mhz / 1000.0, 0, h_r_km,
                                 np.pi / 2 - theta_tx_rad, atmosphere)
    theta_rad = np.pi / 2 - ray.angle_rad

    # Arc distance from the terminal to its horizon
    d_r_km = Const.a_0_km * (theta_rad - theta_tx_rad + ray.bending_rad)

    phi_rad = d_r_km / Const.a_e_km                          # [Eqn 4-1]
    h_e_km = Const.a_e_km / np.cos(phi_rad) - Const.a_e_km    # [Eqn 4-2]

    return Terminal(h_r_km=h_r_km,
                    h_e_km=float(h_e_km),
                    delta_h_km=float(h_r_km - h_e_km),        # [Eqn 4-3]
                    d_r_km=float(d_r_km),
                    a_km=ray.a_km,
                    phi_rad=float(phi_rad),
                    theta_rad=float(theta_rad),
                    A_a_db=ray.A_gas_db)
