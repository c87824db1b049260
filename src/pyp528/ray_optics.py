# -*- coding: utf-8 -*-
# pylint: disable=invalid-name
"""
Line-of-sight ray optics, Annex 2, Section 7 of Recommendation ITU-R P.528-5.
"""
import numpy as np

from .constants import Const
from .models import LineOfSightParams, Terminal

# Above this grazing angle the reflected ray is taken as vertical [Eqn 7-9]
_PSI_VERTICAL_RAD = 1.56


def ray_optics(terminal_1: Terminal, terminal_2: Terminal,
               psi: float) -> LineOfSightParams:
    """
    Compute the geometry of the direct and ground reflected rays for the
    reflection (grazing) angle psi.

    Parameters:
    -----------
    terminal_1 : Terminal
        Low terminal
    terminal_2 : Terminal
        High terminal
    psi : float
        Reflection angle, in radians

    Returns:
    --------
    LineOfSightParams
        Ray lengths, path difference and take-off angles. A_LOS_db is zero.
    """
    z = (Const.a_0_km / Const.a_e_km) - 1           # [Eqn 7-1]
    k_a = 1 / (1 + z * np.cos(psi))                 # [Eqn 7-2]
    a_a_km = Const.a_0_km * k_a                     # [Eqn 7-3]

    delta_h_km = np.array([terminal_1.delta_h_km, terminal_2.delta_h_km])
    h_r_km = np.array([terminal_1.h_r_km, terminal_2.h_r_km])

    delta_h_a_km = delta_h_km * (a_a_km - Const.a_0_km) / (Const.a_e_km - Const.a_0_km)  # [Eqn 7-4]
    H_km = h_r_km - delta_h_a_km                                                         # [Eqn 7-5]

    z_km = a_a_km + H_km                                        # [Eqn 7-6]
    theta = np.arccos(a_a_km * np.cos(psi) / z_km) - psi        # [Eqn 7-7]
    D_km = z_km * np.sin(theta)                                 # [Eqn 7-8]

    # [Eqn 7-9]
    Hprime_km = H_km if psi > _PSI_VERTICAL_RAD else D_km * np.tan(psi)

    delta_z = abs(z_km[0] - z_km[1])                            # [Eqn 7-10]

    d_km = max(a_a_km * (theta[0] + theta[1]), 0)               # [Eqn 7-11]

    D_sum_km = D_km[0] + D_km[1]
    alpha = np.arctan((Hprime_km[1] - Hprime_km[0]) / D_sum_km)  # [Eqn 7-12]
    r_0_km = max(delta_z, D_sum_km / np.cos(alpha))              # [Eqn 7-13]
    r_12_km = D_sum_km / np.cos(psi)                             # [Eqn 7-14]

    delta_r_km = 4.0 * Hprime_km[0] * Hprime_km[1] / (r_0_km + r_12_km)  # [Eqn 7-15]

    return LineOfSightParams(z_km=z_km,
                             d_km=float(d_km),
                             r_0_km=float(r_0_km),
                             r_12_km=float(r_12_km),
                             D_km=D_km,
                             theta_h1_rad=float(alpha - theta[0]),      # [Eqn 7-16]
                             theta_h2_rad=float(-(alpha + theta[1])),   # [Eqn 7-17]
                             theta=theta,
                             a_a_km=float(a_a_km),
                             delta_r_km=float(delta_r_km))
