# -*- coding: utf-8 -*-
# pylint: disable=invalid-name
"""
Ground reflection coefficients, Annex 2, Section 9 of Recommendation
ITU-R P.528-5.
"""
from typing import Tuple

import numpy as np

from .constants import Const, Polarization


def reflection_coefficients(psi_rad: float, f_mhz: float, T_pol: int
                            ) -> Tuple[float, float]:
    """
    Compute the complex reflection coefficient of a smooth earth.

    Parameters:
    -----------
    psi_rad : float
        Reflection angle, in rad. Clamped to [0, pi/2]
    f_mhz : float
        Frequency, in MHz
    T_pol : int
        Polarization, see Polarization

    Returns:
    --------
    R_g : float
        Magnitude of the reflection coefficient
    phi_g : float
        Phase of the reflection coefficient, in rad
    """
    psi_rad = min(max(psi_rad, 0.0), np.pi / 2)
    sin_psi = np.sin(psi_rad)
    cos_psi = np.cos(psi_rad)

    X = (18000.0 * Const.sigma) / f_mhz              # [Eqn 9-1]
    Y = Const.epsilon_r - cos_psi**2                 # [Eqn 9-2]
    T = np.sqrt(Y**2 + X**2) + Y                     # [Eqn 9-3]
    P = np.sqrt(T * 0.5)                             # [Eqn 9-4]
    Q = X / (2.0 * P)                                # [Eqn 9-5]

    if T_pol == Polarization.HORIZONTAL:
        B = 1.0 / (P**2 + Q**2)                                      # [Eqn 9-6]
        A = (2.0 * P) / (P**2 + Q**2)                                # [Eqn 9-7]
        alpha = np.arctan2(-Q, sin_psi - P)                          # [Eqn 9-9]
        beta = np.arctan2(Q, sin_psi + P)                            # [Eqn 9-10]
    else:
        B = (Const.epsilon_r**2 + X**2) / (P**2 + Q**2)
        A = (2.0 * (P * Const.epsilon_r + Q * X)) / (P**2 + Q**2)
        alpha = np.arctan2(Const.epsilon_r * sin_psi - Q,
                           Const.epsilon_r * sin_psi - P)
        beta = np.arctan2(X * sin_psi + Q,
                          Const.epsilon_r * sin_psi + P)

    # [Eqn 9-8]
    R_g = np.sqrt((1.0 + B * sin_psi**2 - A * sin_psi) /
                  (1.0 + B * sin_psi**2 + A * sin_psi))

    return float(R_g), float(alpha - beta)     # [Eqn 9-11]
