# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-arguments
"""
Smooth earth diffraction, Annex 2, Section 10 of Recommendation ITU-R
P.528-5, and the diffraction line of Annex 2, Section 3, Step 3.

The height-gain function follows the polarization dependent revision of
the Recommendation (surface admittance K for horizontal and vertical
polarization).
"""
import numpy as np

from .constants import Const, Polarization
from .models import DiffractionLine, Terminal

B_0 = 1.607


def surface_admittance(f_mhz: float, T_pol: int) -> float:
    """Normalized surface admittance K of the ground"""
    s = 18000 * Const.sigma / f_mhz
    denominator = (Const.epsilon_r - 1)**2 + s**2

    if T_pol == Polarization.HORIZONTAL:
        return 0.01778 * f_mhz**(-Const.THIRD) * denominator**(-0.25)
    return (0.01778 * f_mhz**(-Const.THIRD) *
            ((Const.epsilon_r**2 + s**2) / denominator**0.5)**0.5)


def distance_function(x_km: float) -> float:
    """[Vogler 1964, Equ 13]"""
    return 0.05751 * x_km - 10.0 * np.log10(x_km)


def height_function(x_km: float, K: float) -> float:
    """Height-gain function F(x), in dB"""
    # [FAA-ES-83-3, Equ 73]
    y_db = 40.0 * np.log10(x_km) - 117.0

    if x_km > 2000.0:
        # [Vogler 1964] F_x ~= G_x for large x
        return distance_function(x_km)

    if x_km > 200.0:
        # [FAA-ES-83-3, Equ 72] weighting variable, [Equ 75] blend
        W = 0.0134 * x_km * np.exp(-0.005 * x_km)
        return W * y_db + (1.0 - W) * distance_function(x_km)

    x_t_km = 450 / (-(np.log10(K))**3)      # [Eqn 109]

    # [Eqn 110]
    if x_km >= x_t_km:
        return y_db if abs(y_db) < 117 else -117.0
    return 20 * np.log10(K) - 15 + (0.000025 * x_km**2 / K)


def smooth_earth_diffraction(d_1_km: float, d_2_km: float, f_mhz: float,
                             d_0_km: float, T_pol: int) -> float:
    """
    Compute the smooth earth diffraction loss.

    Parameters:
    -----------
    d_1_km, d_2_km : float
        Horizon distances of the low and high terminals, in km
    f_mhz : float
        Frequency, in MHz
    d_0_km : float
        Path distance, in km
    T_pol : int
        Polarization

    Returns:
    --------
    A_d_db : float
        Diffraction loss, in dB
    """
    K = surface_admittance(f_mhz, T_pol)

    # [Vogler 1964, Equ 2] with C_0 = 1 due to "4/3" Earth assumption
    scale = (B_0 - K) * f_mhz**Const.THIRD

    G_x_db = distance_function(scale * d_0_km)
    F_x1_db = height_function(scale * d_1_km, K)
    F_x2_db = height_function(scale * d_2_km, K)

    # [Vogler 1964, Equ 1]
    return float(G_x_db - F_x1_db - F_x2_db - 20.0)


def diffraction_line(terminal_1: Terminal, terminal_2: Terminal, f_mhz: float,
                     T_pol: int, d_ML_km: float) -> DiffractionLine:
    """
    Fit the diffraction line through two points beyond the horizon.

    Returns:
    --------
    DiffractionLine
        Slope, intercept, loss at d_ML and the distance of zero loss
    """
    step_km = (Const.a_e_km**2 / f_mhz)**Const.THIRD
    d_3_km = d_ML_km + 0.5 * step_km        # [Eqn 3-2]
    d_4_km = d_ML_km + 1.5 * step_km        # [Eqn 3-3]

    A_3_db = smooth_earth_diffraction(terminal_1.d_r_km, terminal_2.d_r_km,
                                      f_mhz, d_3_km, T_pol)
    A_4_db = smooth_earth_diffraction(terminal_1.d_r_km, terminal_2.d_r_km,
                                      f_mhz, d_4_km, T_pol)

    M_d = (A_4_db - A_3_db) / (d_4_km - d_3_km)     # [Eqn 3-4]
    A_d0 = A_4_db - M_d * d_4_km                    # [Eqn 3-5]

    return DiffractionLine(M_d=M_d,
                           A_d0=A_d0,
                           A_dML_db=M_d * d_ML_km + A_d0,   # [Eqn 3-6]
                           d_d_km=-(A_d0 / M_d))            # [Eqn 3-7]
