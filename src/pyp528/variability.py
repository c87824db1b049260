# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-arguments,too-many-locals
"""
Long-term (hour-to-hour, climate) variability, Annex 2, Section 14 of
Recommendation ITU-R P.528-5.
"""
from typing import Tuple

import numpy as np

from .constants import Const
from .utils import linear_interpolation, upper_bound

# Data Source for below curve constants: Tech Note 101, Vol 2
# Column 1: Table III.4, Row A* (Page III-50)       -> Y_0(90)
# Column 2: Table III.3, Row A* (Page III-49)       -> Y_0(10)
# Column 3: Table III.5, Row Continental Temperate  -> V(50)
_C_1 = np.array([2.93e-4, 5.25e-4, 1.59e-5])
_C_2 = np.array([3.78e-8, 1.57e-6, 1.56e-11])
_C_3 = np.array([1.02e-7, 4.70e-7, 2.77e-8])
_N_1 = np.array([2.00, 1.97, 2.32])
_N_2 = np.array([2.88, 2.31, 4.08])
_N_3 = np.array([3.15, 2.90, 3.25])
_F_INF = np.array([3.2, 5.4, 0.0])
_F_M = np.array([8.2, 10.0, 3.9])

# Source for values p < 10: [15], Table 10, Page 34, Climate 6
_P_LOW = np.array([1.0, 2.0, 5.0, 10.0])
_C_P_LOW = np.array([1.9507, 1.7166, 1.3265, 1.0000])
_C_Y_LOW = np.array([-5.0, -4.5, -3.7, 0.0])


def inverse_complementary_cumulative_distribution_function(q: float) -> float:
    """
    Inverse complementary cumulative distribution function approximation
    from Recommendation ITU-R P.1057, sourced from Formula 26.2.23 in
    Abramowitz & Stegun. abs(epsilon(p)) < 4.5e-4

    Parameters:
    -----------
    q : float
        Probability, 0.0 < q < 1.0

    Returns:
    --------
    Q_q : float
        Q(q)^-1
    """
    C_0, C_1, C_2 = 2.515516, 0.802853, 0.010328
    D_1, D_2, D_3 = 1.432788, 0.189269, 0.001308

    x = 1.0 - q if q > 0.5 else q

    T_x = np.sqrt(-2.0 * np.log(x))
    zeta_x = (((C_2 * T_x + C_1) * T_x + C_0) /
              (((D_3 * T_x + D_2) * T_x + D_1) * T_x + 1.0))

    Q_q = T_x - zeta_x
    return -Q_q if q > 0.5 else Q_q


def effective_distance(d_r1_km: float, d_r2_km: float, d_km: float,
                       f_mhz: float) -> float:
    """Effective distance d_e, in km [Eqns 14-1 to 14-4]"""
    d_qs_km = 65.0 * (100.0 / f_mhz)**Const.THIRD
    d_q_km = d_r1_km + d_r2_km + d_qs_km

    if d_km <= d_q_km:
        return (130.0 * d_km) / d_q_km
    return 130.0 + d_km - d_q_km


def climate_curves(d_e_km: float) -> np.ndarray:
    """[Y_0(90), Y_0(10), V(50)] at the effective distance, in dB"""
    f_2 = _F_INF + (_F_M - _F_INF) * np.exp(-_C_2 * d_e_km**_N_2)
    return (_C_1 * d_e_km**_N_1 - f_2) * np.exp(-_C_3 * d_e_km**_N_3) + f_2


def frequency_factors(f_mhz: float) -> Tuple[float, float]:
    """g(10) and g(90) [Eqns 14-5 and 14-6]"""
    if f_mhz > 1600.0:
        return 1.05, 1.05
    s = np.sin(5.22 * np.log10(f_mhz / 200.0))
    return 0.21 * s + 1.28, 0.18 * s + 1.23


def long_term_variability(d_r1_km: float, d_r2_km: float, d_km: float,
                          f_mhz: float, p: float, f_theta_h: float,
                          A_T: float) -> Tuple[float, float]:
    """
    Compute long-term variability.

    Parameters:
    -----------
    d_r1_km, d_r2_km : float
        Horizon distances of terminal 1 and 2, in km
    d_km : float
        Path distance, in km
    f_mhz : float
        Frequency, in MHz
    p : float
        Time percentage
    f_theta_h : float
        Elevation angle factor
    A_T : float
        Loss relative to free space (negative of the terrain attenuation), in dB

    Returns:
    --------
    Y_e_db : float
        Long-term variability, in dB
    A_Y : float
        Correction factor, in dB
    """
    d_e_km = effective_distance(d_r1_km, d_r2_km, d_km, f_mhz)
    g_10, g_90 = frequency_factors(f_mhz)
    Y_0_90, Y_0_10, V_50 = climate_curves(d_e_km)

    if p == 50:
        Y_p_db = V_50
    elif p > 50:
        c_p = (inverse_complementary_cumulative_distribution_function(p / 100.0) /
               inverse_complementary_cumulative_distribution_function(0.90))
        Y_p_db = c_p * (-Y_0_90 * g_90) + V_50
    else:
        if p >= 10:
            c_p = (inverse_complementary_cumulative_distribution_function(p / 100.0) /
                   inverse_complementary_cumulative_distribution_function(0.10))
        else:
            i = upper_bound(_P_LOW, p)
            c_p = linear_interpolation(_P_LOW[i - 1], _C_P_LOW[i - 1],
                                       _P_LOW[i], _C_P_LOW[i], p)
        Y_p_db = c_p * (Y_0_10 * g_10) + V_50

    Y_10_db = (Y_0_10 * g_10) + V_50        # [Eqn 14-20]
    Y_eI_db = f_theta_h * Y_p_db            # [Eqn 14-21]
    Y_eI_10_db = f_theta_h * Y_10_db        # [Eqn 14-22]

    # A_Y "is used to prevent available signal powers from exceeding levels
    # expected for free-space propagation by an unrealistic amount when the
    # variability about L_b(50) is large and L_b(50) is near its free-space
    # level" [ES-83-3, p3-4]
    A_Y = max((A_T + Y_eI_10_db) - 3.0, 0.0)   # [Eqns 14-23 and 14-24]
    Y_e_db = Y_eI_db - A_Y                      # [Eqn 14-25]

    # For percentages less than 10%, "prevent available signal powers from
    # exceeding levels expected from free-space levels by unrealistic
    # amounts" [Gierhart 1970]
    if p < 10:
        i = upper_bound(_P_LOW, p)
        c_Yi = linear_interpolation(_P_LOW[i - 1], _C_Y_LOW[i - 1],
                                    _P_LOW[i], _C_Y_LOW[i], p)
        Y_e_db = min(Y_e_db + A_T, -c_Yi) - A_T

    return float(Y_e_db), float(A_Y)
