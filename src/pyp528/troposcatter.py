# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-locals
"""
Troposcatter loss, Annex 2, Section 11 of Recommendation ITU-R P.528-5.
"""
import numpy as np

from .constants import Const
from .models import Terminal, TropoParams

SQRT2 = np.sqrt(2)


def _exp_limited(x: float) -> float:
    """exp(x) with the exponent capped at 35"""
    return np.exp(min(35.0, x))


def scattering_geometry(d_s_km: float):
    """
    Geometry of the common volume for the scattering distance d_s_km.

    Returns:
    --------
    d_z_km, h_v_km, theta_A, theta_s : float
    """
    d_z_km = 0.5 * d_s_km                                   # [Eqn 11-6]

    A_m = 1 / Const.a_0_km                                  # [Eqn 11-7]
    dN = A_m - (1.0 / Const.a_e_km)                         # [Eqn 11-8]
    gamma_e_km = (Const.N_s * 1e-6) / dN                    # [Eqn 11-9]

    z_a_km = 1.0 / (2 * Const.a_e_km) * (d_z_km / 2)**2     # [Eqn 11-10]
    z_b_km = 1.0 / (2 * Const.a_e_km) * d_z_km**2           # [Eqn 11-11]

    Q_o = A_m - dN                                          # [Eqn 11-12]
    Q_a = A_m - dN / _exp_limited(z_a_km / gamma_e_km)      # [Eqn 11-13]
    Q_b = A_m - dN / _exp_limited(z_b_km / gamma_e_km)      # [Eqn 11-13]

    Z_a_km = (7.0 * Q_o + 6.0 * Q_a - Q_b) * (d_z_km**2 / 96.0)     # [Eqn 11-14]
    Z_b_km = (Q_o + 2.0 * Q_a) * (d_z_km**2 / 6.0)                  # [Eqn 11-15]

    Q_A = A_m - dN / _exp_limited(Z_a_km / gamma_e_km)      # [Eqn 11-16]
    Q_B = A_m - dN / _exp_limited(Z_b_km / gamma_e_km)      # [Eqn 11-16]

    h_v_km = (Q_o + 2.0 * Q_A) * (d_z_km**2 / 6.0)          # [Eqn 11-17]
    theta_A = (Q_o + 4.0 * Q_A + Q_B) * d_z_km / 6.0        # [Eqn 11-18]

    return d_z_km, h_v_km, theta_A, 2 * theta_A             # [Eqn 11-19]


def scattering_efficiency(h_v_km: float):
    """
    Scattering efficiency term S_e, in dB, and the gamma factor.
    """
    epsilon_1 = 5.67e-6 * Const.N_s**2 - 0.00232 * Const.N_s + 0.031    # [Eqn 11-20]
    epsilon_2 = 0.0002 * Const.N_s**2 - 0.06 * Const.N_s + 6.6          # [Eqn 11-21]

    gamma = 0.1424 * (1.0 + epsilon_1 / _exp_limited((h_v_km / 4.0)**6))  # [Eqn 11-22]

    # [Eqn 11-23]
    S_e_db = (83.1 - epsilon_2 / (1.0 + 0.07716 * h_v_km**2) +
              20 * np.log10((0.1424 / gamma)**2 * np.exp(gamma * h_v_km)))

    return S_e_db, gamma


def _horizon_ray_length(terminal: Terminal) -> float:
    """sqrt(X_A), [Eqn 11-24]"""
    return np.sqrt(terminal.h_e_km**2 +
                   4.0 * (Const.a_e_km + terminal.h_e_km) * Const.a_e_km *
                   np.sin(terminal.d_r_km / (Const.a_e_km * 2))**2)


def troposcatter(terminal_1: Terminal, terminal_2: Terminal, d_km: float,
                 f_mhz: float) -> TropoParams:
    """
    Compute the troposcatter loss.

    Parameters:
    -----------
    terminal_1 : Terminal
        Low terminal
    terminal_2 : Terminal
        High terminal
    d_km : float
        Path distance, in km
    f_mhz : float
        Frequency, in MHz

    Returns:
    --------
    TropoParams
        All zeros when the terminals are within each other's horizon
    """
    d_s_km = d_km - terminal_1.d_r_km - terminal_2.d_r_km     # [Eqn 11-2]

    if d_s_km <= 0.0:
        return TropoParams()

    d_z_km, h_v_km, theta_A, theta_s = scattering_geometry(d_s_km)
    S_e_db, gamma = scattering_efficiency(h_v_km)

    #####################################
    # Scattering volume term
    #
    ell_1_km = _horizon_ray_length(terminal_1) + d_z_km     # [Eqn 11-25]
    ell_2_km = _horizon_ray_length(terminal_2) + d_z_km     # [Eqn 11-25]
    ell_km = ell_1_km + ell_2_km                            # [Eqn 11-26]

    s = (ell_1_km - ell_2_km) / ell_km                      # [Eqn 11-27]
    eta = gamma * theta_s * ell_km / 2                      # [Eqn 11-28]

    kappa = f_mhz / 0.0477                                  # [Eqn 11-29]

    rho_1_km = 2.0 * kappa * theta_s * terminal_1.h_e_km    # [Eqn 11-30]
    rho_2_km = 2.0 * kappa * theta_s * terminal_2.h_e_km    # [Eqn 11-30]

    A = (1 - s**2)**2                                       # [Eqn 11-36]

    X_v1 = (1 + s)**2 * eta                                 # [Eqn 11-32]
    X_v2 = (1 - s)**2 * eta                                 # [Eqn 11-33]

    q_1 = X_v1**2 + rho_1_km**2                             # [Eqn 11-34]
    q_2 = X_v2**2 + rho_2_km**2                             # [Eqn 11-35]

    # [Eqn 11-37]
    B_s = (6 + 8 * s**2 +
           8 * (1.0 - s) * X_v1**2 * rho_1_km**2 / q_1**2 +
           8 * (1.0 + s) * X_v2**2 * rho_2_km**2 / q_2**2 +
           2 * (1.0 - s**2) * (1 + 2 * X_v1**2 / q_1) * (1 + 2 * X_v2**2 / q_2))

    # [Eqn 11-38]
    C_s = (12 *
           ((rho_1_km + SQRT2) / rho_1_km)**2 *
           ((rho_2_km + SQRT2) / rho_2_km)**2 *
           (rho_1_km + rho_2_km) / (rho_1_km + rho_2_km + 2 * SQRT2))

    S_v_db = 10 * np.log10((A * eta**2 + B_s * eta) * q_1 * q_2 /
                           (rho_1_km**2 * rho_2_km**2) + C_s)

    A_s_db = S_e_db + S_v_db + 10.0 * np.log10(kappa * theta_s**3 / ell_km)

    return TropoParams(d_s_km=float(d_s_km),
                       d_z_km=float(d_z_km),
                       h_v_km=float(h_v_km),
                       theta_s=float(theta_s),
                       theta_A=float(theta_A),
                       A_s_db=float(A_s_db))
