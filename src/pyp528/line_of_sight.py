# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-arguments,too-many-locals
"""
Line-of-sight region of Recommendation ITU-R P.528-5: the two-ray model of
Annex 2, Section 8, blended into the diffraction line beyond d_0, with the
atmospheric absorption and variability of Sections 5 and 13.
"""
import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple

import numpy as np

from .atmosphere import ReferenceAtmosphere, slant_path_attenuation
from .constants import Const, PropagationMode
from .models import LineOfSightParams, Path, Result, Terminal
from .nakagami import combine_distributions, find_k_for_ypi_at_99_percent, nakagami_rice
from .ray_optics import ray_optics
from .reflection import reflection_coefficients
from .variability import long_term_variability

logger = logging.getLogger(__name__)


def _search_psi(terminal_1: Terminal, terminal_2: Terminal,
                quantity: Callable[[LineOfSightParams], float], target: float,
                increasing: bool, tolerance: float, min_step: float = 0.0,
                ) -> Tuple[float, LineOfSightParams]:
    """
    Binary search on the reflection angle, starting half-way between 0 and
    pi/2, until quantity(ray_optics(psi)) is within tolerance of target.

    increasing tells whether the quantity grows with psi.
    """
    psi = np.pi / 2
    delta_psi = -np.pi / 4
    params = LineOfSightParams()

    for _ in range(Const.MAX_BISECTION_ITERATIONS):
        psi = psi + delta_psi
        params = ray_optics(terminal_1, terminal_2, psi)
        value = quantity(params)

        if (value > target) == increasing:
            delta_psi = -abs(delta_psi) / 2
        else:
            delta_psi = abs(delta_psi) / 2

        if abs(value - target) <= tolerance or abs(delta_psi) <= min_step:
            return psi, params

    logger.debug("Reflection angle search for %.6g did not converge, psi = %.9f rad",
                 target, psi)
    return psi, params


def find_psi_at_distance(d_km: float, terminal_1: Terminal,
                         terminal_2: Terminal) -> float:
    """
    Find the reflection angle psi for which the ray optics give the path
    distance d_km, to within 1 meter.

    Parameters:
    -----------
    d_km : float
        Desired distance, in km
    terminal_1 : Terminal
        Low terminal
    terminal_2 : Terminal
        High terminal

    Returns:
    --------
    psi : float
        Reflection angle, in rad
    """
    if d_km == 0:
        return np.pi / 2

    # The path distance shrinks as psi grows
    psi, _ = _search_psi(terminal_1, terminal_2, lambda params: params.d_km,
                         d_km, increasing=False, tolerance=1e-3, min_step=1e-12)
    return psi


def find_psi_at_delta_r(delta_r_km: float, terminal_1: Terminal,
                        terminal_2: Terminal, terminate: float) -> float:
    """Find the reflection angle psi giving the ray path difference delta_r_km"""
    psi, _ = _search_psi(terminal_1, terminal_2, lambda params: params.delta_r_km,
                         delta_r_km, increasing=True, tolerance=terminate)
    return psi


def find_distance_at_delta_r(delta_r_km: float, terminal_1: Terminal,
                             terminal_2: Terminal, terminate: float) -> float:
    """Find the path distance at which the ray path difference is delta_r_km"""
    _, params = _search_psi(terminal_1, terminal_2, lambda params: params.delta_r_km,
                            delta_r_km, increasing=True, tolerance=terminate)
    return params.d_km


def get_path_loss(psi_rad: float, params: LineOfSightParams, path: Path,
                  f_mhz: float, psi_limit: float, A_dML_db: float,
                  A_d_0_db: float, T_pol: int, use_reflection: bool = True
                  ) -> Tuple[LineOfSightParams, float]:
    """
    Compute the line of sight loss as described in Annex 2, Section 8
    of Recommendation ITU-R P.528-5.

    Parameters:
    -----------
    psi_rad : float
        Reflection angle, in rad
    params : LineOfSightParams
        Ray optics at psi_rad
    path : Path
        Path parameters, d_0_km must already be set
    f_mhz : float
        Frequency, in MHz
    psi_limit : float
        Angular limit separating free space and the two-ray model, in rad
    A_dML_db : float
        Diffraction loss at d_ML, in dB
    A_d_0_db : float
        Loss at d_0, in dB
    T_pol : int
        Polarization
    use_reflection : bool
        False if the reflected ray is not accounted for

    Returns:
    --------
    params : LineOfSightParams
        Copy of params with A_LOS_db set
    R_Tg : float
        Reflection parameter
    """
    R_g, phi_g = reflection_coefficients(psi_rad, f_mhz, T_pol)

    if np.tan(psi_rad) >= 0.1:
        D_v = 1.0
    else:
        r_1 = params.D_km[0] / np.cos(psi_rad)       # [Eqn 8-3]
        r_2 = params.D_km[1] / np.cos(psi_rad)       # [Eqn 8-3]
        R_r = (r_1 * r_2) / params.r_12_km if params.r_12_km > 0 else 0.0   # [Eqn 8-4]

        term_1 = (2 * R_r * (1 + np.sin(psi_rad)**2)) / (params.a_a_km * np.sin(psi_rad))
        term_2 = (2 * R_r / params.a_a_km)**2
        D_v = (1.0 + term_1 + term_2)**(-0.5)        # [Eqn 8-5]

    # Ray-length factor, [Eqn 8-6]. r_12 vanishes for a vertical path
    F_r = min(params.r_0_km / params.r_12_km, 1) if params.r_12_km > 0 else 1.0

    R_Tg = R_g * D_v * F_r                           # [Eqn 8-7]

    A_LOS_db = 0.0
    if params.d_km > path.d_0_km:
        # [Eqn 8-1]
        A_LOS_db = (((params.d_km - path.d_0_km) * (A_dML_db - A_d_0_db) /
                     (path.d_ML_km - path.d_0_km)) + A_d_0_db)
    elif use_reflection and psi_rad <= psi_limit:
        # Beyond psi_limit the phase lag is ignored, Step 8-2
        lambda_km = Const.C_GM_S / f_mhz             # [Eqn 8-2]

        # Total phase lag of the ground reflected ray relative to the direct ray
        phi_Tg = (2 * np.pi * params.delta_r_km / lambda_km) + phi_g    # [Eqn 8-8]
        cplx = R_Tg * np.exp(-1j * phi_Tg)                              # [Eqn 8-9]
        W_RL = min(abs(1.0 + cplx), 1.0)                                # [Eqn 8-10]
        A_LOS_db = 10.0 * np.log10(W_RL**2)                             # [Eqns 8-11, 8-12]

    return replace(params, A_LOS_db=float(A_LOS_db)), R_Tg


def initial_d_0(path: Path, d_r1_km: float, d_y6_km: float) -> float:
    """
    d_0 heuristic [Eqns 8-2 and 8-3].

    In IF-73 the values for d_0 (d_d in IF-77) were found to be too small
    when both antennas are low.
    """
    if d_r1_km >= path.d_d_km or path.d_d_km >= path.d_ML_km:
        if d_r1_km > d_y6_km or d_y6_km > path.d_ML_km:
            return d_r1_km
        return d_y6_km
    if path.d_d_km < d_y6_km < path.d_ML_km:
        return d_y6_km
    return path.d_d_km


def elevation_angle_factor(theta_h1_rad: float) -> float:
    """f_theta_h [Eqn 13-1]"""
    if theta_h1_rad <= 0.0:
        return 1.0
    if theta_h1_rad >= 1.0:
        return 0.0
    return max(0.5 - (1 / np.pi) * np.arctan(20.0 * np.log10(32.0 * theta_h1_rad)), 0)


def line_of_sight(path: Path, terminal_1: Terminal, terminal_2: Terminal,
                  f_mhz: float, A_dML_db: float, p: float, d_km: float,
                  T_pol: int, use_reflection: bool = True,
                  atmosphere: Optional[ReferenceAtmosphere] = None
                  ) -> Tuple[Result, LineOfSightParams, float]:
    """
    Compute the total loss in the line-of-sight region.

    Parameters:
    -----------
    path : Path
        Path parameters. d_0_km is set by this function
    terminal_1 : Terminal
        Low terminal
    terminal_2 : Terminal
        High terminal
    f_mhz : float
        Frequency, in MHz
    A_dML_db : float
        Diffraction loss at d_ML, relative to free space, in dB
    p : float
        Time percentage
    d_km : float
        Path length, in km
    T_pol : int
        Polarization
    use_reflection : bool
        False - do not account for the reflected ray
    atmosphere : ReferenceAtmosphere, optional
        Atmospheric profile for the absorption calculation

    Returns:
    --------
    result : Result
        Loss at d_km
    los_params : LineOfSightParams
        Ray optics and LOS loss at d_km
    K_LOS : float
        K-value of the Nakagami-Rice distribution, in dB
    """
    lambda_km = Const.C_GM_S / f_mhz     # [Eqn 6-1]
    terminate = lambda_km / 1e6

    # Where the model switches from free space to 2-ray,
    # lambda / 2 is the start of the lobe closest to d_ML
    psi_limit = find_psi_at_delta_r(lambda_km / 2, terminal_1, terminal_2, terminate)

    # "[d_y6_km] is the largest distance at which a free-space value is obtained
    # in a two-ray model of reflection from a smooth earth with a reflection
    # coefficient of -1" [ES-83-3, page 44]
    d_y6_km = find_distance_at_delta_r(lambda_km / 6, terminal_1, terminal_2, terminate)

    path.d_0_km = initial_d_0(path, terminal_1.d_r_km, d_y6_km)

    # Walk d_0 forward 1 meter at a time without leaving the LOS region
    d_temp_km = path.d_0_km
    while True:
        psi = find_psi_at_distance(d_temp_km, terminal_1, terminal_2)
        los_params = ray_optics(terminal_1, terminal_2, psi)

        if (los_params.d_km >= path.d_0_km or
                (d_temp_km + Const.D_0_STEP_KM) >= path.d_ML_km):
            path.d_0_km = los_params.d_km
            break

        d_temp_km += Const.D_0_STEP_KM

    # Loss at d_0
    psi_d0 = find_psi_at_distance(path.d_0_km, terminal_1, terminal_2)
    los_params, R_Tg = get_path_loss(psi_d0, ray_optics(terminal_1, terminal_2, psi_d0),
                                     path, f_mhz, psi_limit, A_dML_db, 0, T_pol,
                                     use_reflection)
    A_d_0_db = los_params.A_LOS_db

    # Loss at the requested distance
    psi = find_psi_at_distance(d_km, terminal_1, terminal_2)
    los_params, R_Tg = get_path_loss(psi, ray_optics(terminal_1, terminal_2, psi),
                                     path, f_mhz, psi_limit, A_dML_db, A_d_0_db,
                                     T_pol, use_reflection)

    slant = slant_path_attenuation(f_mhz / 1000, terminal_1.h_r_km, terminal_2.h_r_km,
                                   np.pi / 2 - los_params.theta_h1_rad, atmosphere)

    A_fs_db = 20.0 * np.log10(los_params.r_0_km) + 20.0 * np.log10(f_mhz) + 32.45  # [Eqn 6-4]

    ###########################
    # Variability
    #
    f_theta_h = elevation_angle_factor(los_params.theta_h1_rad)

    Y_e_db, A_Y = long_term_variability(terminal_1.d_r_km, terminal_2.d_r_km, d_km,
                                        f_mhz, p, f_theta_h, los_params.A_LOS_db)
    Y_e_50_db, A_Y = long_term_variability(terminal_1.d_r_km, terminal_2.d_r_km, d_km,
                                           f_mhz, 50, f_theta_h, los_params.A_LOS_db)

    # [Eqn 13-2]
    if A_Y <= 0.0:
        F_AY = 1.0
    elif A_Y >= 9.0:
        F_AY = 0.1
    else:
        F_AY = (1.1 + (0.9 * np.cos((A_Y / 9.0) * np.pi))) / 2.0

    # [Eqn 13-3]
    if los_params.delta_r_km >= (lambda_km / 2.0):
        F_delta_r = 1.0
    elif los_params.delta_r_km <= lambda_km / 6.0:
        F_delta_r = 0.1
    else:
        F_delta_r = 0.5 * (1.1 - (0.9 * np.cos(((3.0 * np.pi) / lambda_km) *
                                               (los_params.delta_r_km - (lambda_km / 6.0)))))

    R_s = R_Tg * F_delta_r * F_AY                                   # [Eqn 13-4]

    Y_pi_99_db = 10.0 * np.log10(f_mhz * slant.a_km**3) - 84.26    # [Eqn 13-5]
    K_t = find_k_for_ypi_at_99_percent(Y_pi_99_db)

    W_a = 10.0**(K_t / 10.0)      # [Eqn 13-6]
    W_R = R_s**2 + 0.01**2        # [Eqn 13-7]
    W = W_R + W_a                 # [Eqn 13-8]

    # [Eqn 13-9]
    K_LOS = max(10.0 * np.log10(W), -40.0) if W > 0.0 else -40.0

    Y_pi_50_db = 0.0  # zero mean
    Y_pi_db = nakagami_rice(K_LOS, p)

    Y_total_db = -combine_distributions(Y_e_50_db, Y_e_db, Y_pi_50_db, Y_pi_db, p)

    result = Result(propagation_mode=PropagationMode.LOS,
                    d_km=los_params.d_km,
                    A_db=float(A_fs_db + slant.A_gas_db - los_params.A_LOS_db + Y_total_db),
                    A_fs_db=float(A_fs_db),
                    A_a_db=slant.A_gas_db,
                    theta_h1_rad=los_params.theta_h1_rad)

    return result, los_params, float(K_LOS)
