# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-arguments,too-many-locals
"""
Basic transmission loss according to Recommendation ITU-R P.528-5,
"Propagation curves for aeronautical mobile and radionavigation services
using the VHF, UHF and SHF bands".

bt_loss selects the propagation mode (line of sight, diffraction or
troposcatter) for a single path, loss_curve and loss_table sweep the
path distance.
"""
import logging
from dataclasses import replace
from typing import Optional

import numpy as np
import pandas as pd

from .atmosphere import ReferenceAtmosphere, slant_path_attenuation
from .constants import Const, Polarization, PropagationMode, SearchCase, WarningFlag
from .diffraction import diffraction_line
from .errors import (DistanceError, FrequencyError, HeightError, PercentError,
                     PolarizationError, TerminalGeometryError)
from .geometry import terminal_geometry
from .line_of_sight import line_of_sight
from .models import ExtendedResult, Path, Result
from .nakagami import combine_distributions, nakagami_rice
from .transhorizon import transhorizon_search
from .troposcatter import troposcatter
from .variability import long_term_variability

logger = logging.getLogger(__name__)

# Terminal heights (h_1, h_2), in meters, of the standard P.528 tables
TABLE_HEIGHTS = (
    (1.5, 1000), (15, 1000), (30, 1000), (60, 1000), (1000, 1000),
    (1.5, 10000), (15, 10000), (30, 10000), (60, 10000), (1000, 10000), (10000, 10000),
    (1.5, 20000), (15, 20000), (30, 20000), (60, 20000), (1000, 20000), (10000, 20000),
    (20000, 20000),
)


def validate_inputs(d_km: float, h_1_meter: float, h_2_meter: float,
                    f_mhz: float, T_pol: int, p: float) -> WarningFlag:
    """
    Validate the model input values.

    Raises:
    -------
    ValidationError
        The first failing check, in the order distance, heights, terminal
        geometry, frequency, polarization, percentage

    Returns:
    --------
    WarningFlag
        HEIGHT_LIMIT_H_1 / HEIGHT_LIMIT_H_2 for terminals above 20 km
    """
    warnings = WarningFlag.NONE

    if d_km < 0:
        raise DistanceError(f"Path distance must be non-negative, got {d_km} km", d_km)

    for terminal, h_meter in ((1, h_1_meter), (2, h_2_meter)):
        if h_meter < Const.H_MIN_METER or h_meter > Const.H_MAX_METER:
            raise HeightError(f"Height of terminal {terminal} must be within "
                              f"[{Const.H_MIN_METER}, {Const.H_MAX_METER}] m, got {h_meter} m",
                              h_meter, terminal)

    if h_1_meter > Const.H_CONFIDENCE_METER:
        warnings |= WarningFlag.HEIGHT_LIMIT_H_1
    if h_2_meter > Const.H_CONFIDENCE_METER:
        warnings |= WarningFlag.HEIGHT_LIMIT_H_2

    if h_1_meter > h_2_meter:
        raise TerminalGeometryError(f"h_1 ({h_1_meter} m) must not exceed h_2 ({h_2_meter} m)",
                                    h_1_meter)

    if f_mhz < Const.F_MIN_MHZ:
        raise FrequencyError(f"Frequency must be at least {Const.F_MIN_MHZ} MHz, got {f_mhz}",
                             f_mhz, too_low=True)
    if f_mhz > Const.F_MAX_MHZ:
        raise FrequencyError(f"Frequency must be at most {Const.F_MAX_MHZ} MHz, got {f_mhz}",
                             f_mhz, too_low=False)

    if T_pol not in (Polarization.HORIZONTAL, Polarization.VERTICAL):
        raise PolarizationError(f"Unknown polarization {T_pol}", T_pol)

    if p < Const.P_MIN:
        raise PercentError(f"Time percentage must be at least {Const.P_MIN}, got {p}",
                           p, too_low=True)
    if p > Const.P_MAX:
        raise PercentError(f"Time percentage must be at most {Const.P_MAX}, got {p}",
                           p, too_low=False)

    return warnings


def bt_loss_ex(d_km: float, h_1_meter: float, h_2_meter: float, f_mhz: float,
               T_pol: int, p: float, use_reflection: bool = True,
               atmosphere: Optional[ReferenceAtmosphere] = None) -> ExtendedResult:
    """
    Compute basic transmission loss and keep every intermediate structure.

    Takes the same arguments as bt_loss.

    Returns:
    --------
    ExtendedResult
        Result plus terminal geometries, path, diffraction line, line of
        sight and troposcatter parameters and K_LOS
    """
    warnings = validate_inputs(d_km, h_1_meter, h_2_meter, f_mhz, T_pol, p)

    if h_1_meter == h_2_meter and d_km == 0:
        # Co-located terminals
        return ExtendedResult(result=Result(warnings=warnings))

    # Step 1
    terminal_1 = terminal_geometry(f_mhz, h_1_meter / 1000.0, atmosphere)
    terminal_2 = terminal_geometry(f_mhz, h_2_meter / 1000.0, atmosphere)

    # Step 2
    path = Path(d_ML_km=terminal_1.d_r_km + terminal_2.d_r_km)    # [Eqn 3-1]

    # Step 3
    line = diffraction_line(terminal_1, terminal_2, f_mhz, T_pol, path.d_ML_km)
    path.d_d_km = line.d_d_km

    # Step 4. If the path is in the Line-of-Sight range, call LOS and then exit
    if path.d_ML_km - d_km > Const.LOS_MARGIN_KM:
        logger.debug("d = %.3f km is within d_ML = %.3f km, line of sight", d_km, path.d_ML_km)
        result, los_params, K_LOS = line_of_sight(path, terminal_1, terminal_2, f_mhz,
                                                  -line.A_dML_db, p, d_km, T_pol,
                                                  use_reflection, atmosphere)
        return ExtendedResult(result=replace(result, warnings=warnings),
                              terminal_1=terminal_1,
                              terminal_2=terminal_2,
                              path=path,
                              diffraction_line=line,
                              los_params=los_params,
                              K_LOS=K_LOS)

    # Step 5. K_LOS just inside the horizon
    _, los_params, K_LOS = line_of_sight(path, terminal_1, terminal_2, f_mhz,
                                         -line.A_dML_db, p, path.d_ML_km - 1, T_pol,
                                         use_reflection, atmosphere)

    # Step 6. Search past horizon to find crossover point
    search = transhorizon_search(path, terminal_1, terminal_2, f_mhz, line)
    warnings |= search.warnings
    line = search.line

    # Step 7. Terrain attenuation
    A_d_db = line.loss(d_km)                                    # [Eqn 3-14]
    tropo = troposcatter(terminal_1, terminal_2, d_km, f_mhz)

    if d_km < search.d_crx_km or search.case == SearchCase.DIFFRACTION:
        # Always in diffraction if less than d_crx
        A_T_db = A_d_db
        mode = PropagationMode.DIFFRACTION
    elif search.case == SearchCase.CASE_1 and tropo.A_s_db > A_d_db:
        A_T_db = A_d_db
        mode = PropagationMode.DIFFRACTION
    else:
        A_T_db = tropo.A_s_db
        mode = PropagationMode.SCATTERING

    logger.debug("d = %.3f km beyond d_ML = %.3f km, %s (crossover %.1f km, %s)",
                 d_km, path.d_ML_km, mode.name, search.d_crx_km, search.case.name)

    # Step 8. Variability, f_theta_h is unity for transhorizon paths
    f_theta_h = 1
    Y_e_db, _ = long_term_variability(terminal_1.d_r_km, terminal_2.d_r_km, d_km,
                                      f_mhz, p, f_theta_h, -A_T_db)
    Y_e_50_db, _ = long_term_variability(terminal_1.d_r_km, terminal_2.d_r_km, d_km,
                                         f_mhz, 50, f_theta_h, -A_T_db)

    # K ramps from K_LOS to 20 dB as theta_s grows to 1.5 deg
    if tropo.theta_s >= Const.THETA_S_KT_RAD:
        K_t_db = 20
    elif tropo.theta_s <= 0.0:
        K_t_db = K_LOS
    else:
        K_t_db = (tropo.theta_s * (20.0 - K_LOS) / Const.THETA_S_KT_RAD) + K_LOS

    Y_pi_50_db = 0.0  # zero mean
    Y_pi_db = nakagami_rice(K_t_db, p)

    Y_total_db = combine_distributions(Y_e_50_db, Y_e_db, Y_pi_50_db, Y_pi_db, p)

    # Atmospheric absorption through the common volume
    result_v = slant_path_attenuation(f_mhz / 1000.0, 0, tropo.h_v_km, np.pi / 2, atmosphere)
    A_a_db = terminal_1.A_a_db + terminal_2.A_a_db + 2 * result_v.A_gas_db     # [Eqn 3-17]

    r_fs_km = terminal_1.a_km + terminal_2.a_km + 2 * result_v.a_km           # [Eqn 3-18]
    A_fs_db = 20.0 * np.log10(f_mhz) + 20.0 * np.log10(r_fs_km) + 32.45       # [Eqn 3-19]

    result = Result(propagation_mode=mode,
                    warnings=warnings,
                    d_km=d_km,
                    A_db=float(A_fs_db + A_a_db + A_T_db - Y_total_db),       # [Eqn 3-20]
                    A_fs_db=float(A_fs_db),
                    A_a_db=float(A_a_db),
                    theta_h1_rad=terminal_1.theta_rad)

    return ExtendedResult(result=result,
                          terminal_1=terminal_1,
                          terminal_2=terminal_2,
                          path=path,
                          diffraction_line=line,
                          los_params=los_params,
                          tropo=tropo,
                          K_LOS=K_LOS)


def bt_loss(d_km: float, h_1_meter: float, h_2_meter: float, f_mhz: float,
            T_pol: int, p: float, use_reflection: bool = True,
            atmosphere: Optional[ReferenceAtmosphere] = None) -> Result:
    """
    Compute basic transmission loss according to ITU-R P.528-5

    Parameters:
    -----------
    d_km : float
        Path distance, in km
    h_1_meter : float
        Height of the low terminal, in meters
    h_2_meter : float
        Height of the high terminal, in meters
    f_mhz : float
        Frequency, in MHz
    T_pol : int
        Polarization (0: horizontal, 1: vertical)
    p : float
        Time percentage
    use_reflection : Optional bool (default: True)
        Whether to include the reflected ray
    atmosphere : Optional ReferenceAtmosphere
        Atmospheric profile, the mean annual global reference atmosphere
        of ITU-R P.835 by default

    Returns:
    --------
    Result
        Propagation mode, warnings and losses

    Raises:
    -------
    ValidationError
        When an input is outside the domain of the model
    """
    return bt_loss_ex(d_km, h_1_meter, h_2_meter, f_mhz, T_pol, p,
                      use_reflection, atmosphere).result


def compute_loss(d_km: float, h_1_meter: float, h_2_meter: float, f_mhz: float,
                 polarization: Polarization, p: float, **kwargs) -> Result:
    """bt_loss taking a Polarization"""
    return bt_loss(d_km, h_1_meter, h_2_meter, f_mhz, polarization, p, **kwargs)


def loss_curve(h_1_meter: float, h_2_meter: float, f_mhz: float, T_pol: int,
               p: float, d_max_km: float = 1800, step_km: float = 1,
               **kwargs) -> pd.DataFrame:
    """
    Loss versus distance for one pair of terminals, from 0 to d_max_km.

    Returns:
    --------
    pd.DataFrame
        Columns d_km, A_db, A_fs_db, A_a_db, propagation_mode, warnings
    """
    distances = np.arange(0, d_max_km + step_km / 2, step_km)

    rows = []
    for d_km in distances:
        result = bt_loss(float(d_km), h_1_meter, h_2_meter, f_mhz, T_pol, p, **kwargs)
        rows.append((float(d_km), result.A_db, result.A_fs_db, result.A_a_db,
                     result.propagation_mode.name, int(result.warnings)))

    return pd.DataFrame(rows, columns=["d_km", "A_db", "A_fs_db", "A_a_db",
                                       "propagation_mode", "warnings"])


def loss_table(f_mhz: float, T_pol: int, p: float, d_max_km: int = 1800,
               heights=TABLE_HEIGHTS, **kwargs) -> pd.DataFrame:
    """
    Loss versus distance for the standard terminal heights of the P.528
    tables.

    Returns:
    --------
    pd.DataFrame
        Indexed by integer distance d_km. Column FSL holds the free space
        loss of the first height pair, the loss columns are keyed by
        (h_2, h_1) in meters.
    """
    distances = np.arange(0, int(d_max_km) + 1)

    data = {"FSL": []}
    for h_1_meter, h_2_meter in heights:
        data[(h_2_meter, h_1_meter)] = []

    for d_km in distances:
        for i, (h_1_meter, h_2_meter) in enumerate(heights):
            result = bt_loss(float(d_km), h_1_meter, h_2_meter, f_mhz, T_pol, p, **kwargs)
            if i == 0:
                data["FSL"].append(result.A_fs_db)
            data[(h_2_meter, h_1_meter)].append(result.A_db)

    table = pd.DataFrame(data, index=pd.Index(distances, name="d_km"))
    return table
