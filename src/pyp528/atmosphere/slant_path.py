# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-many-locals
"""
Slant path gaseous attenuation by ray tracing through exponentially spaced
atmospheric layers, Recommendation ITU-R P.676, Annex 1, Section 2.2.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..constants import Const
from .gaseous import refractive_index, specific_attenuation
from .reference import GLOBAL_MEAN_ATMOSPHERE, ReferenceAtmosphere

logger = logging.getLogger(__name__)

_E_1 = np.exp(1. / 100.) - 1


@dataclass(frozen=True)
class SlantPathResult:
    angle_rad: float = 0.0        # Incidence angle at the upper end of the ray, in rad
    A_gas_db: float = 0.0         # Gaseous attenuation, in dB
    a_km: float = 0.0             # Ray length, in km
    bending_rad: float = 0.0      # Ray bending, in rad
    delta_L_km: float = 0.0       # Excess atmospheric path length, in km


def layer_properties(f_ghz: float, h_km: float, atmosphere: ReferenceAtmosphere):
    """Refractive index and specific attenuation, in dB/km, at height h_km"""
    T_kelvin = atmosphere.temperature(h_km)
    p_hPa = atmosphere.dry_pressure(h_km)
    e_hPa = atmosphere.wet_pressure(h_km)

    return (refractive_index(p_hPa, T_kelvin, e_hPa),
            specific_attenuation(f_ghz, T_kelvin, e_hPa, p_hPa))


def ray_trace(f_ghz: float, h_1_km: float, h_2_km: float, beta_1_rad: float,
              atmosphere: Optional[ReferenceAtmosphere] = None) -> SlantPathResult:
    """
    Trace the ray from height h_1 up to height h_2.

    Parameters:
    -----------
    f_ghz : float
        Frequency, in GHz
    h_1_km, h_2_km : float
        Heights of the lower and upper ends of the ray, in km
    beta_1_rad : float
        Zenith angle of the ray at h_1, in rad
    atmosphere : ReferenceAtmosphere, optional
        Atmospheric profile, the mean annual global atmosphere by default

    Returns:
    --------
    SlantPathResult
    """
    if atmosphere is None:
        atmosphere = GLOBAL_MEAN_ATMOSPHERE

    # Layer indices [Eqns 16a-c]
    i_lower = int(np.floor(100 * np.log(1e4 * h_1_km * _E_1 + 1) + 1))
    i_upper = int(np.ceil(100 * np.log(1e4 * h_2_km * _E_1 + 1) + 1))
    if i_upper <= i_lower:
        return SlantPathResult(angle_rad=beta_1_rad)

    m = (((np.exp(2. / 100.) - np.exp(1. / 100.)) /
          (np.exp(i_upper / 100.) - np.exp(i_lower / 100.))) * (h_2_km - h_1_km))

    # Bottom height and thickness of each layer, plus the one above the last [Eqn 14]
    i = np.arange(i_lower, i_upper + 1)
    delta_km = m * np.exp((i - 1) / 100.)
    h_km = h_1_km + m * (np.exp((i - 1) / 100.) - np.exp((i_lower - 1) / 100.)) / _E_1
    r_km = Const.a_0_km + h_km

    n, gamma = np.array([layer_properties(f_ghz, h + dh / 2, atmosphere)
                         for h, dh in zip(h_km, delta_km)]).T

    # Snell's law for spherically stratified media
    invariant = n[0] * r_km[0] * np.sin(beta_1_rad)
    beta_rad = np.arcsin(np.minimum(1, invariant / (n[:-1] * r_km[:-1])))    # [Eqn 19b]
    alpha_rad = np.arcsin(np.minimum(1, invariant / (n[:-1] * r_km[1:])))    # [Eqn 18a]

    # Path length through each layer [Eqn 17]
    r = r_km[:-1]
    dh = delta_km[:-1]
    a_i_km = -r * np.cos(beta_rad) + np.sqrt(r**2 * np.cos(beta_rad)**2 + 2 * r * dh + dh**2)

    beta_next_rad = np.arcsin(np.minimum(1, n[:-1] / n[1:] * np.sin(alpha_rad)))

    # The bending summation only goes to i_max - 1 [Eqn 22a]
    bending_rad = np.sum((beta_next_rad - alpha_rad)[:-1])

    return SlantPathResult(angle_rad=float(alpha_rad[-1]),
                           A_gas_db=float(np.sum(a_i_km * gamma[:-1])),
                           a_km=float(np.sum(a_i_km)),
                           bending_rad=float(bending_rad),
                           delta_L_km=float(np.sum(a_i_km * (n[:-1] - 1))))   # [Eqn 23]


def slant_path_attenuation(f_ghz: float, h_1_km: float, h_2_km: float,
                           beta_1_rad: float,
                           atmosphere: Optional[ReferenceAtmosphere] = None
                           ) -> SlantPathResult:
    """
    Slant path attenuation due to atmospheric gases.

    A zenith angle above pi/2 (negative elevation) first locates the height
    h_G at which the ray grazes, then traces up from h_G to both terminals.

    Parameters:
    -----------
    f_ghz : float
        Frequency, in GHz
    h_1_km : float
        Height of the low terminal, in km
    h_2_km : float
        Height of the high terminal, in km
    beta_1_rad : float
        Elevation angle (from zenith), in rad
    atmosphere : ReferenceAtmosphere, optional
        Atmospheric profile, the mean annual global atmosphere by default

    Returns:
    --------
    SlantPathResult
    """
    if atmosphere is None:
        atmosphere = GLOBAL_MEAN_ATMOSPHERE

    if beta_1_rad <= np.pi / 2:
        return ray_trace(f_ghz, h_1_km, h_2_km, beta_1_rad, atmosphere)

    def index_at(h_km):
        return refractive_index(atmosphere.dry_pressure(h_km),
                                atmosphere.temperature(h_km),
                                atmosphere.wet_pressure(h_km))

    # Binary search for h_G, starting mid-way between h_1 and the surface [Section 2.2.2]
    start_term = index_at(h_1_km) * (Const.a_0_km + h_1_km) * np.sin(beta_1_rad)
    h_G_km = h_1_km
    delta_km = h_1_km / 2
    diff = 100.0

    for _ in range(Const.MAX_BISECTION_ITERATIONS):
        h_G_km = h_G_km - delta_km if diff > 0 else h_G_km + delta_km
        delta_km /= 2

        diff = index_at(h_G_km) * (Const.a_0_km + h_G_km) - start_term
        if abs(diff) <= Const.H_G_TOLERANCE_KM:
            break
    else:
        logger.debug("Grazing height search did not converge, using h_G = %.6f km", h_G_km)

    # Trace in both directions from the grazing point
    result_1 = ray_trace(f_ghz, h_G_km, h_1_km, np.pi / 2, atmosphere)
    result_2 = ray_trace(f_ghz, h_G_km, h_2_km, np.pi / 2, atmosphere)

    return SlantPathResult(angle_rad=result_2.angle_rad,
                           A_gas_db=result_1.A_gas_db + result_2.A_gas_db,
                           a_km=result_1.a_km + result_2.a_km,
                           bending_rad=result_1.bending_rad + result_2.bending_rad,
                           delta_L_km=result_1.delta_L_km + result_2.delta_L_km)
