# -*- coding: utf-8 -*-
# pylint: disable=invalid-name
"""
Reference standard atmospheres, Recommendation ITU-R P.835.

The ray tracer only needs temperature, dry pressure and water vapour
pressure as functions of geometric height, so an atmosphere is any object
implementing :class:`ReferenceAtmosphere`.
"""
from abc import ABC, abstractmethod

import numpy as np

from ..constants import Const
from ..errors import AtmosphereHeightError

# Geopotential base heights (km'), base temperatures (K), lapse rates (K/km')
# and base pressures (hPa) of the layers below 84.852 km'
_LAYERS = (
    # h'_base  T_base   L      p_base
    (0.0,    288.15, -6.5,  1013.25),
    (11.0,   216.65,  0.0,  226.3226),
    (20.0,   216.65,  1.0,  54.74980),
    (32.0,   228.65,  2.8,  8.680422),
    (47.0,   270.65,  0.0,  1.109106),
    (51.0,   270.65, -2.8,  0.6694167),
    (71.0,   214.65, -2.0,  0.03956649),
)
_H_PRIME_TOP_KM = 84.852

# g_0 * M_0 / R*, in K/km'
_HYDROSTATIC = 34.1632

# ln(p) polynomial coefficients above 86 km [Eqn 5]
_P_REGIME2 = (95.571899, -4.011801, 6.424731e-2, -4.789660e-4, 1.340543e-6)

_R_EARTH_KM = 6356.766


def convert_to_geopotential_height(h_km: float) -> float:
    """Geometric height, in km, to geopotential height, in km' [Eqn 1a]"""
    return (_R_EARTH_KM * h_km) / (_R_EARTH_KM + h_km)


def convert_to_geometric_height(h_prime_km: float) -> float:
    """Geopotential height, in km', to geometric height, in km [Eqn 1b]"""
    return (_R_EARTH_KM * h_prime_km) / (_R_EARTH_KM - h_prime_km)


def water_vapour_density_to_pressure(rho_g_m3: float, T_kelvin: float) -> float:
    """Water vapour density, in g/m^3, to partial pressure, in hPa [Eqn 8]"""
    return (rho_g_m3 * T_kelvin) / 216.7


def _check_height(h_km: float):
    if h_km < 0 or h_km > 100:
        raise AtmosphereHeightError(h_km)


def _layer(h_prime_km: float):
    if h_prime_km < 0 or h_prime_km > _H_PRIME_TOP_KM:
        raise AtmosphereHeightError(convert_to_geometric_height(h_prime_km))
    for layer in reversed(_LAYERS):
        # Layer boundaries belong to the lower layer
        if h_prime_km > layer[0]:
            return layer
    return _LAYERS[0]


class ReferenceAtmosphere(ABC):
    """Vertical profile of the atmosphere used by the ray tracer"""

    @abstractmethod
    def temperature(self, h_km: float) -> float:
        """Temperature, in Kelvin"""

    @abstractmethod
    def dry_pressure(self, h_km: float) -> float:
        """Dry air pressure, in hPa"""

    @abstractmethod
    def wet_pressure(self, h_km: float) -> float:
        """Water vapour pressure, in hPa"""


class GlobalMeanAtmosphere(ReferenceAtmosphere):
    """
    Mean annual global reference atmosphere, Recommendation ITU-R P.835,
    valid from 0 to 100 km geometric height.

    Parameters:
    -----------
    rho_0 : float
        Ground-level water vapour density, in g/m^3
    """

    def __init__(self, rho_0: float = Const.RHO_0_G_M3):
        self.rho_0 = rho_0

    def __repr__(self):
        return f"{type(self).__name__}(rho_0={self.rho_0})"

    def temperature(self, h_km: float) -> float:
        _check_height(h_km)
        if h_km < 86:
            return self._temperature_regime1(convert_to_geopotential_height(h_km))
        return self._temperature_regime2(h_km)

    def dry_pressure(self, h_km: float) -> float:
        _check_height(h_km)
        if h_km < 86:
            return self._pressure_regime1(convert_to_geopotential_height(h_km))
        return float(np.exp(np.polyval(_P_REGIME2[::-1], h_km)))

    def water_vapour_density(self, h_km: float) -> float:
        """Water vapour density, in g/m^3, with a 2 km scale height [Eqn 6]"""
        _check_height(h_km)
        return self.rho_0 * np.exp(-h_km / 2.0)

    def water_vapour_pressure(self, h_km: float) -> float:
        """Water vapour pressure, in hPa, without a mixing ratio floor"""
        return water_vapour_density_to_pressure(self.water_vapour_density(h_km),
                                                self.temperature(h_km))

    def wet_pressure(self, h_km: float) -> float:
        # Above ~10 km the density is floored at a mixing ratio of 2 ppmv
        T_kelvin = self.temperature(h_km)
        p_hPa = self.dry_pressure(h_km)
        rho_g_m3 = max(self.water_vapour_density(h_km),
                       2e-6 * 216.7 * p_hPa / T_kelvin)
        return water_vapour_density_to_pressure(rho_g_m3, T_kelvin)

    @staticmethod
    def _temperature_regime1(h_prime_km: float) -> float:
        h_base, T_base, lapse, _ = _layer(h_prime_km)
        return T_base + lapse * (h_prime_km - h_base)

    @staticmethod
    def _temperature_regime2(h_km: float) -> float:
        if h_km <= 91:
            return 186.8673
        return 263.1905 - 76.3232 * np.sqrt(1 - ((h_km - 91) / 19.9429)**2)

    @staticmethod
    def _pressure_regime1(h_prime_km: float) -> float:
        h_base, T_base, lapse, p_base = _layer(h_prime_km)
        if lapse == 0.0:
            return p_base * np.exp(-_HYDROSTATIC * (h_prime_km - h_base) / T_base)
        T_kelvin = T_base + lapse * (h_prime_km - h_base)
        return p_base * (T_base / T_kelvin)**(_HYDROSTATIC / lapse)


GLOBAL_MEAN_ATMOSPHERE = GlobalMeanAtmosphere()
