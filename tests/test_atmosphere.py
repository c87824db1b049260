"""
Unit tests for the reference atmosphere, gaseous attenuation and the
slant path ray tracer
"""

import numpy as np
import pytest

from pyp528.atmosphere import (GLOBAL_MEAN_ATMOSPHERE, GlobalMeanAtmosphere,
                               ReferenceAtmosphere, ray_trace, slant_path_attenuation)
from pyp528.atmosphere.gaseous import refractive_index, specific_attenuation, terrestrial_path
from pyp528.atmosphere.reference import (convert_to_geometric_height,
                                         convert_to_geopotential_height)
from pyp528.errors import AtmosphereHeightError, P528Error


class DryAtmosphere(ReferenceAtmosphere):
    """Global mean profile without water vapour"""

    def temperature(self, h_km):
        return GLOBAL_MEAN_ATMOSPHERE.temperature(h_km)

    def dry_pressure(self, h_km):
        return GLOBAL_MEAN_ATMOSPHERE.dry_pressure(h_km)

    def wet_pressure(self, h_km):
        return 0.0


class TestGlobalMeanAtmosphere:
    """Test the P.835 mean annual global reference atmosphere"""

    def test_sea_level(self):
        assert GLOBAL_MEAN_ATMOSPHERE.temperature(0) == pytest.approx(288.15)
        assert GLOBAL_MEAN_ATMOSPHERE.dry_pressure(0) == pytest.approx(1013.25)
        assert GLOBAL_MEAN_ATMOSPHERE.water_vapour_density(0) == pytest.approx(7.5)

    def test_tropopause(self):
        h_km = convert_to_geometric_height(11.0)
        assert GLOBAL_MEAN_ATMOSPHERE.temperature(h_km) == pytest.approx(216.65)
        assert GLOBAL_MEAN_ATMOSPHERE.dry_pressure(h_km) == pytest.approx(226.3226, rel=1e-4)

    def test_upper_regime(self):
        assert GLOBAL_MEAN_ATMOSPHERE.temperature(88) == pytest.approx(186.8673)
        assert 0 < GLOBAL_MEAN_ATMOSPHERE.dry_pressure(95) < 0.01

    def test_pressure_decreases_with_height(self):
        heights = np.linspace(0, 100, 51)
        pressures = [GLOBAL_MEAN_ATMOSPHERE.dry_pressure(h) for h in heights]
        assert np.all(np.diff(pressures) < 0)

    def test_wet_pressure_at_sea_level(self):
        assert GLOBAL_MEAN_ATMOSPHERE.wet_pressure(0) == pytest.approx(7.5 * 288.15 / 216.7)

    def test_wet_pressure_mixing_ratio_floor(self):
        h_km = 30.0
        floored = GLOBAL_MEAN_ATMOSPHERE.wet_pressure(h_km)
        assert floored > GLOBAL_MEAN_ATMOSPHERE.water_vapour_pressure(h_km)
        assert floored == pytest.approx(2e-6 * GLOBAL_MEAN_ATMOSPHERE.dry_pressure(h_km))

    def test_rho_0_scales_water_vapour(self):
        atmosphere = GlobalMeanAtmosphere(rho_0=15.0)
        assert atmosphere.water_vapour_density(1.0) == pytest.approx(
            2 * GLOBAL_MEAN_ATMOSPHERE.water_vapour_density(1.0))

    @pytest.mark.parametrize("h_km, code", [(-0.5, -1), (100.5, -2)])
    def test_out_of_range(self, h_km, code):
        with pytest.raises(AtmosphereHeightError) as exc_info:
            GLOBAL_MEAN_ATMOSPHERE.temperature(h_km)
        assert exc_info.value.code == code
        assert isinstance(exc_info.value, P528Error)

    def test_height_conversions_round_trip(self):
        assert convert_to_geometric_height(convert_to_geopotential_height(42.0)) == pytest.approx(42.0)


class TestGaseous:
    """Test P.676 specific attenuation and refractivity"""

    def test_refractive_index_at_sea_level(self):
        n = refractive_index(1013.25, 288.15, 9.97)
        assert 1.0003 < n < 1.00035

    def test_oxygen_complex_dominates_at_60_ghz(self):
        assert specific_attenuation(60.0, 288.15, 9.97, 1013.25) > 10.0

    def test_water_vapour_line(self):
        at_line = specific_attenuation(22.235, 288.15, 9.97, 1013.25)
        below_line = specific_attenuation(15.0, 288.15, 9.97, 1013.25)
        assert at_line > below_line

    def test_small_at_vhf(self):
        assert specific_attenuation(0.1, 288.15, 9.97, 1013.25) < 0.01

    def test_terrestrial_path_is_linear(self):
        gamma = specific_attenuation(10.0, 288.15, 9.97, 1013.25)
        assert terrestrial_path(10.0, 288.15, 9.97, 1013.25, 20.0) == pytest.approx(20 * gamma)


class TestSlantPath:
    """Test the layered ray tracer"""

    def test_zero_height_difference(self):
        result = ray_trace(1.0, 1.0, 1.0, 0.3)
        assert result.A_gas_db == pytest.approx(0.0, abs=1e-9)
        assert result.a_km == pytest.approx(0.0, abs=1e-9)
        assert result.angle_rad == pytest.approx(0.3)

    def test_zenith_ray_has_no_bending(self):
        result = slant_path_attenuation(1.0, 0.0, 10.0, 0.0)
        assert result.bending_rad == pytest.approx(0.0, abs=1e-12)
        assert result.a_km == pytest.approx(10.0, rel=1e-6)
        assert result.A_gas_db > 0.0

    def test_grazing_ray_bends_towards_earth(self):
        result = slant_path_attenuation(1.0, 0.0, 10.0, np.pi / 2)
        assert result.bending_rad > 0.0
        assert result.a_km > 300.0
        assert result.delta_L_km > 0.0

    def test_attenuation_grows_with_frequency(self):
        low = slant_path_attenuation(1.0, 0.0, 5.0, np.pi / 2)
        high = slant_path_attenuation(20.0, 0.0, 5.0, np.pi / 2)
        assert high.A_gas_db > low.A_gas_db

    def test_negative_elevation_traces_both_legs(self):
        result = slant_path_attenuation(1.0, 1.0, 5.0, np.pi / 2 + 0.01)
        direct = slant_path_attenuation(1.0, 1.0, 5.0, np.pi / 2 - 0.01)
        assert result.a_km > direct.a_km

    def test_injected_atmosphere(self):
        wet = slant_path_attenuation(20.0, 0.0, 5.0, np.pi / 2)
        dry = slant_path_attenuation(20.0, 0.0, 5.0, np.pi / 2, DryAtmosphere())
        assert dry.A_gas_db < wet.A_gas_db
