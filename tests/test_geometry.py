"""
Unit tests for terminal geometry, ray optics, ground reflection and the
smooth earth diffraction line
"""

import numpy as np
import pytest

from pyp528.constants import Const, Polarization
from pyp528.diffraction import (diffraction_line, distance_function, height_function,
                                smooth_earth_diffraction, surface_admittance)
from pyp528.ray_optics import ray_optics
from pyp528.reflection import reflection_coefficients

F_MHZ = 1000.0


class TestTerminalGeometry:
    """Test terminal horizon geometry"""

    def test_horizon_distance(self, low_terminal, high_terminal):
        # Close to the 4/3 earth approximation sqrt(2 a_e h)
        assert low_terminal.d_r_km == pytest.approx(np.sqrt(2 * Const.a_e_km * 0.015), rel=0.1)
        assert high_terminal.d_r_km == pytest.approx(np.sqrt(2 * Const.a_e_km * 10.0), rel=0.15)

    def test_effective_height(self, high_terminal):
        assert high_terminal.phi_rad == pytest.approx(high_terminal.d_r_km / Const.a_e_km)
        assert high_terminal.h_e_km == pytest.approx(
            Const.a_e_km / np.cos(high_terminal.phi_rad) - Const.a_e_km)
        assert high_terminal.delta_h_km == pytest.approx(
            high_terminal.h_r_km - high_terminal.h_e_km)

    def test_absorption_and_ray_length(self, low_terminal, high_terminal):
        assert high_terminal.A_a_db > low_terminal.A_a_db > 0
        assert high_terminal.a_km > high_terminal.d_r_km * 0.9

    def test_frozen(self, low_terminal):
        with pytest.raises(AttributeError):
            low_terminal.h_r_km = 1.0


class TestRayOptics:
    """Test the two-ray geometry"""

    def test_distance_decreases_with_psi(self, low_terminal, high_terminal):
        distances = [ray_optics(low_terminal, high_terminal, psi).d_km
                     for psi in (0.001, 0.01, 0.1, 1.0)]
        assert np.all(np.diff(distances) < 0)

    def test_indirect_ray_is_longer(self, low_terminal, high_terminal):
        params = ray_optics(low_terminal, high_terminal, 0.05)
        assert params.r_12_km >= params.r_0_km
        assert params.delta_r_km > 0

    def test_distance_from_central_angles(self, low_terminal, high_terminal):
        params = ray_optics(low_terminal, high_terminal, 0.02)
        assert params.d_km == pytest.approx(params.a_a_km * np.sum(params.theta))
        assert params.A_LOS_db == 0.0

    def test_take_off_angles(self, low_terminal, high_terminal):
        params = ray_optics(low_terminal, high_terminal, 0.05)
        # Low terminal looks up, high terminal looks down
        assert params.theta_h1_rad > 0
        assert params.theta_h2_rad < 0


class TestReflection:
    """Test the smooth earth reflection coefficient"""

    @pytest.mark.parametrize("T_pol", [Polarization.HORIZONTAL, Polarization.VERTICAL])
    def test_grazing_incidence(self, T_pol):
        R_g, phi_g = reflection_coefficients(0.0, F_MHZ, T_pol)
        assert R_g == pytest.approx(1.0)
        assert abs(phi_g) == pytest.approx(np.pi)

    def test_magnitude_below_one(self):
        R_g, _ = reflection_coefficients(0.5, F_MHZ, Polarization.HORIZONTAL)
        assert 0 < R_g < 1

    def test_vertical_has_brewster_minimum(self):
        R_h, _ = reflection_coefficients(0.25, F_MHZ, Polarization.HORIZONTAL)
        R_v, _ = reflection_coefficients(0.25, F_MHZ, Polarization.VERTICAL)
        assert R_v < R_h

    def test_angle_is_clamped(self):
        assert reflection_coefficients(-0.1, F_MHZ, 0) == reflection_coefficients(0.0, F_MHZ, 0)
        assert (reflection_coefficients(2.0, F_MHZ, 1) ==
                reflection_coefficients(np.pi / 2, F_MHZ, 1))


class TestSmoothEarthDiffraction:
    """Test the Vogler diffraction functions and the diffraction line"""

    def test_admittance_depends_on_polarization(self):
        assert surface_admittance(F_MHZ, 1) > surface_admittance(F_MHZ, 0)

    def test_height_function_equals_distance_function_for_large_x(self):
        K = surface_admittance(F_MHZ, 0)
        assert height_function(2500.0, K) == pytest.approx(distance_function(2500.0))

    def test_loss_grows_with_distance(self, low_terminal, high_terminal):
        args = (low_terminal.d_r_km, high_terminal.d_r_km, F_MHZ)
        near = smooth_earth_diffraction(*args, 450.0, 0)
        far = smooth_earth_diffraction(*args, 550.0, 0)
        assert far > near

    def test_line(self, low_terminal, high_terminal):
        d_ML_km = low_terminal.d_r_km + high_terminal.d_r_km
        line = diffraction_line(low_terminal, high_terminal, F_MHZ, 0, d_ML_km)
        assert line.M_d > 0
        assert line.loss(d_ML_km) == pytest.approx(line.A_dML_db)
        assert line.loss(line.d_d_km) == pytest.approx(0.0, abs=1e-9)
        assert line.d_d_km < d_ML_km
