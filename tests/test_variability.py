"""
Unit tests for long-term variability
"""

import pytest

from pyp528.variability import (climate_curves, effective_distance, frequency_factors,
                                inverse_complementary_cumulative_distribution_function,
                                long_term_variability)


class TestInverseCCDF:
    """Test the Abramowitz & Stegun approximation"""

    @pytest.mark.parametrize("q, expected", [
        (0.10, 1.2816),
        (0.01, 2.3268),
        (0.50, 0.0),
    ])
    def test_known_values(self, q, expected):
        assert inverse_complementary_cumulative_distribution_function(q) == pytest.approx(
            expected, abs=4.5e-4)

    def test_antisymmetric(self):
        q_10 = inverse_complementary_cumulative_distribution_function(0.1)
        q_90 = inverse_complementary_cumulative_distribution_function(0.9)
        assert q_90 == pytest.approx(-q_10)


class TestEffectiveDistance:
    """Test d_e"""

    def test_scaled_inside_d_q(self):
        # d_q = 0 + 0 + 65 km at 100 MHz
        assert effective_distance(0, 0, 32.5, 100) == pytest.approx(65.0)

    def test_offset_beyond_d_q(self):
        assert effective_distance(0, 0, 165, 100) == pytest.approx(230.0)

    def test_continuous_at_d_q(self):
        assert effective_distance(10, 20, 95, 100) == pytest.approx(130.0)


class TestFrequencyFactors:
    """Test g(10) and g(90)"""

    def test_constant_above_1600_mhz(self):
        assert frequency_factors(5000) == (1.05, 1.05)

    def test_at_200_mhz(self):
        g_10, g_90 = frequency_factors(200)
        assert g_10 == pytest.approx(1.28)
        assert g_90 == pytest.approx(1.23)


class TestLongTermVariability:
    """Test Y_e and A_Y"""

    def test_climate_curves_at_zero_distance(self):
        assert climate_curves(0.0) == pytest.approx([0.0, 0.0, 0.0])

    def test_climate_curves_tend_to_f_inf(self):
        assert climate_curves(2000.0) == pytest.approx([3.2, 5.4, 0.0], abs=1e-3)

    def test_median_is_v50(self):
        d_e_km = effective_distance(20, 300, 400, 1000)
        Y_e_db, A_Y = long_term_variability(20, 300, 400, 1000, 50, 1.0, -100.0)
        assert A_Y == 0.0
        assert Y_e_db == pytest.approx(climate_curves(d_e_km)[2])

    def test_ordered_in_percentage(self):
        args = (20, 300, 400, 1000)
        Y_10, _ = long_term_variability(*args, 10, 1.0, -100.0)
        Y_50, _ = long_term_variability(*args, 50, 1.0, -100.0)
        Y_90, _ = long_term_variability(*args, 90, 1.0, -100.0)
        assert Y_10 > Y_50 > Y_90

    def test_zero_elevation_factor_removes_variability(self):
        Y_e_db, A_Y = long_term_variability(20, 300, 100, 1000, 90, 0.0, -100.0)
        assert Y_e_db == 0.0
        assert A_Y == 0.0

    def test_a_y_limits_enhancement_near_free_space(self):
        args = (20, 300, 400, 1000)
        _, A_Y = long_term_variability(*args, 10, 1.0, 0.0)
        assert A_Y > 0.0

    def test_low_percentage_is_capped(self):
        # For p < 10 the enhancement relative to free space is bounded by -c_Y
        A_T = 0.0
        Y_e_db, _ = long_term_variability(20, 300, 400, 1000, 1, 1.0, A_T)
        assert Y_e_db + A_T <= 5.0 + 1e-9
