"""
Tests for the distance sweeps
"""

import numpy as np
import pandas as pd
import pytest

from pyp528 import TABLE_HEIGHTS, PropagationMode, bt_loss, loss_curve, loss_table


class TestLossCurve:
    """Test loss versus distance for one pair of terminals"""

    @pytest.fixture(scope="class")
    def curve(self):
        return loss_curve(15, 1000, 1000, 0, 50, d_max_km=5, step_km=1)

    def test_columns(self, curve):
        assert list(curve.columns) == ["d_km", "A_db", "A_fs_db", "A_a_db",
                                       "propagation_mode", "warnings"]

    def test_distances(self, curve):
        assert len(curve) == 6
        np.testing.assert_allclose(curve["d_km"].to_numpy(), np.arange(6))

    def test_rows_match_single_calls(self, curve):
        result = bt_loss(3.0, 15, 1000, 1000, 0, 50)
        row = curve[curve["d_km"] == 3.0].iloc[0]
        assert row["A_db"] == pytest.approx(result.A_db)
        assert row["propagation_mode"] == PropagationMode.LOS.name
        assert row["warnings"] == 0

    def test_starts_with_vertical_path(self, curve):
        first = curve.iloc[0]
        assert first["propagation_mode"] == PropagationMode.LOS.name
        assert np.isfinite(first["A_db"])

    def test_loss_grows_along_the_curve(self, curve):
        assert curve["A_fs_db"].iloc[1:].is_monotonic_increasing

    def test_fractional_step(self):
        curve = loss_curve(15, 1000, 1000, 0, 50, d_max_km=1, step_km=0.5)
        np.testing.assert_allclose(curve["d_km"].to_numpy(), [0.0, 0.5, 1.0])


class TestLossTable:
    """Test the table of standard terminal heights"""

    HEIGHTS = ((15, 1000), (1000, 1000))

    @pytest.fixture(scope="class")
    def table(self):
        return loss_table(1000, 0, 50, d_max_km=2, heights=self.HEIGHTS)

    def test_shape(self, table):
        assert isinstance(table, pd.DataFrame)
        assert table.shape == (3, 3)
        assert table.index.name == "d_km"
        assert list(table.index) == [0, 1, 2]

    def test_columns_keyed_by_h_2_then_h_1(self, table):
        assert list(table.columns) == ["FSL", (1000, 15), (1000, 1000)]

    def test_free_space_column(self, table):
        assert table["FSL"].iloc[1] == pytest.approx(bt_loss(1, 15, 1000, 1000, 0, 50).A_fs_db)

    def test_equal_heights_at_zero_distance(self, table):
        assert table[(1000, 1000)].iloc[0] == 0.0

    def test_standard_heights(self):
        assert len(TABLE_HEIGHTS) == 18
        assert all(h_1 <= h_2 for h_1, h_2 in TABLE_HEIGHTS)
