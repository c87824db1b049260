"""
Unit tests for troposcatter and the diffraction / troposcatter crossover
search
"""

import pytest

from pyp528.constants import SearchCase, WarningFlag
from pyp528.diffraction import diffraction_line
from pyp528.models import DiffractionLine, TropoParams
from pyp528.transhorizon import transhorizon_search
from pyp528.troposcatter import scattering_geometry, troposcatter

F_MHZ = 1000.0


class TestTroposcatter:
    """Test the troposcatter model"""

    def test_zero_inside_horizon(self, low_terminal, high_terminal, path):
        assert troposcatter(low_terminal, high_terminal, path.d_ML_km - 1, F_MHZ) == TropoParams()

    def test_geometry_beyond_horizon(self, low_terminal, high_terminal, path):
        tropo = troposcatter(low_terminal, high_terminal, path.d_ML_km + 200, F_MHZ)
        assert tropo.d_s_km == pytest.approx(200.0)
        assert tropo.d_z_km == pytest.approx(100.0)
        assert tropo.theta_s == pytest.approx(2 * tropo.theta_A)
        assert tropo.h_v_km > 0

    def test_common_volume_rises_with_distance(self):
        h_v = [scattering_geometry(d_s_km)[1] for d_s_km in (100.0, 300.0, 600.0)]
        assert h_v[0] < h_v[1] < h_v[2]

    def test_loss_grows_with_distance(self, low_terminal, high_terminal, path):
        near = troposcatter(low_terminal, high_terminal, path.d_ML_km + 100, F_MHZ).A_s_db
        far = troposcatter(low_terminal, high_terminal, path.d_ML_km + 500, F_MHZ).A_s_db
        assert far > near > 0


class TestTranshorizonSearch:
    """Test the crossover search"""

    def test_finds_crossover(self, low_terminal, high_terminal, path):
        line = diffraction_line(low_terminal, high_terminal, F_MHZ, 0, path.d_ML_km)
        search = transhorizon_search(path, low_terminal, high_terminal, F_MHZ, line)

        assert search.case in (SearchCase.CASE_1, SearchCase.CASE_2)
        assert search.warnings == WarningFlag.NONE
        assert path.d_ML_km + 3 < search.d_crx_km <= path.d_ML_km + 3 + 100
        assert search.line.A_dML_db == pytest.approx(line.A_dML_db)

    def test_case_2_line_passes_through_d_ml(self, low_terminal, high_terminal, path):
        line = diffraction_line(low_terminal, high_terminal, F_MHZ, 0, path.d_ML_km)
        search = transhorizon_search(path, low_terminal, high_terminal, F_MHZ, line)
        if search.case == SearchCase.CASE_2:
            assert search.line.loss(path.d_ML_km) == pytest.approx(line.A_dML_db)
        else:
            assert search.line == line

    def test_falling_diffraction_line_is_never_crossed(self, low_terminal, high_terminal, path):
        # Troposcatter loss never falls faster than this line
        line = DiffractionLine(M_d=-1.0, A_d0=1000.0, A_dML_db=1000.0 - path.d_ML_km,
                               d_d_km=1000.0)
        search = transhorizon_search(path, low_terminal, high_terminal, F_MHZ, line)

        assert search.case == SearchCase.DIFFRACTION
        assert search.warnings == WarningFlag.DFRAC_TROPO_REGION
        assert search.line == line
        assert search.d_crx_km == pytest.approx(path.d_ML_km + 3 + 99)
