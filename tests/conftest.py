"""
Shared fixtures. Terminal geometries involve a layered ray trace, so they
are built once per session.
"""

import pytest

from pyp528.diffraction import diffraction_line
from pyp528.geometry import terminal_geometry
from pyp528.models import Path


F_MHZ = 1000.0


@pytest.fixture(scope="session")
def low_terminal():
    """15 m terminal at 1000 MHz"""
    return terminal_geometry(F_MHZ, 0.015)


@pytest.fixture(scope="session")
def high_terminal():
    """10 km terminal at 1000 MHz"""
    return terminal_geometry(F_MHZ, 10.0)


@pytest.fixture
def path(low_terminal, high_terminal):
    """Path with d_ML and d_d set, as before the line of sight solver runs"""
    d_ML_km = low_terminal.d_r_km + high_terminal.d_r_km
    line = diffraction_line(low_terminal, high_terminal, F_MHZ, 0, d_ML_km)
    return Path(d_ML_km=d_ML_km, d_d_km=line.d_d_km)
