# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,too-few-public-methods
"""
Model constants, enumerations and warning flags used throughout
Recommendation ITU-R P.528-5, Annex 2.
"""
from enum import IntEnum, IntFlag


class Const:
    a_0_km = 6371.0              # Earth radius, in km
    a_e_km = 9257.0              # Effective Earth radius, in km
    N_s = 341                    # Surface refractivity, in N-units
    epsilon_r = 15.0             # Relative permittivity of the ground
    sigma = 0.005                # Conductivity of the ground, in S/m
    THIRD = 1.0 / 3.0

    # 0.2997925 = speed of light, gigameters per sec
    C_GM_S = 0.2997925

    # Input limits
    H_MIN_METER = 1.5
    H_MAX_METER = 80000.0
    H_CONFIDENCE_METER = 20000.0     # Above this the model is extrapolated
    F_MIN_MHZ = 100.0
    F_MAX_MHZ = 30000.0
    P_MIN = 1.0
    P_MAX = 99.0

    # Search and solver limits
    LOS_MARGIN_KM = 0.001            # d_ML - d beyond which the path is LOS
    D_0_STEP_KM = 0.001              # d_0 tuning walk
    SEARCH_LIMIT = 100               # 100 km beyond starting point
    TROPO_MIN_LOSS_DB = 20.0
    MAX_BISECTION_ITERATIONS = 200
    H_G_TOLERANCE_KM = 0.001

    # Column of Y_pi(99) in the Nakagami-Rice curves
    Y_pi_99_INDEX = 16

    # 1.5 deg, above which troposcatter K_t is 20 dB
    THETA_S_KT_RAD = 0.02617993878

    # P.835 ground-level water vapour density, in g/m^3
    RHO_0_G_M3 = 7.5


class Polarization(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class PropagationMode(IntEnum):
    NOT_SET = 0
    LOS = 1
    DIFFRACTION = 2
    SCATTERING = 3


class SearchCase(IntEnum):
    """State of the diffraction / troposcatter crossover search"""
    CASE_1 = 1      # diffraction line kept, lower-loss mode selected
    CASE_2 = 2      # diffraction line re-anchored to troposcatter
    DIFFRACTION = 3 # no crossover found, diffraction only


class WarningFlag(IntFlag):
    NONE = 0x00
    DFRAC_TROPO_REGION = 0x01
    HEIGHT_LIMIT_H_1 = 0x02
    HEIGHT_LIMIT_H_2 = 0x04
