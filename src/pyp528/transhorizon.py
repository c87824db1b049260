# -*- coding: utf-8 -*-
# pylint: disable=invalid-name
"""
Search past the radio horizon for the crossover between the diffraction
line and troposcatter, Step 6 in Annex 2, Section 3 of Recommendation
ITU-R P.528-5.
"""
import logging

from .constants import Const, SearchCase, WarningFlag
from .models import DiffractionLine, Path, Terminal, TranshorizonResult
from .troposcatter import troposcatter

logger = logging.getLogger(__name__)


def transhorizon_search(path: Path, terminal_1: Terminal, terminal_2: Terminal,
                        f_mhz: float, line: DiffractionLine) -> TranshorizonResult:
    """
    Walk 1 km at a time beyond the horizon, comparing the slope of the
    troposcatter loss with the slope of the diffraction line.

    Parameters:
    -----------
    path : Path
        Path parameters
    terminal_1 : Terminal
        Low terminal
    terminal_2 : Terminal
        High terminal
    f_mhz : float
        Frequency, in MHz
    line : DiffractionLine
        Diffraction line from Step 3

    Returns:
    --------
    TranshorizonResult
        Possibly re-anchored diffraction line, crossover distance d_crx_km and
        the search case. When no crossover is found within the search limit,
        the model is diffraction only and DFRAC_TROPO_REGION is set.
    """
    k = 0

    # Step 6.1. [Eqns 3-8 and 3-9]
    d_km = path.d_ML_km + 3         # d'
    d_prev_km = path.d_ML_km + 2    # d"

    A_s_db = 0.0
    A_s_prev_db = 0.0

    for _ in range(Const.SEARCH_LIMIT):
        A_s_prev_db = A_s_db

        # Step 6.2
        A_s_db = troposcatter(terminal_1, terminal_2, d_km, f_mhz).A_s_db

        # Below 20 dB the result is not within the valid part of the model.
        # Two valid points are needed to draw a line
        if A_s_db >= Const.TROPO_MIN_LOSS_DB:
            k += 1
        if A_s_db < Const.TROPO_MIN_LOSS_DB or k <= 1:
            d_prev_km, d_km = d_km, d_km + 1
            continue

        # Step 6.3
        M_s = (A_s_db - A_s_prev_db) / (d_km - d_prev_km)     # [Eqn 3-10]

        if M_s <= line.M_d:
            # Step 6.6
            if A_s_prev_db >= line.loss(d_prev_km):          # [Eqn 3-11]
                logger.debug("Crossover at %.1f km, diffraction line kept", d_km)
                return TranshorizonResult(line=line, d_crx_km=d_km, case=SearchCase.CASE_1)

            # Adjust the diffraction line to the troposcatter model
            M_d = (A_s_prev_db - line.A_dML_db) / (d_prev_km - path.d_ML_km)  # [Eqn 3-12]
            A_d0 = A_s_prev_db - M_d * d_prev_km                               # [Eqn 3-13]

            logger.debug("Crossover at %.1f km, diffraction line re-anchored", d_km)
            return TranshorizonResult(line=DiffractionLine(M_d=M_d,
                                                           A_d0=A_d0,
                                                           A_dML_db=line.A_dML_db,
                                                           d_d_km=-(A_d0 / M_d)),
                                      d_crx_km=d_km,
                                      case=SearchCase.CASE_2)

        d_prev_km, d_km = d_km, d_km + 1

    # M_s was always greater than M_d. Default to diffraction-only transhorizon model
    logger.debug("No diffraction/troposcatter crossover within %d km of d_ML",
                 Const.SEARCH_LIMIT)
    return TranshorizonResult(line=line,
                              d_crx_km=d_prev_km,
                              case=SearchCase.DIFFRACTION,
                              warnings=WarningFlag.DFRAC_TROPO_REGION)
