# -*- coding: utf-8 -*-
"""
Atmospheric submodels used by the P.528 engine: the P.835 reference
atmosphere and the P.676 gaseous attenuation ray tracer.
"""
from .reference import (GLOBAL_MEAN_ATMOSPHERE, GlobalMeanAtmosphere,
                        ReferenceAtmosphere)
from .slant_path import SlantPathResult, ray_trace, slant_path_attenuation

__all__ = [
    "GLOBAL_MEAN_ATMOSPHERE",
    "GlobalMeanAtmosphere",
    "ReferenceAtmosphere",
    "SlantPathResult",
    "ray_trace",
    "slant_path_attenuation",
]
