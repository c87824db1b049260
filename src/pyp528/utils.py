# -*- coding: utf-8 -*-
"""
Small numerical helpers for table lookups.
"""
import numpy as np


def linear_interpolation(x1: float, y1: float, x2: float, y2: float,
                         x: float) -> float:
    """
    Perform linear interpolation between two points.

    Parameters:
    -----------
    x1, y1 : float
        Point 1 coordinates
    x2, y2 : float
        Point 2 coordinates
    x : float
        Value of the independent variable

    Returns:
    --------
    y : float
        Linearly interpolated value
    """
    return (y1 * (x2 - x) + y2 * (x - x1)) / (x2 - x1)


def upper_bound(vector: np.ndarray, value: float) -> int:
    """Index of the first element greater than value, len(vector) if none"""
    return int(np.searchsorted(vector, value, side="right"))


def lower_bound(vector: np.ndarray, value: float) -> int:
    """Index of the first element greater than or equal to value, len(vector) if none"""
    return int(np.searchsorted(vector, value, side="left"))
