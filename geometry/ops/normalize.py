# -*- coding: utf-8 -*-
# Foilprep/geometry/ops/normalize.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/15/2025 (Updated: 10/12/2025)

Purpose
-------
Move an airfoil into the standard frame: spline leading edge at (0, 0), chord on the
x-axis, both trailing-edge points at x = 1.

Main Tasks
----------
    1. Translate by the spline LE (not by a sample: the LE need not be one).
    2. Rotate by the negative angle of the TE midpoint.
    3. Scale upper and lower side separately by 1/x_te (malformed airfoils can have
       different TE x on each side), then force x_te = 1.
    4. Predicates `is_normalized_coord` and `is_normalized`.

Notes
-----
- `normalize` works in place and refits the spline on the final coordinates.
- Applying it twice leaves the coordinates unchanged within 1e-9.
"""

from __future__ import division
import logging
import math
from ..config import EPSILON
from ..geo.airfoil import Airfoil
from ..topology.indices import le_index
from .leading_edge import le_check, le_find

logger = logging.getLogger(__name__)

__all__ = ["normalize", "is_normalized_coord", "is_normalized"]


def normalize(foil: Airfoil) -> Airfoil:
    """
    Translate, rotate and scale `foil` in place so it is normalized.

    Returns
    -------
    Airfoil
        The same instance.
    """
    _, x_le, y_le, _ = le_find(foil.spline, foil.x, foil.y)

    x = foil.x - x_le
    y = foil.y - y_le

    angle = math.atan2(0.5 * (y[0] + y[-1]), 0.5 * (x[0] + x[-1]))
    cosa, sina = math.cos(-angle), math.sin(-angle)
    x, y = x * cosa - y * sina, x * sina + y * cosa

    ile = le_index(x, y)
    if x[0] != 1.0:
        scale = 1.0 / x[0]
        x[:ile + 1] *= scale
        y[:ile + 1] *= scale
    if x[-1] != 1.0:
        scale = 1.0 / x[-1]
        x[ile + 1:] *= scale
        y[ile + 1:] *= scale

    x[0] = 1.0
    x[-1] = 1.0
    if abs(y[0]) < EPSILON:
        y[0] = 0.0
        y[-1] = 0.0

    foil.set_coordinates(x, y)
    foil.rebuild_spline()
    logger.debug("[normalize] '%s': LE shift (%.3e, %.3e), rotation %.3e rad.",
                 foil.name, x_le, y_le, angle)
    return foil


def is_normalized_coord(foil: Airfoil) -> bool:
    """
    Coordinate-only check: min-x sample exactly (0, 0), both TE x exactly 1 and
    y_te_upper + y_te_lower exactly 0.
    """
    x, y = foil.x, foil.y
    if x[0] != 1.0 or x[-1] != 1.0:
        return False
    if y[0] + y[-1] != 0.0:
        return False
    ile = le_index(x, y)
    return x[ile] == 0.0 and y[ile] == 0.0


def is_normalized(foil: Airfoil, npan: int) -> bool:
    """
    Full check: `is_normalized_coord`, a sample sits on the spline LE, and the point
    count is `npan` or `npan + 1`.
    """
    if not is_normalized_coord(foil):
        return False
    _, is_le = le_check(foil)
    if not is_le:
        return False
    return foil.npoint in (int(npan), int(npan) + 1)
