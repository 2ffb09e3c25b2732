# -*- coding: utf-8 -*-
# Foilprep/geometry/metrics/summary.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 8/24/2025 (Updated: 10/12/2025)

Purpose:
--------
Leading- and trailing-edge summary of one or more airfoils, for quick inspection of what
normalization and repaneling did.

Main Tasks:
-----------
    1. `coordinate_data`: point count, sample LE (index and position), spline LE, upper
       and lower TE, TE gap.
    2. `format_coordinate_table`: fixed-width table, one row per airfoil.
    3. `log_coordinate_data`: the same table through the module logger.
"""

from __future__ import division
import logging
from typing import Dict
from ..geo.airfoil import Airfoil
from ..ops.leading_edge import le_find

logger = logging.getLogger(__name__)

__all__ = ["coordinate_data", "format_coordinate_table", "log_coordinate_data"]

_ZERO_PRINT = 1e-7       # spline LE values below this are shown as 0

_COLUMNS = (
    ("np", 5), ("ile", 5),
    ("xLE", 13), ("yLE", 11), ("spl xLE", 11), ("spl yLE", 11),
    ("top xTE", 13), ("top yTE", 11), ("bot xTE", 11), ("bot yTE", 11),
)
_NAME_WIDTH = 15


def _clean(v: float) -> float:
    return 0.0 if abs(v) < _ZERO_PRINT else float(v)


def coordinate_data(foil: Airfoil) -> Dict[str, object]:
    """
    Returns a dict with:
      - name, npoint, ile
      - x_le, y_le          (minimum-x sample)
      - spl_x_le, spl_y_le  (spline leading edge, |v| < 1e-7 reported as 0)
      - top_x_te, top_y_te, bot_x_te, bot_y_te, te_gap
    """
    x, y = foil.x, foil.y
    ile = foil.le_index()
    _, xs, ys, _ = le_find(foil.spline, x, y)
    return {
        "name": foil.name,
        "npoint": foil.npoint,
        "ile": ile,
        "x_le": float(x[ile]),
        "y_le": float(y[ile]),
        "spl_x_le": _clean(xs),
        "spl_y_le": _clean(ys),
        "top_x_te": float(x[0]),
        "top_y_te": float(y[0]),
        "bot_x_te": float(x[-1]),
        "bot_y_te": float(y[-1]),
        "te_gap": foil.te_gap(),
    }


def format_coordinate_table(*foils: Airfoil, indent: int = 5) -> str:
    """Fixed-width table (header + one row per airfoil)."""
    if not (0 <= indent < 80):
        indent = 5
    pad = " " * indent
    header = pad + "Name".ljust(_NAME_WIDTH) + "".join(t.rjust(w) for t, w in _COLUMNS)
    rows = [header]
    for foil in foils:
        d = coordinate_data(foil)
        values = (d["x_le"], d["y_le"], d["spl_x_le"], d["spl_y_le"],
                  d["top_x_te"], d["top_y_te"], d["bot_x_te"], d["bot_y_te"])
        cells = ["{:d}".format(d["npoint"]).rjust(5), "{:d}".format(d["ile"]).rjust(5)]
        for (_, w), v in zip(_COLUMNS[2:], values):
            cells.append("{:10.7f}".format(v).rjust(w))
        rows.append(pad + str(d["name"])[:_NAME_WIDTH].ljust(_NAME_WIDTH) + "".join(cells))
    return "\n".join(rows)


def log_coordinate_data(*foils: Airfoil, indent: int = 5) -> str:
    """Log the coordinate table at INFO level and return it."""
    table = format_coordinate_table(*foils, indent=indent)
    logger.info("[summary] Coordinate data:\n%s", table)
    return table
