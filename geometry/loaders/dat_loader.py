# -*- coding: utf-8 -*-
# Foilprep/geometry/loaders/dat_loader.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 6/12/2025 (Updated: 10/11/2025)

Purpose:
--------
Read airfoil coordinates from `.dat` files (Selig-style) and return the label and the
x/y arrays in counter-clockwise order.

Main Features:
--------------
   1) Optional first line used as the airfoil label (detected: not two numbers).
   2) Two whitespace-separated numbers per line, one point per line.
   3) Format check: the loop must reverse x direction exactly once (at the LE).
   4) Point order is flipped to counter-clockwise if the file starts on the lower side.

Notes:
------
   - This module does *no* plotting, splining, or normalization, just I/O parsing.
   - Every failure is fatal and raised as AirfoilFormatError with the file in context.
"""

import logging
from typing import List, Optional, Tuple
import numpy as np
from ..errors import AirfoilFormatError
from ..topology.loop import count_reversals, is_single_loop, orient_ccw

logger = logging.getLogger(__name__)


def is_dat_file(filename: str) -> bool:
    """True if `filename` has a `.dat` suffix (case-insensitive)."""
    return filename.lower().endswith(".dat")


def _parse_xy(line: str) -> Optional[Tuple[float, float]]:
    """Return (x, y) if the line starts with two numbers, else None."""
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def read_dat(filename: str) -> Tuple[str, np.ndarray, np.ndarray]:
    """
    Load a 2D airfoil from a `.dat` file.

    Parameters
    ----------
    filename : str
        Path to the `.dat` file.

    Returns
    -------
    (name, x, y)
        Label ('' if the file has none) and float64 coordinate arrays, CCW ordered.

    Raises
    ------
    AirfoilFormatError
        If the file cannot be read, a coordinate line is malformed, fewer than three
        points are present, or x does not reverse direction exactly once.
    """
    try:
        with open(filename, "r", encoding="utf-8", errors="ignore") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise AirfoilFormatError("Cannot find airfoil file.", {"file": filename, "error": str(e)})

    # Trailing blank lines are tolerated; everything else must be coordinates.
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise AirfoilFormatError("Empty airfoil file.", {"file": filename})

    name = ""
    first = _parse_xy(lines[0])
    if first is None:
        name = lines[0].strip()
        lines = lines[1:]

    data: List[Tuple[float, float]] = []
    for lineno, line in enumerate(lines, start=2 if name else 1):
        xy = _parse_xy(line)
        if xy is None:
            raise AirfoilFormatError(
                "Incorrect format: expected x and y coordinates in 2 columns, no blank lines.",
                {"file": filename, "line": lineno, "text": line},
            )
        data.append(xy)

    if len(data) < 3:
        raise AirfoilFormatError("Need at least 3 coordinate points.",
                                 {"file": filename, "npoint": len(data)})

    pts = np.asarray(data, dtype=np.float64) + 0.0    # get rid of -0.0
    x, y = pts[:, 0], pts[:, 1]

    if not is_single_loop(x):
        raise AirfoilFormatError(
            "Incorrect format: coordinates should form a single loop with one x reversal.",
            {"file": filename, "reversals": count_reversals(x)},
        )

    x, y, flipped = orient_ccw(x, y)
    if flipped:
        logger.warning("[dat_loader] Changing point ordering to counter-clockwise: %s", filename)

    return name, x, y
