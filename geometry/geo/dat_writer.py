# -*- coding: utf-8 -*-
# Foilprep/geometry/geo/dat_writer.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/20/2025 (Updated: 10/11/2025)

Purpose
-------
Emit airfoil coordinates as a labeled `.dat` file, the mirror image of `read_dat`:
one label line, then one `x y` pair per line in fixed 7-decimal format.

Notes
-----
- Fixed width `%12.7f%12.7f` keeps columns aligned and round-trips to 7 decimals.
- The file is replaced if it exists.
"""

import io
import logging
import os
import numpy as np
from ..errors import GeometryError

logger = logging.getLogger(__name__)

_FMT = "{:12.7f}{:12.7f}\n"


def format_dat(x: np.ndarray, y: np.ndarray, name: str = "") -> str:
    """Return the `.dat` text for the coordinates (label line first)."""
    buf = io.StringIO()
    buf.write(name.strip() + "\n")
    for xi, yi in zip(x, y):
        buf.write(_FMT.format(float(xi), float(yi)))
    return buf.getvalue()


def write_dat(filename: str, x: np.ndarray, y: np.ndarray, name: str = "") -> str:
    """
    Write coordinates to `filename`.

    Returns
    -------
    str
        The same `filename` for convenience (chainable).

    Raises
    ------
    GeometryError
        If the file cannot be written.
    """
    text = format_dat(x, y, name)
    directory = os.path.dirname(os.path.abspath(filename))
    try:
        os.makedirs(directory, exist_ok=True)
        with open(filename, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise GeometryError("Unable to write airfoil file.", {"file": filename, "error": str(e)})
    logger.info("[dat_writer] Writing airfoil '%s' to %s", name, filename)
    return filename
