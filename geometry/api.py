# -*- coding: utf-8 -*-
# Foilprep/geometry/api.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/15/2025 (Updated: 10/12/2025)

Purpose
-------
Thin, import-only façade for Foilprep geometry workflows. Exposes three high-level
helpers to (1) load an airfoil, (2) normalize and repanel it, and (3) write the result.

Main Tasks
----------
    1. `load_airfoil` → parse a `.dat` file into an `Airfoil` (CCW, format-checked).
    2. `prepare_airfoil` → normalize/repanel loop with user-friendly option keys.
    3. `write_airfoil` → labeled `.dat` output.

Notes
-----
- This module is a convenience façade; detailed behavior lives in `geometry.ops` and
  `geometry.topology`. Option keys accept the aliases of `geometry.config.ALIASES`.
"""

from typing import Any, Mapping, Optional

# Internal: needed to implement helpers (not exported in __all__)
from .config import build_panel_options
from .geo.airfoil import Airfoil
from .ops.repanel import repanel_and_normalize
from .topology.split import make_symmetrical

__all__ = [
    "load_airfoil",
    "prepare_airfoil",
    "write_airfoil",
]


# --------
# Helpers
# --------
def load_airfoil(filename: str) -> Airfoil:
    """
    Load an airfoil from a `.dat` file.

    Args
    ----
    filename : str
        Path to the `.dat` file (optional label line, two columns).

    Returns
    -------
    Airfoil
        Counter-clockwise coordinates, not yet normalized.
    """
    return Airfoil.load(filename)


def prepare_airfoil(
    foil: Airfoil,
    params: Optional[Mapping[str, Any]] = None,
    *,
    symmetrical: bool = False,
) -> Airfoil:
    """
    Normalize, repanel and split an airfoil; optionally force mirror symmetry.

    Args
    ----
    foil : Airfoil
        Raw airfoil (left untouched).
    params : Mapping, optional
        Panelling options, e.g. {"npoint": 201, "le_bunch": 0.9, "te_bunch": 0.5}.
    symmetrical : bool, optional
        Overwrite Bot with the mirrored Top afterwards (default: False).

    Returns
    -------
    Airfoil
        New airfoil named `<name>-norm`.
    """
    options = build_panel_options(params)
    out = repanel_and_normalize(foil, options)
    if symmetrical:
        make_symmetrical(out)
    return out


def write_airfoil(foil: Airfoil, filename: str, *, name: Optional[str] = None) -> str:
    """
    Write `foil` as a labeled `.dat` file and return the path.

    Args
    ----
    foil : Airfoil
        Geometry to write.
    filename : str
        Output path (folders are created).
    name : str, optional
        Label line; defaults to `foil.name`.
    """
    return foil.write(filename, name=name)
