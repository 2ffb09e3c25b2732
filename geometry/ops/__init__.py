# -*- coding: utf-8 -*-
# Foilprep/geometry/ops/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 10/10/2025 (Updated: 10/12/2025)

Ops Subfolder:
--------------
Numerical airfoil operations on top of the spline: leading-edge location, panel
distribution, normalization and repaneling.


Contents
--------
- leading_edge: Damped, bracketed Newton root-finder (`RootResult`), spline LE search
                and the closest-sample check.

- panelling:    Cosine panel distribution with trailing-edge size control, Top/Bot
                panel split.

- normalize:    LE to (0, 0), chord on the x-axis, TE at x = 1; normalization predicates.

- repanel:      Resample to a target point count; normalize/repanel fixed-point loop.

Public API
----------
Exported functions form the stable interface used by `geometry.api` and `main.py`.
"""

from .leading_edge import RootResult, newton_bracketed, le_find, le_check
from .panelling import panel_distribution, side_panels
from .normalize import normalize, is_normalized_coord, is_normalized
from .repanel import repanel, repanel_and_normalize

__all__ = [
    # leading edge
    "RootResult", "newton_bracketed", "le_find", "le_check",
    # panelling
    "panel_distribution", "side_panels",
    # normalize
    "normalize", "is_normalized_coord", "is_normalized",
    # repanel
    "repanel", "repanel_and_normalize",
]
