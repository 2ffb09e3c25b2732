# -*- coding: utf-8 -*-
# Foilprep/geometry/topology/indices.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/1/2025 (Updated: 10/11/2025)

Purpose:
--------
Deterministic indexers for key samples of an open airfoil loop:
   - The sample LE index (minimum x) with explicit, stable tie-breaking.
   - The sample closest to an arbitrary point (e.g. the spline leading edge).

Conventions:
------------
   - Indices are 0-based over the coordinate arrays.
   - "Sample LE" = minimum x of the samples; the geometric LE lives on the spline and is
     located by `geometry.ops.leading_edge`.
"""


from __future__ import division
from typing import Tuple
import numpy as np
from ._validation import _assert_xy


def le_index(x: np.ndarray, y: np.ndarray, tol: float = 0.0) -> int:
    """
    Stable index of the minimum-x sample:
      1) Primary: minimum of x (candidates within `tol`).
      2) Secondary: minimal |y| (closest to the chord) among tied candidates.
      3) Tertiary: smallest index (full determinism).
    """
    _assert_xy(x, y)
    x0 = float(np.min(x))
    cand = np.where(x <= x0 + tol)[0]
    if cand.size == 1:
        return int(cand[0])

    y_abs = np.abs(y[cand])
    y_min = float(np.min(y_abs))
    cand2 = cand[np.where(y_abs <= y_min + tol)[0]]
    return int(np.min(cand2))


def closest_index(x: np.ndarray, y: np.ndarray, px: float, py: float) -> Tuple[int, float]:
    """
    Return (index, distance) of the sample closest to the point (px, py).

    Ties resolve to the smallest index.
    """
    _assert_xy(x, y)
    d = np.hypot(x - px, y - py)
    i = int(np.argmin(d))
    return i, float(d[i])
