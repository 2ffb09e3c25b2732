# -*- coding: utf-8 -*-
# Foilprep/geometry/topology/loop.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 8/31/2025 (Updated: 10/11/2025)

Purpose:
--------
This module owns *connectivity-level* concerns of an airfoil loop:
   - Direction reversals of x (a valid airfoil reverses exactly once, at the LE),
   - Point ordering (TE → upper side → LE → lower side → TE),
   - Trailing-edge gap.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free: they return new arrays, never mutate inputs.
   - The loop is *open*: first and last samples are the two TE points and may differ.
"""

from __future__ import division
from typing import Tuple
import numpy as np
from ._validation import _assert_xy


# -----------------------
# Public API
# -----------------------
def count_reversals(x: np.ndarray) -> int:
    """
    Number of sign changes of dx along the sequence, ignoring zero steps.

    Parameters
    ----------
    x : np.ndarray
        1D x-coordinates in loop order.

    Returns
    -------
    int
        0 for a monotonic sequence, 1 for a proper single airfoil loop.
    """
    x = np.asarray(x, dtype=np.float64)
    if x.size < 3:
        return 0
    dx = np.diff(x)
    dx = dx[dx != 0.0]
    if dx.size < 2:
        return 0
    return int(np.count_nonzero(np.sign(dx[1:]) != np.sign(dx[:-1])))


def is_single_loop(x: np.ndarray) -> bool:
    """Predicate: does x reverse direction exactly once?"""
    return count_reversals(x) == 1


def needs_flip(y: np.ndarray) -> bool:
    """
    True if the loop runs clockwise in the airfoil sense, i.e. it starts on the lower side.

    Convention: the first point is the upper TE, so y[first] >= y[last] for CCW ordering.
    """
    return bool(y[-1] > y[0])


def orient_ccw(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray, bool]:
    """
    Return (x, y, flipped) with the loop ordered counter-clockwise (upper TE first).

    Determinism
    -----------
    - The only reordering performed is a full reversal when needed; no re-sorting.
    """
    _assert_xy(x, y)
    if needs_flip(y):
        return x[::-1].copy(), y[::-1].copy(), True
    return x.copy(), y.copy(), False


def te_gap(x: np.ndarray, y: np.ndarray) -> float:
    """Euclidean distance between the first and the last point (trailing-edge gap)."""
    _assert_xy(x, y, min_points=2)
    return float(np.hypot(x[0] - x[-1], y[0] - y[-1]))
