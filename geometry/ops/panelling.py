# -*- coding: utf-8 -*-
# Foilprep/geometry/ops/panelling.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/18/2025 (Updated: 10/11/2025)

Purpose
-------
Cosine-bunched panel distribution along one airfoil side, with a trailing-edge correction
that keeps the last panels from shrinking below a controlled minimum.

Main Tasks
----------
    1. Map `le_bunch` to the start phase of a cosine, the end phase is fixed at 0.65π
       (slightly more bunching at the TE than at the LE).
    2. Shrink the last panel to (1 − 0.9·te_bunch) of its size and let the panels before it
       grow by 1.2× per step towards the LE until the cosine size is reached again.
    3. Rebuild the cumulative distribution and normalize it to 0..1.

Notes
-----
- u[0] == 0 and u[-1] == 1 exactly; output is strictly increasing.
- `side_panels` decides how a point count is split between Top and Bot.
"""

from __future__ import division
from typing import Tuple
import numpy as np

__all__ = ["panel_distribution", "side_panels"]

_LE_PHASE_MAX = 0.1        # start phase (in π) with no LE bunching
_TE_PHASE_END = 0.65       # end phase (in π)
_TE_DU_MIN = 0.9           # te_bunch = 1 shrinks the last panel to 10 %
_TE_GROWTH = 1.2


def panel_distribution(n: int, le_bunch: float, te_bunch: float) -> np.ndarray:
    """
    Return `n` strictly increasing fractions in [0, 1] with u[0] = 0 and u[-1] = 1.

    Parameters
    ----------
    n : int
        Number of points (panels + 1), at least 2.
    le_bunch : float
        0 (no bunching) .. 1 (full cosine) at the leading edge.
    te_bunch : float
        0 (no correction) .. 1 (smallest last panel) at the trailing edge.

    Raises
    ------
    ValueError
        If `n` < 2.
    """
    n = int(n)
    if n < 2:
        raise ValueError("panel distribution needs at least 2 points, got {}".format(n))

    start = _LE_PHASE_MAX - _LE_PHASE_MAX * float(le_bunch)
    start = min(max(start, 0.0), 0.5)

    beta = np.linspace(start, _TE_PHASE_END, n) * np.pi
    u = 0.5 * (1.0 - np.cos(beta))

    du = np.diff(u)
    ip = du.size - 1
    du_ip = (1.0 - _TE_DU_MIN * float(te_bunch)) * du[ip]
    while ip >= 0 and du_ip < du[ip]:
        du[ip] = du_ip
        ip -= 1
        du_ip *= _TE_GROWTH

    u = np.concatenate(([0.0], np.cumsum(du)))
    u = u / u[-1]
    u[0] = 0.0
    u[-1] = 1.0
    return u


def side_panels(npoint: int) -> Tuple[int, int]:
    """
    Panels of (Top, Bot) for a loop of `npoint` points.

    An even panel count is split evenly, an odd one gives Top the extra panel.
    """
    npan = int(npoint) - 1
    n_bot = npan // 2
    return npan - n_bot, n_bot
