# -*- coding: utf-8 -*-
# Foilprep/geometry/ops/repanel.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/20/2025 (Updated: 10/12/2025)

Purpose
-------
Resample an airfoil along its spline to a target point distribution, and drive the
normalize → repanel cycle until a sample lands on the geometric leading edge.

Pipeline
--------
repanel_and_normalize(foil, options):
    repanel → { normalize → repanel → le_find, le_check } × ≤ 20 → final normalize
            → snap LE sample to (0, 0) → snap TE drift → split_into_sides

Notes
-----
- Both entry points return a NEW airfoil; the input is left untouched.
- Normalizing once is not enough: repaneling moves the samples and the spline LE shifts
  by a small offset again, hence the loop.
- Failing to converge is degraded, not fatal: a warning is logged and the last iterate
  is returned (without sides if its LE sample is not at (0, 0)).
"""

from __future__ import division
import logging
import math
from typing import Optional
import numpy as np
from ..config import (EPSILON_LE, EPSILON_TE, NORMALIZE_MAX_ITER, PanelOptions,
                      build_panel_options)
from ..geo.airfoil import Airfoil
from ..topology.indices import le_index
from ..topology.split import split_into_sides
from .leading_edge import le_check, le_find
from .normalize import normalize
from .panelling import panel_distribution, side_panels

logger = logging.getLogger(__name__)

__all__ = ["repanel", "repanel_and_normalize"]


def _options(options: Optional[PanelOptions]) -> PanelOptions:
    return options if options is not None else build_panel_options()


def repanel(foil: Airfoil, options: Optional[PanelOptions] = None) -> Airfoil:
    """
    Return a copy of `foil` resampled to exactly `options.npoint` points.

    The loop is split at the spline LE: Top gets the extra panel if the panel count is
    odd. Top fractions run TE → LE over [s_start, s_le], Bot fractions LE → TE over
    [s_le, s_end].

    Parameters
    ----------
    foil : Airfoil
        Source geometry (its spline is built if needed).
    options : PanelOptions, optional
        Target distribution; package defaults if omitted.
    """
    options = _options(options)
    spl = foil.spline
    s_le, _, _, _ = le_find(spl, foil.x, foil.y)
    s_start, s_end = spl.s_min, spl.s_max

    n_top, n_bot = side_panels(options.npoint)

    u_top = panel_distribution(n_top + 1, options.le_bunch, options.te_bunch)[::-1]
    s_top = s_start + (1.0 - u_top) * (s_le - s_start)

    u_bot = panel_distribution(n_bot + 1, options.le_bunch, options.te_bunch)
    s_bot = s_le + u_bot * (s_end - s_le)

    s = np.concatenate((s_top, s_bot[1:]))
    x, y = spl.eval(s)

    out = foil.copy()
    out.set_coordinates(x, y)
    out.rebuild_spline()
    logger.debug("[repanel] '%s': %d → %d points (Top %d / Bot %d panels).",
                 foil.name, foil.npoint, out.npoint, n_top, n_bot)
    return out


def _snap_te(foil: Airfoil) -> None:
    """Remove floating-point drift of the TE: zero gap, or exactly symmetric gap."""
    x, y = foil.x.copy(), foil.y.copy()
    if abs(y[0]) < EPSILON_TE:
        y[0] = 0.0
        y[-1] = 0.0
    elif abs(y[0] + y[-1]) < EPSILON_TE:
        y[-1] = -y[0]
    else:
        return
    if y[0] != foil.y[0] or y[-1] != foil.y[-1]:
        foil.set_coordinates(x, y)


def repanel_and_normalize(foil: Airfoil, options: Optional[PanelOptions] = None) -> Airfoil:
    """
    Normalized, repaneled and split copy of `foil`, named `<name>-norm`.

    Parameters
    ----------
    foil : Airfoil
        Raw input, any pose and chord length.
    options : PanelOptions, optional
        Target distribution; package defaults if omitted.

    Returns
    -------
    Airfoil
        Exactly `options.npoint` points. If the loop converged: min-x sample at (0, 0),
        x_te = 1 on both sides, |y_te_upper + y_te_lower| < 1e-8 and Top/Bot filled.
    """
    options = _options(options)
    work = repanel(foil, options)

    le_fixed = False
    for it in range(1, NORMALIZE_MAX_ITER + 1):
        normalize(work)
        work = repanel(work, options)
        _, x_le, y_le, _ = le_find(work.spline, work.x, work.y)
        # spline LE at the origin is not enough: a sample must also sit on it
        if math.hypot(x_le, y_le) < EPSILON_LE and le_check(work)[1]:
            normalize(work)
            le_fixed = True
            logger.debug("[repanel] '%s': leading edge converged after %d passes.",
                         foil.name, it)
            break

    if le_fixed:
        ile, is_le = le_check(work)
        if is_le:
            x, y = work.x.copy(), work.y.copy()
            x[ile] = 0.0
            y[ile] = 0.0
            work.set_coordinates(x, y)
        else:
            logger.warning("[repanel] '%s': leading edge couldn't be iterated exactly to 0,0.",
                           foil.name)
    else:
        logger.warning("[repanel] '%s': leading edge couldn't be moved close to 0,0 "
                       "after %d passes. Continuing ...", foil.name, NORMALIZE_MAX_ITER)

    _snap_te(work)
    work.name = "{}-norm".format(foil.name)

    ile = le_index(work.x, work.y)
    if work.x[ile] == 0.0 and work.y[ile] == 0.0:
        split_into_sides(work)
    else:
        logger.warning("[repanel] '%s': leading edge sample at (%.3e, %.3e), sides not split.",
                       work.name, work.x[ile], work.y[ile])
    return work
