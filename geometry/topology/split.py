# -*- coding: utf-8 -*-
# Foilprep/geometry/topology/split.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/2/2025 (Updated: 10/12/2025)

Purpose:
--------
Partition a normalized airfoil loop into its Top and Bot sides at the leading edge, put a
loop back together from two sides, and force mirror symmetry about the chord.

Conventions:
------------
   - Input loop is OPEN and CCW: upper TE → LE → lower TE (see `loop.orient_ccw`).
   - The LE sample (minimum x) must sit at exactly (0, 0); both sides share it as their
     first point, so Top and Bot each run LE → TE.
   - Curvature is sampled on the spline of the full loop at every knot, which keeps it
     continuous across the LE.

Notes:
----------------------
   - A MIRROR airfoil never uses its raw lower coordinates for Bot: Bot is (Top.x, -Top.y).
   - All three operations mutate the given airfoil in place and return it.
"""


from __future__ import division
import logging
import numpy as np
from ..errors import PreconditionError
from ..geo.airfoil import Airfoil, Side, Symmetry
from ._validation import _require_le_at_origin
from .indices import le_index

logger = logging.getLogger(__name__)


def _mirror(top: Side) -> Side:
    """Bot side mirrored from Top (`+ 0.0` keeps -0.0 out of the output)."""
    return Side("Bot", top.x.copy(), -top.y + 0.0, top.curvature.copy())


def split_into_sides(foil: Airfoil) -> Airfoil:
    """
    Fill `foil.top` and `foil.bot` from the coordinates.

    Raises
    ------
    PreconditionError
        If the minimum-x sample is not exactly (0, 0).
    """
    x, y = foil.x, foil.y
    ile = _require_le_at_origin(x, y, le_index(x, y), where="split_into_sides", name=foil.name)

    spl = foil.spline
    curv = spl.curvature(spl.s)

    top = Side("Top", x[ile::-1].copy(), y[ile::-1].copy(), curv[ile::-1].copy())
    if foil.symmetrical:
        bot = _mirror(top)
    else:
        bot = Side("Bot", x[ile:].copy(), y[ile:].copy(), curv[ile:].copy())

    foil.top, foil.bot = top, bot
    logger.debug("[split] '%s': Top %d points, Bot %d points.", foil.name, top.npoint, bot.npoint)
    return foil


def build_from_sides(foil: Airfoil) -> Airfoil:
    """
    Rebuild the loop from `foil.top` and `foil.bot` (shared LE point kept once), refit
    the spline and recompute both curvature arrays from that single fit.

    Raises
    ------
    PreconditionError
        If the airfoil has no sides.
    """
    top, bot = foil.top, foil.bot
    if top is None or bot is None:
        raise PreconditionError("build_from_sides: airfoil has no Top/Bot sides",
                                {"airfoil": foil.name})

    x = np.concatenate((top.x[::-1], bot.x[1:]))
    y = np.concatenate((top.y[::-1], bot.y[1:]))
    foil.set_coordinates(x, y)          # drops the old spline and sides

    spl = foil.spline
    curv = spl.curvature(spl.s)
    npt = top.npoint
    foil.top = Side("Top", top.x.copy(), top.y.copy(), curv[npt - 1::-1].copy())
    foil.bot = Side("Bot", bot.x.copy(), bot.y.copy(), curv[npt - 1:].copy())
    return foil


def make_symmetrical(foil: Airfoil) -> Airfoil:
    """
    Overwrite Bot with the mirrored Top, tag the airfoil MIRROR and rebuild it.

    Shape-control data (if any) is mirrored too: bot control points := (top px, -top py).

    Raises
    ------
    PreconditionError
        If the LE sample is not at (0, 0) or the sides have not been split yet.
    """
    x, y = foil.x, foil.y
    _require_le_at_origin(x, y, le_index(x, y), where="make_symmetrical", name=foil.name)
    if foil.top is None or foil.bot is None:
        raise PreconditionError("make_symmetrical: airfoil has no Top/Bot sides",
                                {"airfoil": foil.name})

    foil.bot = _mirror(foil.top)
    foil.symmetry = Symmetry.MIRROR
    build_from_sides(foil)

    ctrl = foil.shape_control
    if ctrl is not None:
        ctrl.bot_px = ctrl.top_px.copy()
        ctrl.bot_py = -ctrl.top_py + 0.0

    logger.info("[split] '%s' made symmetrical (%d points).", foil.name, foil.npoint)
    return foil
