# -*- coding: utf-8 -*-
# Foilprep/geometry/ops/leading_edge.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/16/2025 (Updated: 10/12/2025)

Purpose
-------
Locate the geometric leading edge on the spline of an airfoil: the arc length `s_le` at
which the tangent is perpendicular to the vector from the trailing-edge midpoint to the
curve point. This does not depend on where the samples happen to be.

Main Tasks
----------
    1. `newton_bracketed`: damped Newton iteration with explicit domain bounds and step
       limit, returning a tagged `RootResult` instead of a sentinel.
    2. `le_find`: f(s) = r'(s)·(r(s) − TE_mid), f'(s) = |r'|² + (r − TE_mid)·r''.
    3. `le_check`: which sample is closest to the spline LE, and does it coincide with it.

Notes
-----
- The iterate is clamped into the interior 10%..90% of the parameter range before each
  evaluation; the spline ends are never extrapolated.
- Non-convergence is degraded, not fatal: a warning is logged and the initial guess (the
  knot of the minimum-x sample) is returned.
"""

from __future__ import division
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import numpy as np
from ..config import EPSILON_LE, NEWTON_MAX_ITER, NEWTON_TOL
from ..curve.spline import Spline2D
from ..topology.indices import closest_index, le_index

logger = logging.getLogger(__name__)

__all__ = ["RootResult", "newton_bracketed", "le_find", "le_check"]

_DOMAIN_MARGIN = 0.1       # fraction of the parameter range excluded at each end
_MAX_STEP_FRAC = 0.1       # Newton step limit as a fraction of the curve length


@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a root search.

    Attributes
    ----------
    converged : bool
        True if |f(value)| < tol was reached.
    value : float
        The root if converged, else the initial guess (best guess).
    iterations : int
        Number of function evaluations performed.
    residual : float
        |f| at the last evaluated iterate.
    """
    converged: bool
    value: float
    iterations: int
    residual: float


def newton_bracketed(fn: Callable[[float], float],
                     dfn: Callable[[float], float],
                     x0: float,
                     lower: float,
                     upper: float,
                     tol: float = NEWTON_TOL,
                     max_iter: int = NEWTON_MAX_ITER,
                     max_step: Optional[float] = None) -> RootResult:
    """
    Newton iteration for fn(x) = 0 restricted to [lower, upper].

    Parameters
    ----------
    fn, dfn : callable
        Function and its derivative.
    x0 : float
        Initial guess.
    lower, upper : float
        Domain bounds; every iterate is clamped into them before evaluation.
    tol : float
        Convergence threshold on |fn|.
    max_iter : int
        Hard cap on evaluations.
    max_step : float, optional
        Largest allowed |Δx| per step (damping), unlimited if None.

    Returns
    -------
    RootResult
        `converged=False` keeps `x0` as value. A zero or non-finite derivative stops
        the iteration as not converged.
    """
    if lower > upper:
        raise ValueError("lower bound {} exceeds upper bound {}".format(lower, upper))

    x = float(x0)
    residual = math.inf
    it = 0
    for it in range(1, int(max_iter) + 1):
        x = min(max(x, lower), upper)
        f = float(fn(x))
        residual = abs(f)
        if residual < tol:
            return RootResult(True, x, it, residual)
        df = float(dfn(x))
        if df == 0.0 or not math.isfinite(df):
            break
        step = f / df
        if max_step is not None and abs(step) > max_step:
            step = math.copysign(max_step, step)
        x -= step
    return RootResult(False, float(x0), it, residual)


def le_find(spline: Spline2D, x: np.ndarray, y: np.ndarray,
            s_guess: Optional[float] = None) -> Tuple[float, float, float, RootResult]:
    """
    Arc length and position of the geometric leading edge.

    Parameters
    ----------
    spline : Spline2D
        Fit through (x, y).
    x, y : np.ndarray
        Coordinates the spline was built from; their first and last points define TE_mid.
    s_guess : float, optional
        Start value; defaults to the knot of the minimum-x sample.

    Returns
    -------
    (s_le, x_le, y_le, result)
    """
    x_te = 0.5 * (float(x[0]) + float(x[-1]))
    y_te = 0.5 * (float(y[0]) + float(y[-1]))

    if s_guess is None:
        s_guess = float(spline.s[le_index(x, y)])

    def f(s):
        px, py = spline.eval(s)
        dx, dy = spline.eval(s, 1)
        return dx * (px - x_te) + dy * (py - y_te)

    def df(s):
        px, py = spline.eval(s)
        dx, dy = spline.eval(s, 1)
        ddx, ddy = spline.eval(s, 2)
        return dx * dx + dy * dy + (px - x_te) * ddx + (py - y_te) * ddy

    lower = spline.s_min + _DOMAIN_MARGIN * spline.length
    upper = spline.s_max - _DOMAIN_MARGIN * spline.length
    result = newton_bracketed(f, df, s_guess, lower, upper,
                              tol=NEWTON_TOL, max_iter=NEWTON_MAX_ITER,
                              max_step=_MAX_STEP_FRAC * spline.length)
    if not result.converged:
        logger.warning("[le_find] Leading edge not converged after %d iterations "
                       "(|f|=%.3e); using initial guess.", result.iterations, result.residual)

    s_le = result.value
    x_le, y_le = spline.eval(s_le)
    return s_le, x_le, y_le, result


def le_check(foil) -> Tuple[int, bool]:
    """
    Closest sample to the spline leading edge of `foil`.

    Returns
    -------
    (index, is_le)
        `is_le` is True if that sample lies within EPSILON_LE of the spline LE.
    """
    _, x_le, y_le, _ = le_find(foil.spline, foil.x, foil.y)
    i, dist = closest_index(foil.x, foil.y, x_le, y_le)
    return i, dist < EPSILON_LE
