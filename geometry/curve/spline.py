# -*- coding: utf-8 -*-
# Foilprep/geometry/curve/spline.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/14/2025 (Updated: 10/10/2025)

Purpose:
--------
Arc-length parametrized cubic spline through an ordered 2D point sequence. This is the
curve service consumed by the leading-edge locator, the normalizer and the repaneler.

Main Tasks:
-----------
    1. Fit x(s), y(s) with scipy CubicSpline over cumulative chord length.
    2. Re-integrate the true arc length of the fitted curve (Gauss-Legendre) and refit,
       so that `s` is arc length of the spline itself, not of the polyline.
    3. Evaluate position, first and second derivative, and signed curvature at any s.

Notes:
------
   - `s` is strictly increasing with point index; consecutive duplicate points are rejected.
   - The spline is immutable: callers rebuild it whenever coordinates change.
"""

from __future__ import division
from typing import Tuple, Union
import numpy as np
from scipy.interpolate import CubicSpline
from ..errors import GeometryError

ArrayOrFloat = Union[float, np.ndarray]

_N_GAUSS = 5          # quadrature points per segment
_N_PASSES = 10        # arc-length re-integration passes
_PASS_TOL = 1e-13     # stop early once segment lengths settle


class Spline2D:
    """
    Cubic spline of a 2D curve parametrized by arc length.

    Parameters
    ----------
    x, y : array-like
        Ordered coordinates, same length N >= 3.

    Attributes
    ----------
    s : np.ndarray
        Arc-length parameter of each input point, s[0] = 0.

    Raises
    ------
    GeometryError
        If the arrays are malformed or two consecutive points coincide.
    """

    def __init__(self, x, y):
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.ndim != 1 or x.shape != y.shape:
            raise GeometryError("Spline needs two 1D arrays of equal length.",
                                {"x_shape": x.shape, "y_shape": y.shape})
        if x.size < 3:
            raise GeometryError("Spline needs at least 3 points.", {"npoint": int(x.size)})

        seg = np.hypot(np.diff(x), np.diff(y))
        if np.any(seg <= 0.0):
            bad = np.where(seg <= 0.0)[0]
            raise GeometryError("Consecutive duplicate points; arc length not increasing.",
                                {"indices": bad.tolist()})

        s = np.concatenate(([0.0], np.cumsum(seg)))
        self._x = x.copy()
        self._y = y.copy()
        self._splx = CubicSpline(s, x)
        self._sply = CubicSpline(s, y)
        self._reintegrate(s)

    # --------------------
    # Construction helpers
    # --------------------
    def _reintegrate(self, s: np.ndarray) -> None:
        """Refit on the true arc length of the current spline until it settles."""
        xq, wq = np.polynomial.legendre.leggauss(_N_GAUSS)
        xq = 0.5 * (xq + 1.0)          # map [-1, 1] -> [0, 1]
        wq = 0.5 * wq
        for _ in range(_N_PASSES):
            ds = np.diff(s)
            st = xq[None, :] * ds[:, None]                      # (nseg, nq) local offsets
            cx = self._splx.c
            cy = self._sply.c
            xs = 3.0 * cx[0][:, None] * st ** 2 + 2.0 * cx[1][:, None] * st + cx[2][:, None]
            ys = 3.0 * cy[0][:, None] * st ** 2 + 2.0 * cy[1][:, None] * st + cy[2][:, None]
            seg = np.sqrt(xs * xs + ys * ys) @ wq * ds
            s_new = np.concatenate(([0.0], np.cumsum(seg)))
            err = float(np.max(np.abs(seg - ds)))
            s = s_new
            self._splx = CubicSpline(s, self._x)
            self._sply = CubicSpline(s, self._y)
            if err < _PASS_TOL * max(1.0, float(s[-1])):
                break
        self._s = s

    # --------------------
    # Queries
    # --------------------
    @property
    def s(self) -> np.ndarray:
        """Arc-length parameter at each input point (read-only copy)."""
        return self._s.copy()

    @property
    def s_min(self) -> float:
        return float(self._s[0])

    @property
    def s_max(self) -> float:
        return float(self._s[-1])

    @property
    def length(self) -> float:
        return self.s_max - self.s_min

    def eval(self, s: ArrayOrFloat, der: int = 0) -> Tuple[ArrayOrFloat, ArrayOrFloat]:
        """
        Evaluate the curve (der=0) or its 1st/2nd derivative w.r.t. s at `s`.

        Returns
        -------
        (x, y)
            Floats for scalar `s`, arrays otherwise.
        """
        if der not in (0, 1, 2):
            raise ValueError("der must be 0, 1 or 2, got {}".format(der))
        xs = self._splx(s, der)
        ys = self._sply(s, der)
        if np.ndim(s) == 0:
            return float(xs), float(ys)
        return np.asarray(xs), np.asarray(ys)

    def curvature(self, s: ArrayOrFloat) -> ArrayOrFloat:
        """
        Signed curvature κ = (x'y'' − y'x'') / |r'|³ at `s`.

        Positive where the curve turns counter-clockwise.
        """
        dx, dy = self.eval(s, 1)
        ddx, ddy = self.eval(s, 2)
        num = np.asarray(dx) * np.asarray(ddy) - np.asarray(dy) * np.asarray(ddx)
        den = (np.asarray(dx) ** 2 + np.asarray(dy) ** 2) ** 1.5
        k = num / den
        if np.ndim(s) == 0:
            return float(k)
        return k
