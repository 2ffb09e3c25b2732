# -*- coding: utf-8 -*-
# Foilprep/geometry/geo/airfoil.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/9/2025 (Updated: 10/12/2025)

Purpose:
--------
In-memory airfoil: an open, counter-clockwise loop of (x, y) samples running
TE (upper) → LE → TE (lower), plus its lazily fitted spline, optional Top/Bot sides and
optional shape-control data carried along for mirroring.

Pipeline:
---------
Airfoil.load() → read_dat (label, format checks, CCW) → Airfoil
Airfoil.spline  → Spline2D fitted on first access, dropped on every coordinate change

Notes:
------
- Coordinates have value semantics: arrays are copied in and out of `set_coordinates`,
  so two airfoils never alias the same buffer.
- The symmetry tag is chosen at construction (`Symmetry.INDEPENDENT` or `Symmetry.MIRROR`)
  and only `make_symmetrical` switches it.
"""

import os
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import numpy as np
from ..curve.spline import Spline2D
from ..loaders.dat_loader import read_dat
from ..topology._validation import _assert_xy
from ..topology.indices import le_index
from ..topology.loop import te_gap as _te_gap
from .dat_writer import write_dat

logger = logging.getLogger(__name__)


class Symmetry(Enum):
    """How the lower side relates to the upper side."""
    INDEPENDENT = "independent"
    MIRROR = "mirror"


@dataclass
class Side:
    """
    One side of an airfoil, running from the LE to one TE point.

    Attributes
    ----------
    name : str
        "Top" or "Bot".
    x, y : np.ndarray
        Coordinates, LE first.
    curvature : np.ndarray
        Signed curvature of the airfoil spline at each sample.
    """
    name: str
    x: np.ndarray
    y: np.ndarray
    curvature: np.ndarray

    @property
    def npoint(self) -> int:
        return int(self.x.shape[0])

    def copy(self) -> "Side":
        return Side(self.name, self.x.copy(), self.y.copy(), self.curvature.copy())


@dataclass
class ShapeControl:
    """
    Control data of a parametrized shape (e.g. Bezier control points) the airfoil came from.

    Only the y-components are touched here (mirroring); evaluating the shape is the job of
    the shape-parametrization collaborator.
    """
    kind: str
    top_px: np.ndarray
    top_py: np.ndarray
    bot_px: np.ndarray = field(default_factory=lambda: np.zeros(0))
    bot_py: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def copy(self) -> "ShapeControl":
        return ShapeControl(self.kind, self.top_px.copy(), self.top_py.copy(),
                            self.bot_px.copy(), self.bot_py.copy())


class Airfoil:
    """
    2D airfoil geometry.

    Parameters
    ----------
    x, y : array-like
        Coordinates of an open loop, counter-clockwise, starting and ending at the TE.
    name : str
        Label written as the first line of a `.dat` file.
    symmetry : Symmetry
        `Symmetry.MIRROR` makes side splitting derive Bot from Top.
    shape_control : Optional[ShapeControl]
        Parametrized shape data to keep consistent with the coordinates.
    """

    def __init__(self, x, y, name: str = "", *,
                 symmetry: Symmetry = Symmetry.INDEPENDENT,
                 shape_control: Optional[ShapeControl] = None):
        self.name = name
        self.symmetry = Symmetry(symmetry)
        self.shape_control = shape_control
        self._x = np.zeros(0)
        self._y = np.zeros(0)
        self._spline: Optional[Spline2D] = None
        self.top: Optional[Side] = None
        self.bot: Optional[Side] = None
        self.set_coordinates(x, y)

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def load(cls, filename: str) -> "Airfoil":
        """
        Read an airfoil from a `.dat` file (see `read_dat` for the accepted format).

        The file basename becomes the name if the file has no label line.
        """
        name, x, y = read_dat(filename)
        if not name:
            name = os.path.splitext(os.path.basename(filename))[0]
        foil = cls(x, y, name)
        logger.info("[Airfoil] Loaded '%s' with %d points.", foil.name, foil.npoint)
        return foil

    def copy(self) -> "Airfoil":
        """Deep copy: coordinates, sides and shape control are never shared."""
        other = Airfoil(self._x, self._y, self.name, symmetry=self.symmetry,
                        shape_control=self.shape_control.copy() if self.shape_control else None)
        other._spline = self._spline          # immutable, safe to share
        other.top = self.top.copy() if self.top else None
        other.bot = self.bot.copy() if self.bot else None
        return other

    # --------------------
    # Coordinates
    # --------------------
    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def npoint(self) -> int:
        return int(self._x.shape[0])

    def set_coordinates(self, x, y) -> None:
        """
        Replace the coordinates; drops the spline and the sides.

        Raises
        ------
        GeometryError
            If the arrays are not 1D, of equal length >= 3, and finite.
        """
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        _assert_xy(x, y, check_finite=True)
        self._x = x
        self._y = y
        self.invalidate()

    def invalidate(self) -> None:
        """Forget derived data after an in-place edit of `x`/`y`."""
        self._spline = None
        self.top = None
        self.bot = None

    # --------------------
    # Derived geometry
    # --------------------
    @property
    def spline(self) -> Spline2D:
        """Spline through the current coordinates, fitted on first access."""
        if self._spline is None:
            self._spline = Spline2D(self._x, self._y)
        return self._spline

    @property
    def has_spline(self) -> bool:
        return self._spline is not None

    def rebuild_spline(self) -> Spline2D:
        """Fit a fresh spline on the current coordinates (keeps the sides)."""
        self._spline = Spline2D(self._x, self._y)
        return self._spline

    @property
    def symmetrical(self) -> bool:
        return self.symmetry is Symmetry.MIRROR

    def le_index(self) -> int:
        """Index of the sample LE (minimum x)."""
        return le_index(self._x, self._y)

    def te_gap(self) -> float:
        """Trailing-edge gap between first and last point."""
        return _te_gap(self._x, self._y)

    def name_flapped(self, angle: float) -> str:
        """
        Name of this airfoil with a flap deflected by `angle` degrees.

        Examples
        --------
        'MH32' → 'MH32_f+5', 'MH32_f-2.5'; 0° keeps the plain name.
        """
        if angle == 0:
            return self.name
        if int(angle) * 10 == int(angle * 10):
            text = "{:+d}".format(int(angle))
        else:
            text = "{:+.1f}".format(angle)
        return "{}_f{}".format(self.name, text)

    # --------------------
    # Output
    # --------------------
    def write(self, filename: str, name: Optional[str] = None) -> str:
        """Write a labeled `.dat` file; returns the path."""
        return write_dat(filename, self._x, self._y, name if name is not None else self.name)

    def plot(self, show: bool = True, save_path: Optional[str] = None, ax=None) -> None:
        """
        Plot the airfoil (lazy import to avoid hard matplotlib dependency).
        """
        from post.plot_geo import plot_airfoil
        plot_airfoil(self, show=show, save_path=save_path, ax=ax)
        if save_path:
            logger.info("[Airfoil] Plot saved to: %s", save_path)

    def __repr__(self) -> str:
        return "<Airfoil '{}' npoint={} symmetry={}>".format(self.name, self.npoint,
                                                            self.symmetry.value)
