# -*- coding: utf-8 -*-
# Foilprep/geometry/topology/_validation.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 11/10/2025

Purpose:
--------
Centralized validation utilities for topology operations so that every module checks
coordinate arrays and the leading-edge precondition the same way.

Main Tasks:
   1. Validate paired x/y coordinate arrays (1D, equal length, finite, enough points).
   2. Require the leading-edge sample at exactly (0, 0) where an operation depends on a
      normalized airfoil.
"""

from typing import Optional
import numpy as np
from ..errors import GeometryError, PreconditionError


def _assert_xy(x: Optional[np.ndarray], y: Optional[np.ndarray],
               check_finite: bool = False, min_points: int = 3) -> None:
    """
    Validate that x and y are 1D arrays of equal length with at least `min_points`.

    Raises
    ------
    GeometryError
        If the arrays fail validation checks.
    """
    if x is None or y is None:
        raise GeometryError("No coordinates provided (x or y is None).")
    if x.ndim != 1 or y.ndim != 1 or x.shape != y.shape:
        raise GeometryError("Expected two 1D arrays of equal length.",
                            {"x_shape": x.shape, "y_shape": y.shape})
    if x.size < min_points:
        raise GeometryError("Too few points.", {"npoint": int(x.size), "min_points": min_points})
    if check_finite and not (np.isfinite(x).all() and np.isfinite(y).all()):
        bad = np.where(~(np.isfinite(x) & np.isfinite(y)))[0]
        raise GeometryError("Non-finite coordinates detected.", {"indices": bad.tolist()})


def _require_le_at_origin(x: np.ndarray, y: np.ndarray, ile: int, *, where: str,
                          name: str = "") -> int:
    """
    Require the leading-edge sample `ile` to be exactly (0, 0) and return it.

    Raises
    ------
    PreconditionError
        If the sample is not exactly at the origin.
    """
    ile = int(ile)
    if x[ile] != 0.0 or y[ile] != 0.0:
        raise PreconditionError(
            "{}: leading edge isn't at 0,0".format(where),
            {"airfoil": name, "ile": ile, "x_le": float(x[ile]), "y_le": float(y[ile])},
        )
    return ile
