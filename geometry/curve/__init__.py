# -*- coding: utf-8 -*-
# Foilprep/geometry/curve/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 9/14/2025

Curve Subpackage:
-----------------
Smooth parametric curve through an airfoil's ordered coordinates.

Modules:
--------
- spline: `Spline2D`, cubic x(s), y(s) over the arc length of the fitted curve, with
          position, 1st/2nd derivative and signed curvature queries.
"""

from .spline import Spline2D

__all__ = ["Spline2D", "spline"]
