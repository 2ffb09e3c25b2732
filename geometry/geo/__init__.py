# -*- coding: utf-8 -*-
# Foilprep/geometry/geo/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/18/2025 (Updated: 10/12/2025)

Geo Subpackage:
---------------
In-memory airfoil model and its file output.

Modules:
--------
- airfoil:    `Airfoil` (coordinates, lazy spline, sides, symmetry tag), `Side`,
              `Symmetry` and `ShapeControl`.

- dat_writer: Writes labeled `.dat` files in fixed 7-decimal format.
"""

__all__ = ["airfoil", "dat_writer"]
