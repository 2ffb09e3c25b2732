# -*- coding: utf-8 -*-
# Foilprep/geometry/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/18/2025 (Updated: 10/12/2025)

Modules:
--------
- curve:    Arc-length cubic spline (`Spline2D`): position, derivatives, curvature.

- loaders:  `.dat` reader (label line, two columns, single-loop check, CCW ordering).

- geo:      In-memory `Airfoil` with Top/Bot `Side`s, `Symmetry` tag and optional
            `ShapeControl`; `.dat` writer.

- topology: Connectivity-level operations on open airfoil loops:
              * Reversal count, CCW canonicalization, TE gap,
              * Deterministic LE index and closest-sample lookup,
              * Top/Bot splitting, rebuilding from sides, mirror symmetry.

- ops:      Numerical operations on top of the spline:
              * Leading-edge Newton search (`RootResult`),
              * Panel distribution with LE/TE bunching,
              * Normalization and the normalize/repanel loop.

- metrics:  LE/TE coordinate summary of one or more airfoils.

- config:   Panelling defaults, tolerances, option aliases and `PanelOptions`.

- errors:   Typed exceptions (`GeometryError` and subclasses).

- api:       Minimal public facade for common tasks used in main scripts.
              * load_airfoil(filename) → Airfoil
              * prepare_airfoil(foil, params=None, symmetrical=False) → normalized copy
              * write_airfoil(foil, filename, name=None) → path

            Usage:
                from geometry.api import load_airfoil, prepare_airfoil, write_airfoil
"""

__all__ = ["curve", "geo", "loaders", "metrics", "ops", "topology", "config", "errors", "api"]
