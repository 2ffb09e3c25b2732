# -*- coding: utf-8 -*-
# Foilprep/post/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/18/2025 (Updated: 10/12/2025)

Modules:
--------
- plot_geo:    Common plotting routines for airfoil geometry.
               Wraps matplotlib for the airfoil loop, Top/Bot sides with LE/TE markers,
               and per-side curvature.
"""

__all__ = ["plot_geo"]
