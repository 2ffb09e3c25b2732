# -*- coding: utf-8 -*-
# Foilprep/geometry/loaders/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 6/14/2025 (Updated: 10/11/2025)

Loaders Subpackage:
-------------------
File format-specific loaders for importing airfoil geometry data.

Modules:
--------
- dat_loader:  Parser for labeled or unlabeled `.dat` airfoil files (two columns, one
               x reversal, CCW reordering).

Assumptions & Notes:
--------------------
- Units: native file units preserved; no automatic rescaling
- Normalization is a separate step (`geometry.ops.normalize`)
"""

__all__ = ["dat_loader"]
