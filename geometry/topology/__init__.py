# -*- coding: utf-8 -*-
# Foilprep/geometry/topology/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 8/29/2025 (Updated: 10/12/2025)

Topology Subfolder:
-------------------
Connectivity-level operations on open airfoil loops: direction reversals and ordering,
leading-edge indexing, and Top/Bot side partitioning.

Modules:
--------
- loop:        Reversal count (single-loop check), CCW canonicalization, TE gap.

- indices:     Deterministic minimum-x index with explicit tie-breaking, closest sample
               to an arbitrary point.

- split:       Split into Top/Bot sides with curvature, rebuild a loop from two sides,
               and force mirror symmetry.

- _validation: Shared validation utilities (array structure, finite values, LE at origin).
"""

__all__ = ["indices", "loop", "split"]
