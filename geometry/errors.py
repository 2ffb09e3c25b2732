# -*- coding: utf-8 -*-
# Foilprep/geometry/errors.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 10/4/2025

Purpose
-------
Typed exceptions for the geometry layer with compact, context-aware messages so that a
hard stop always tells the caller which check failed and on which airfoil or file.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: AirfoilFormatError, PreconditionError, ConfigError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Only fatal conditions raise. Degraded numerical outcomes (Newton or normalization loop
  not converging) are logged as warnings by the ops layer and never surface here.
"""

from __future__ import absolute_import

__all__ = [
    "GeometryError",
    "AirfoilFormatError",
    "PreconditionError",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for all geometry errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"airfoil": "naca0012", "x_le": 0.01}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(GeometryError, self).__init__(message)

    def __str__(self):
        base = super(GeometryError, self).__str__()
        return base + _format_context(self.context)


class AirfoilFormatError(GeometryError):
    """
    Unusable coordinate input:
      - file cannot be opened
      - malformed coordinate line (not two numbers)
      - fewer than 3 points
      - x does not reverse direction exactly once (not a single loop)
    """


class PreconditionError(GeometryError):
    """
    An operation was called on geometry that does not satisfy its contract,
    e.g. splitting or mirroring an airfoil whose leading edge is not at exactly (0, 0).
    """


class ConfigError(GeometryError):
    """
    Invalid panelling options or tolerances:
      - non-integer or too small point count
      - bunching factor outside [0, 1]
      - unknown option keys
    """
