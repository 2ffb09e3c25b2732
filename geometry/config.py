# -*- coding: utf-8 -*-
# Foilprep/geometry/config.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 10/5/2025 (Updated: 10/12/2025)

Purpose
-------
Single source of truth for panelling defaults and numerical tolerances. User-friendly keys
are canonicalized through `ALIASES`, merged over sectioned defaults, and validated into an
immutable `PanelOptions` that the repaneling pipeline consumes.

Main Tasks
----------
    1. Flatten sectioned defaults (PANELLING, TOLERANCES) into module constants.
    2. Canonicalize user params via `normalize_keys`.
    3. Validate and freeze panelling options in `PanelOptions`.
    4. Expose `build_panel_options` as the one entrypoint for callers.

Notes
-----
- Tolerances are read once at import; no routine mutates them at run time, so concurrent
  calls on independent airfoils never share mutable state.
"""

from __future__ import absolute_import
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from .errors import ConfigError

__all__ = [
    "PanelOptions",
    "build_panel_options",
    "normalize_keys",
    "ALIASES",
    "EPSILON",
    "EPSILON_LE",
    "EPSILON_TE",
    "NEWTON_TOL",
    "NEWTON_MAX_ITER",
    "NORMALIZE_MAX_ITER",
]


# -----------------------------
_DEFAULTS_SECTIONS = [
    ("PANELLING", {
        "npoint": 161,
        "le_bunch": 0.86,
        "te_bunch": 0.6,
    }),
    ("TOLERANCES", {
        "EPSILON": 1e-10,           # |y| of a normalized TE treated as zero
        "EPSILON_LE": 1e-10,        # distance of the spline LE to (0, 0)
        "EPSILON_TE": 1e-8,         # TE drift snapped after repaneling
        "NEWTON_TOL": 1e-10,        # |f(s)| for the LE root
        "NEWTON_MAX_ITER": 50,
        "NORMALIZE_MAX_ITER": 20,
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


_DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)

EPSILON = float(_DEFAULTS["EPSILON"])
EPSILON_LE = float(_DEFAULTS["EPSILON_LE"])
EPSILON_TE = float(_DEFAULTS["EPSILON_TE"])
NEWTON_TOL = float(_DEFAULTS["NEWTON_TOL"])
NEWTON_MAX_ITER = int(_DEFAULTS["NEWTON_MAX_ITER"])
NORMALIZE_MAX_ITER = int(_DEFAULTS["NORMALIZE_MAX_ITER"])

# --------------------------
# Canonicalization (aliases)
# --------------------------
ALIASES = {
    "n_points": "npoint",
    "npoints": "npoint",
    "nPoints": "npoint",
    "n_point": "npoint",
    "le": "le_bunch",
    "te": "te_bunch",
    "leBunch": "le_bunch",
    "teBunch": "te_bunch",
}

_PANEL_KEYS = ("npoint", "le_bunch", "te_bunch")


def normalize_keys(params):
    # type: (Optional[Mapping[str, Any]]) -> Dict[str, Any]
    """
    Return a new dict with aliased keys mapped to canonical names.

    Raises
    ------
    ConfigError
        If two keys collapse onto the same canonical name, or a key is unknown.
    """
    out = {}  # type: Dict[str, Any]
    for key, value in dict(params or {}).items():
        canon = ALIASES.get(key, key)
        if canon not in _PANEL_KEYS:
            raise ConfigError("Unknown panelling option.", {"key": key})
        if canon in out:
            raise ConfigError("Duplicate panelling option after alias resolution.",
                              {"key": key, "canonical": canon})
        out[canon] = value
    return out


@dataclass(frozen=True)
class PanelOptions:
    """
    Target point distribution of a repaneled airfoil.

    Attributes
    ----------
    npoint : int
        Number of coordinate points (panels + 1), at least 3.
    le_bunch : float
        Panel bunching at the leading edge, 0 (none) .. 1 (full cosine).
    te_bunch : float
        Panel bunching at the trailing edge, 0 (none) .. 1 (smallest last panel).
    """
    npoint: int = int(_DEFAULTS["npoint"])
    le_bunch: float = float(_DEFAULTS["le_bunch"])
    te_bunch: float = float(_DEFAULTS["te_bunch"])

    def __post_init__(self):
        if isinstance(self.npoint, bool) or int(self.npoint) != self.npoint:
            raise ConfigError("npoint must be an integer.", {"npoint": self.npoint})
        if self.npoint < 3:
            raise ConfigError("npoint must be at least 3.", {"npoint": self.npoint})
        for key in ("le_bunch", "te_bunch"):
            val = getattr(self, key)
            if not (0.0 <= float(val) <= 1.0):
                raise ConfigError("Bunching factor out of range [0, 1].", {key: val})
        object.__setattr__(self, "npoint", int(self.npoint))
        object.__setattr__(self, "le_bunch", float(self.le_bunch))
        object.__setattr__(self, "te_bunch", float(self.te_bunch))

    @property
    def npanels(self) -> int:
        return self.npoint - 1


def build_panel_options(params=None):
    # type: (Optional[Mapping[str, Any]]) -> PanelOptions
    """
    Merge user params over the PANELLING defaults and return validated `PanelOptions`.

    Examples
    --------
    >>> build_panel_options({"n_points": 101, "te": 0.3}).npoint
    101
    """
    merged = {k: _DEFAULTS[k] for k in _PANEL_KEYS}
    merged.update(normalize_keys(params))
    try:
        npoint = merged["npoint"]
        if isinstance(npoint, str):
            npoint = int(npoint)
        return PanelOptions(
            npoint=npoint,
            le_bunch=float(merged["le_bunch"]),
            te_bunch=float(merged["te_bunch"]),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError("Non-numeric panelling option.", {"params": merged, "error": str(e)})
