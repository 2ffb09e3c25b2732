# -*- coding: utf-8 -*-
# Foilprep/geometry/metrics/__init__.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 8/21/2025 (Updated: 10/12/2025)

Modules:
--------
- summary: Leading/trailing-edge data of airfoils (sample LE, spline LE, TE points,
           TE gap) as dicts, a fixed-width table, or a log record.

Exports:
--------
- coordinate_data
- format_coordinate_table
- log_coordinate_data
- dumps_summary_json
"""

from __future__ import division
import json

from .summary import coordinate_data, format_coordinate_table, log_coordinate_data

__all__ = [
    "coordinate_data",
    "format_coordinate_table",
    "log_coordinate_data",
    "dumps_summary_json",
]


def dumps_summary_json(*foils):
    """Serialize the coordinate data of `foils` to a compact JSON list."""
    return json.dumps([coordinate_data(f) for f in foils], separators=(",", ":"),
                      ensure_ascii=False)
