"""
Test the coordinate summary.
"""

import json
import logging

from geometry.config import PanelOptions
from geometry.metrics import dumps_summary_json
from geometry.metrics.summary import coordinate_data, format_coordinate_table, log_coordinate_data
from geometry.ops.repanel import repanel_and_normalize


class TestCoordinateData:
    """Per-airfoil LE/TE data."""

    def test_normalized_naca(self, naca0012):
        d = coordinate_data(naca0012)
        assert d["name"] == "NACA0012"
        assert d["npoint"] == naca0012.npoint
        assert d["ile"] == (naca0012.npoint - 1) // 2
        assert d["x_le"] == 0.0 and d["y_le"] == 0.0
        assert d["spl_x_le"] == 0.0 and d["spl_y_le"] == 0.0
        assert d["top_x_te"] == 1.0 and d["bot_x_te"] == 1.0
        assert d["te_gap"] == 0.0

    def test_posed_naca(self, naca0012_posed):
        d = coordinate_data(naca0012_posed)
        assert d["spl_x_le"] != 0.0
        assert d["top_x_te"] == naca0012_posed.x[0]


class TestTable:
    """Fixed-width table and logging."""

    def test_rows(self, naca0012, naca0012_posed):
        table = format_coordinate_table(naca0012, naca0012_posed, indent=2)
        lines = table.splitlines()
        assert len(lines) == 3
        assert "spl xLE" in lines[0]
        assert lines[1].startswith("  NACA0012")
        assert " 0.0000000" in lines[1]

    def test_long_name_truncated(self, naca0012):
        foil = naca0012.copy()
        foil.name = "A" * 40
        row = format_coordinate_table(foil).splitlines()[1]
        assert "A" * 15 in row and "A" * 16 not in row

    def test_logged(self, naca0012_posed, caplog):
        foil = repanel_and_normalize(naca0012_posed, PanelOptions(npoint=61))
        with caplog.at_level(logging.INFO, logger="geometry.metrics.summary"):
            table = log_coordinate_data(naca0012_posed, foil)
        assert "Coordinate data" in caplog.text
        assert len(table.splitlines()) == 3

    def test_json(self, naca0012):
        data = json.loads(dumps_summary_json(naca0012))
        assert data[0]["npoint"] == naca0012.npoint
