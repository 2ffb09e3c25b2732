"""
Test `.dat` reading and writing.
"""

import logging

import numpy as np
import pytest

from geometry.errors import AirfoilFormatError
from geometry.geo.airfoil import Airfoil
from geometry.geo.dat_writer import format_dat, write_dat
from geometry.loaders.dat_loader import is_dat_file, read_dat


def _write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n")
    return str(path)


class TestRoundTrip:
    """Write then read reproduces coordinates to 7 decimals."""

    def test_round_trip(self, tmp_path, naca2412):
        path = naca2412.write(str(tmp_path / "naca2412.dat"))
        name, x, y = read_dat(path)
        assert name == "NACA2412"
        np.testing.assert_allclose(x, naca2412.x, atol=5e-8, rtol=0.0)
        np.testing.assert_allclose(y, naca2412.y, atol=5e-8, rtol=0.0)

    def test_airfoil_load(self, tmp_path, naca0012):
        path = write_dat(str(tmp_path / "sub" / "foil.dat"), naca0012.x, naca0012.y, "my foil")
        foil = Airfoil.load(path)
        assert foil.name == "my foil"
        assert foil.npoint == naca0012.npoint

    def test_write_name_override(self, tmp_path, naca0012):
        path = naca0012.write(str(tmp_path / "a.dat"), name="renamed")
        assert read_dat(path)[0] == "renamed"


class TestReader:
    """Label detection, reordering and format errors."""

    def test_no_label_uses_file_name(self, tmp_path):
        path = _write_lines(tmp_path / "bare.dat",
                            ["1.0 0.001", "0.5 0.06", "0.0 0.0", "0.5 -0.04", "1.0 -0.001"])
        name, x, y = read_dat(path)
        assert name == ""
        assert x.size == 5
        assert Airfoil.load(path).name == "bare"

    def test_flip_to_ccw(self, tmp_path, make_naca, caplog):
        x, y = make_naca("2412", closed_te=False)
        path = write_dat(str(tmp_path / "cw.dat"), x[::-1], y[::-1], "cw")
        with caplog.at_level(logging.WARNING, logger="geometry.loaders.dat_loader"):
            _, xr, yr = read_dat(path)
        assert "counter-clockwise" in caplog.text
        assert yr[0] > yr[-1]
        np.testing.assert_allclose(xr, x, atol=5e-8)

    def test_negative_zero_removed(self, tmp_path):
        path = _write_lines(tmp_path / "z.dat",
                            ["z", "1.0 0.0", "0.5 0.05", "-0.0 -0.0", "0.5 -0.05", "1.0 -0.0"])
        _, x, y = read_dat(path)
        assert not np.signbit(x).any()
        assert not np.signbit(y[2])

    def test_missing_file(self, tmp_path):
        with pytest.raises(AirfoilFormatError) as exc:
            read_dat(str(tmp_path / "nope.dat"))
        assert "nope.dat" in str(exc.value)

    def test_malformed_line(self, tmp_path):
        path = _write_lines(tmp_path / "bad.dat",
                            ["bad", "1.0 0.0", "0.5 0.05", "0.0", "0.5 -0.05", "1.0 0.0"])
        with pytest.raises(AirfoilFormatError) as exc:
            read_dat(path)
        assert exc.value.context["line"] == 4

    def test_blank_line_inside(self, tmp_path):
        path = _write_lines(tmp_path / "blank.dat",
                            ["blank", "1.0 0.0", "0.5 0.05", "", "0.0 0.0", "1.0 0.0"])
        with pytest.raises(AirfoilFormatError):
            read_dat(path)

    def test_too_few_points(self, tmp_path):
        path = _write_lines(tmp_path / "few.dat", ["few", "1.0 0.0", "0.0 0.0"])
        with pytest.raises(AirfoilFormatError):
            read_dat(path)

    def test_more_than_one_reversal(self, tmp_path):
        path = _write_lines(tmp_path / "zig.dat",
                            ["zig", "1.0 0.0", "0.5 0.1", "0.0 0.0",
                             "0.5 -0.1", "0.2 -0.1", "1.0 0.0"])
        with pytest.raises(AirfoilFormatError) as exc:
            read_dat(path)
        assert exc.value.context["reversals"] == 3

    def test_no_reversal(self, tmp_path):
        path = _write_lines(tmp_path / "line.dat", ["0.0 0.0", "0.5 0.1", "1.0 0.2"])
        with pytest.raises(AirfoilFormatError):
            read_dat(path)

    def test_is_dat_file(self):
        assert is_dat_file("a.dat")
        assert is_dat_file("A.DAT")
        assert not is_dat_file("a.txt")


class TestWriter:
    """Fixed-width output."""

    def test_format(self):
        text = format_dat(np.array([1.0, 0.0, 1.0]), np.array([0.0, 0.0, -0.0012345678]), "f")
        lines = text.splitlines()
        assert lines[0] == "f"
        assert lines[1] == "   1.0000000   0.0000000"
        assert lines[3] == "   1.0000000  -0.0012346"
