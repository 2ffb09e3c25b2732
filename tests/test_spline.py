"""
Test the arc-length spline: interpolation, arc length, derivatives, curvature.
"""

import numpy as np
import pytest

from geometry.curve.spline import Spline2D
from geometry.errors import GeometryError


class TestSpline2D:
    """Spline2D on a circle arc and on invalid input."""

    def test_interpolates_points(self, open_circle):
        x, y = open_circle
        spl = Spline2D(x, y)
        xs, ys = spl.eval(spl.s)
        np.testing.assert_allclose(xs, x, atol=1e-12)
        np.testing.assert_allclose(ys, y, atol=1e-12)

    def test_parameter_is_arc_length(self, open_circle):
        x, y = open_circle
        spl = Spline2D(x, y)
        expected = 2.0 * np.pi - 0.1
        assert spl.s_min == 0.0
        assert abs(spl.length - expected) < 1e-5
        assert np.all(np.diff(spl.s) > 0.0)

    def test_unit_speed(self, open_circle):
        spl = Spline2D(*open_circle)
        s = np.linspace(spl.s_min, spl.s_max, 200)
        dx, dy = spl.eval(s, 1)
        np.testing.assert_allclose(np.hypot(dx, dy), 1.0, atol=1e-3)

    def test_curvature_of_circle(self, open_circle):
        spl = Spline2D(*open_circle)
        s = np.linspace(0.2 * spl.length, 0.8 * spl.length, 50)
        # counter-clockwise unit circle: curvature +1
        np.testing.assert_allclose(spl.curvature(s), 1.0, atol=1e-3)

    def test_scalar_eval_returns_floats(self, open_circle):
        spl = Spline2D(*open_circle)
        px, py = spl.eval(0.5 * spl.length)
        assert isinstance(px, float) and isinstance(py, float)
        assert isinstance(spl.curvature(1.0), float)

    def test_bad_derivative_order(self, open_circle):
        spl = Spline2D(*open_circle)
        with pytest.raises(ValueError):
            spl.eval(1.0, der=3)

    def test_s_is_a_copy(self, open_circle):
        spl = Spline2D(*open_circle)
        s = spl.s
        s[:] = 0.0
        assert spl.s[-1] > 0.0

    def test_duplicate_points_rejected(self):
        x = np.array([1.0, 0.5, 0.5, 0.0, 0.5, 1.0])
        y = np.array([0.0, 0.1, 0.1, 0.0, -0.1, 0.0])
        with pytest.raises(GeometryError) as exc:
            Spline2D(x, y)
        assert "duplicate" in str(exc.value)

    def test_too_few_points(self):
        with pytest.raises(GeometryError):
            Spline2D([0.0, 1.0], [0.0, 1.0])
