"""
Test normalization: frame, per-side TE scaling, idempotence and the predicates.
"""

import math

import numpy as np

from geometry.config import PanelOptions
from geometry.geo.airfoil import Airfoil
from geometry.ops.leading_edge import le_find
from geometry.ops.normalize import is_normalized, is_normalized_coord, normalize
from geometry.ops.repanel import repanel_and_normalize


class TestNormalize:
    """In-place transform to LE (0, 0) / TE x = 1."""

    def test_posed_airfoil(self, naca0012_posed):
        foil = naca0012_posed.copy()
        out = normalize(foil)
        assert out is foil
        assert foil.x[0] == 1.0 and foil.x[-1] == 1.0
        assert foil.y[0] == 0.0 and foil.y[-1] == 0.0
        _, x_le, y_le, _ = le_find(foil.spline, foil.x, foil.y)
        assert math.hypot(x_le, y_le) < 1e-9

    def test_chord_is_unit(self, naca0012_posed):
        foil = normalize(naca0012_posed.copy())
        assert foil.x.min() > -1e-9
        assert foil.x.max() <= 1.0 + 1e-12

    def test_idempotent(self, naca0012_posed, naca2412_posed):
        for raw in (naca0012_posed, naca2412_posed):
            once = normalize(raw.copy())
            twice = normalize(once.copy())
            np.testing.assert_allclose(twice.x, once.x, atol=1e-9, rtol=0.0)
            np.testing.assert_allclose(twice.y, once.y, atol=1e-9, rtol=0.0)

    def test_different_te_x_per_side(self, make_naca):
        x, y = make_naca("0012")
        n_side = (x.size + 1) // 2
        # lower side 3 % shorter: TE x differ before scaling
        x[n_side:] *= 0.97
        y[n_side:] *= 0.97
        foil = normalize(Airfoil(x, y, "short-lower"))
        assert foil.x[0] == 1.0 and foil.x[-1] == 1.0

    def test_input_mutated_and_sides_dropped(self, naca0012):
        from geometry.topology.split import split_into_sides
        foil = split_into_sides(naca0012.copy())
        assert foil.top is not None
        normalize(foil)
        assert foil.top is None and foil.bot is None
        assert foil.has_spline


class TestPredicates:
    """is_normalized_coord / is_normalized."""

    def test_raw_is_not_normalized(self, naca0012_posed):
        assert not is_normalized_coord(naca0012_posed)
        assert not is_normalized(naca0012_posed, 140)

    def test_generated_naca_is_normalized(self, naca0012):
        assert is_normalized_coord(naca0012)
        assert is_normalized(naca0012, naca0012.npoint - 1)
        assert is_normalized(naca0012, naca0012.npoint)

    def test_point_count_checked(self, naca0012):
        assert not is_normalized(naca0012, 60)

    def test_after_repanel_and_normalize(self, naca0012_posed):
        foil = repanel_and_normalize(naca0012_posed, PanelOptions(npoint=101))
        assert is_normalized_coord(foil)
        assert is_normalized(foil, 100)

    def test_asymmetric_te_gap_not_normalized(self, naca0012):
        x, y = naca0012.x.copy(), naca0012.y.copy()
        y[0] = 0.002
        foil = Airfoil(x, y)
        assert not is_normalized_coord(foil)
