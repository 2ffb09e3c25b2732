"""
Shared fixtures: synthetic NACA 4-digit airfoils in the loop order the package expects
(upper TE → LE → lower TE), plus posed (rotated, scaled, shifted) variants.
"""

import numpy as np
import pytest

from geometry.geo.airfoil import Airfoil


def naca4(code="0012", n_side=81, closed_te=True):
    """
    Coordinates of a NACA 4-digit airfoil, cosine-spaced, with 2 * n_side - 1 points.

    The LE sample is exactly (0, 0) and both TE samples have x = 1 exactly; a closed TE
    has y = 0 exactly.
    """
    m = int(code[0]) / 100.0
    p = int(code[1]) / 10.0
    t = int(code[2:]) / 100.0
    a4 = -0.1036 if closed_te else -0.1015

    xc = 0.5 * (1.0 - np.cos(np.linspace(0.0, np.pi, n_side)))
    xc[0], xc[-1] = 0.0, 1.0
    yt = 5.0 * t * (0.2969 * np.sqrt(xc) - 0.1260 * xc - 0.3516 * xc ** 2
                    + 0.2843 * xc ** 3 + a4 * xc ** 4)

    if m > 0.0:
        yc = np.where(xc < p, m / p ** 2 * (2 * p * xc - xc ** 2),
                      m / (1 - p) ** 2 * ((1 - 2 * p) + 2 * p * xc - xc ** 2))
        dyc = np.where(xc < p, 2 * m / p ** 2 * (p - xc), 2 * m / (1 - p) ** 2 * (p - xc))
        theta = np.arctan(dyc)
    else:
        yc = np.zeros_like(xc)
        theta = np.zeros_like(xc)

    xu = xc - yt * np.sin(theta)
    yu = yc + yt * np.cos(theta)
    xl = xc + yt * np.sin(theta)
    yl = yc - yt * np.cos(theta)

    x = np.concatenate((xu[::-1], xl[1:]))
    y = np.concatenate((yu[::-1], yl[1:]))
    # TE x exactly 1 on both sides, even with camber slope at the TE
    x[0], x[-1] = 1.0, 1.0
    if closed_te:
        y[0], y[-1] = 0.0, 0.0
    return x, y


def pose(x, y, angle_deg=0.0, scale=1.0, dx=0.0, dy=0.0):
    """Rotate (counter-clockwise, about the origin), scale and shift coordinates."""
    a = np.radians(angle_deg)
    xr = x * np.cos(a) - y * np.sin(a)
    yr = x * np.sin(a) + y * np.cos(a)
    return scale * xr + dx, scale * yr + dy


@pytest.fixture
def make_naca():
    return naca4


@pytest.fixture
def make_pose():
    return pose


@pytest.fixture
def naca0012():
    x, y = naca4("0012")
    return Airfoil(x, y, "NACA0012")


@pytest.fixture
def naca2412():
    x, y = naca4("2412")
    return Airfoil(x, y, "NACA2412")


@pytest.fixture
def naca0012_posed():
    """NACA 0012, nose down by 6 deg, chord 2.5, shifted: nothing is normalized."""
    x, y = pose(*naca4("0012", n_side=71), angle_deg=-6.0, scale=2.5, dx=0.3, dy=-0.2)
    return Airfoil(x, y, "NACA0012-posed")


@pytest.fixture
def naca2412_posed():
    x, y = pose(*naca4("2412", n_side=71), angle_deg=4.0, scale=0.8, dx=-0.1, dy=0.05)
    return Airfoil(x, y, "NACA2412-posed")


@pytest.fixture
def open_circle():
    """Unit circle from just above (1, 0) around to just below it; no sample at (-1, 0)."""
    theta = np.linspace(0.05, 2.0 * np.pi - 0.05, 60)
    return np.cos(theta), np.sin(theta)
