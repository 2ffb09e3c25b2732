# -*- coding: utf-8 -*-
# Foilprep/post/plot_geo.py

"""
Project: Foilprep
Author: Erfan Vaezi
Date: 7/14/2025 (Updated: 10/12/2025)

Purpose:
--------
Plotting utilities for airfoil geometry using matplotlib: the loop itself (optionally with
its samples), a QA helper `plot_sides(...)` that colors Top/Bot and marks LE/TE, and the
per-side curvature along x that shows how smooth the repaneled spline is.
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes


def _finish(ax: Axes, created_fig: bool, show: bool, save_path: Optional[str]) -> None:
    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def plot_airfoil(foil,
                 *,
                 markers: bool = False,
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None) -> None:
    """
        Plot an airfoil loop.

        Parameters
        ----------
        foil : Airfoil
            Geometry to draw (`x`, `y`, `name`).
        markers : bool
            If True, also draw the individual sample points.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.
        """
    x, y = np.asarray(foil.x), np.asarray(foil.y)
    if x.ndim != 1 or x.shape != y.shape:
        raise ValueError("Expected two 1D arrays of equal length for the airfoil.")
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True
    ax.plot(x, y, lw=1.5, marker="." if markers else None, ms=3)
    ax.set_aspect('equal', adjustable='box')
    ax.set_title("Airfoil: {} ({} points)".format(foil.name, x.size))
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    _finish(ax, created_fig, show, save_path)


def plot_sides(foil,
               *,
               show: bool = True,
               save_path: Optional[str] = None,
               ax: Optional[Axes] = None) -> None:
    """
       QA helper: visualize Top/Bot segmentation and mark LE/TE.

       Parameters
       ----------
       foil : Airfoil
           Airfoil with `top` and `bot` sides (see `geometry.topology.split`).
       show, save_path, ax
           Same semantics as `plot_airfoil`.
       """
    if foil.top is None or foil.bot is None:
        raise ValueError("Airfoil has no Top/Bot sides; split it first.")
    top, bot = foil.top, foil.bot

    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True

    ax.plot(top.x, top.y, 'r-', lw=1.8, label='Top')
    ax.plot(bot.x, bot.y, 'b-', lw=1.8, label='Bot')

    # Mark LE/TE
    ax.plot(top.x[0], top.y[0], 'go', ms=6, label='LE')
    ax.plot([top.x[-1], bot.x[-1]], [top.y[-1], bot.y[-1]], 'mo', ms=6, label='TE')

    ax.set_aspect('equal', adjustable='box')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title('Top/Bot sides + LE/TE markers')
    ax.grid(True)
    ax.legend()
    _finish(ax, created_fig, show, save_path)


def plot_curvature(foil,
                   *,
                   log_scale: bool = True,
                   show: bool = True,
                   save_path: Optional[str] = None,
                   ax: Optional[Axes] = None) -> None:
    """
       Curvature of Top and Bot along x.

       Parameters
       ----------
       foil : Airfoil
           Airfoil with `top` and `bot` sides.
       log_scale : bool
           Symmetric-log y-axis; the LE peak is orders of magnitude above the rest.
       show, save_path, ax
           Same semantics as `plot_airfoil`.
       """
    if foil.top is None or foil.bot is None:
        raise ValueError("Airfoil has no Top/Bot sides; split it first.")

    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 4))
        ax = plt.gca()
        created_fig = True

    ax.plot(foil.top.x, foil.top.curvature, 'r-', lw=1.2, label='Top')
    ax.plot(foil.bot.x, foil.bot.curvature, 'b-', lw=1.2, label='Bot')
    if log_scale:
        ax.set_yscale('symlog', linthresh=1.0)
    ax.set_xlabel('x')
    ax.set_ylabel('curvature')
    ax.set_title('Curvature: {}'.format(foil.name))
    ax.grid(True)
    ax.legend()
    _finish(ax, created_fig, show, save_path)
