# -*- coding: utf-8 -*-
# Foilprep/main.py

"""
End-to-end driver:
  1) Load a raw airfoil (.dat)
  2) Normalize + repanel (LE at 0,0, TE at 1, bunched panels) and split into sides
  3) Coordinate summary (raw vs. prepared)
  4) Write the prepared .dat
  5) Quick plots (airfoil, sides, curvature)

Usage:
    python main.py [input.dat] [output.dat]
"""

import os
import sys
import logging

from geometry.api import load_airfoil, prepare_airfoil, write_airfoil
from geometry.errors import GeometryError
from geometry.metrics.summary import log_coordinate_data
from post.plot_geo import plot_airfoil, plot_sides, plot_curvature


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Foilprep")

    in_path = sys.argv[1] if len(sys.argv) > 1 else "naca0012.dat"
    out_path = sys.argv[2] if len(sys.argv) > 2 else os.path.join("out", "airfoil-norm.dat")

    # Ensure output folders exist
    os.makedirs("plots", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Load
    # ------------------------------------------------------------------
    try:
        raw = load_airfoil(in_path)
    except GeometryError as e:
        log.error("Cannot load airfoil: %s", e)
        sys.exit(1)

    # ------------------------------------------------------------------
    # 2) Normalize + repanel
    #    npoint: points of the loop (panels + 1); bunching factors in [0, 1]
    # ------------------------------------------------------------------
    panelling = {
        "npoint": 161,
        "le_bunch": 0.86,
        "te_bunch": 0.6,
    }
    try:
        foil = prepare_airfoil(raw, panelling, symmetrical=False)
    except GeometryError as e:
        # Hard stop: precondition violations are not recoverable here
        log.error("Airfoil preparation failed: %s", e)
        sys.exit(1)

    # ------------------------------------------------------------------
    # 3) Summary
    # ------------------------------------------------------------------
    log_coordinate_data(raw, foil)

    # ------------------------------------------------------------------
    # 4) Write
    # ------------------------------------------------------------------
    written = write_airfoil(foil, out_path)
    log.info("Artifacts written: %s", written)

    # ------------------------------------------------------------------
    # 5) Quick plots (optional)
    # ------------------------------------------------------------------
    plot_airfoil(foil, markers=True, show=True, save_path=os.path.join("plots", "airfoil.png"))
    if foil.top is not None:
        plot_sides(foil, show=False, save_path=os.path.join("plots", "sides.png"))
        plot_curvature(foil, show=False, save_path=os.path.join("plots", "curvature.png"))
    else:
        log.warning("Skipping side plots: airfoil was not split into sides.")
