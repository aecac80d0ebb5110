#!/usr/bin/env python3
"""
kfanim Example 2: Baking and Plotting a Clip
============================================

Samples every channel of the 'bounce' clip on a regular grid, writes the
samples to CSV and saves a curve plot next to it.

Run from project root:
    python examples/02_bake_and_plot.py [num_points]

Expected output:
    - CSV and PNG saved to data/results/bouncing_cube_results/
"""

import sys
import logging
from pathlib import Path

# =============================================================================
# SETUP PROJECT ROOT
# =============================================================================
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from kfanim.visualization.plot_styling import setup_matplotlib_backend

setup_matplotlib_backend(headless=True)

from kfanim.config.anim_config_manager import AnimationConfigManager
from kfanim.io.clip_loader import load_clips
from kfanim.io.data_writer import save_baked_clip
from kfanim.visualization.clip_plotter import create_clip_plot


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    num_points = int(sys.argv[1]) if len(sys.argv) > 1 else 120

    config_manager = AnimationConfigManager(PROJECT_ROOT)
    config = config_manager.load_config("bouncing_cube/bouncing_cube_config.yaml")
    _, _, clips = load_clips(config)
    clip = clips["bounce"]

    output_dir = config_manager.get_output_directory(config)
    sample_times = np.linspace(clip.start, clip.end, num_points)

    csv_path = save_baked_clip(output_dir, clip, sample_times)
    png_path = create_clip_plot(clip, num_points=num_points, output_dir=output_dir)

    print(f"CSV saved to: {csv_path}")
    print(f"Plot saved to: {png_path}")


if __name__ == "__main__":
    main()
