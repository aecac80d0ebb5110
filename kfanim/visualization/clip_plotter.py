"""
Clip Curve Plotting Module
==========================

Plots the sampled output of every channel of a clip, one subplot per
channel and one line per component, so keyframe data can be checked by eye
(overshooting splines, flipped quaternions, step timing).

Functions:
    create_clip_plot: Sample a clip and save (or return) a curve figure
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from kfanim.animation import Clip
from kfanim.io.data_writer import bake_clip
from .plot_styling import COMPONENT_COLORS, PATH_YLABELS, PLOT_DPI, SUBPLOT_SIZE

logger = logging.getLogger(__name__)


def _get_timestamp_prefix() -> str:
    """Get current time as HHMM string for filename prefix."""
    return datetime.now().strftime("%H%M")


def create_clip_plot(
    clip: Clip,
    num_points: int = 200,
    output_dir: Optional[Path] = None,
    show: bool = False
) -> Optional[Path]:
    """
    Sample a clip across its bounds and plot every channel.

    Args:
        clip: Clip to plot
        num_points: Number of evenly spaced sample times over [start, end]
        output_dir: Directory for the PNG; nothing is saved if None
        show: Display the figure interactively

    Returns:
        Path to the saved PNG, or None if output_dir is None

    Raises:
        ValueError: If the clip has no channels or no time range
        RuntimeError: If plot generation fails
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    if not clip.channels:
        raise ValueError(f"Clip '{clip.name}' has no channels to plot")
    start, end = clip.bounds()
    if not (np.isfinite(start) and np.isfinite(end)):
        raise ValueError(f"Clip '{clip.name}' has no keyframe time range")

    logger.info(f"Creating curve plot for clip '{clip.name}'...")

    sample_times = np.linspace(start, end, num_points)
    columns, data = bake_clip(clip, sample_times)

    fig = None
    try:
        num_channels = len(clip.channels)
        fig, axes = plt.subplots(num_channels, 1, sharex=True,
                                 figsize=(SUBPLOT_SIZE[0], SUBPLOT_SIZE[1] * num_channels),
                                 squeeze=False)
        fig.suptitle(f"Clip '{clip.name}'", fontsize=16, fontweight='bold')

        column = 1
        for ax, channel in zip(axes[:, 0], clip.channels):
            node_name = clip.nodes.label(channel.node)
            for _ in range(channel.path.stride):
                component = columns[column].rsplit('.', 1)[-1]
                ax.plot(sample_times, data[:, column], color=COMPONENT_COLORS[component], label=component)
                column += 1

            # Keyframe markers
            for keyframe_time in clip.tracks[channel.track_index].times:
                ax.axvline(keyframe_time, color='k', alpha=0.15, linewidth=0.8)

            ax.set_title(f"{node_name} ({clip.tracks[channel.track_index].mode.value})", fontsize=11)
            ax.set_ylabel(PATH_YLABELS[channel.path.value], fontsize=10)
            ax.grid(True, alpha=0.3)
            ax.legend(loc='upper right', fontsize=8)

        axes[-1, 0].set_xlabel('Time (s)', fontsize=12)

        png_path = None
        if output_dir is not None:
            output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            png_path = output_dir / f"{_get_timestamp_prefix()}_{clip.name}_curves.png"
            fig.savefig(png_path, dpi=PLOT_DPI, bbox_inches='tight')
            logger.info(f"Plot saved: {png_path}")

        if show:
            plt.show()

        return png_path

    except Exception as e:
        logger.error(f"Plot generation failed: {e}")
        raise RuntimeError(f"Plot generation failed: {e}") from e

    finally:
        # Always close figure to prevent memory leaks
        if fig is not None:
            plt.close(fig)
