"""
kfanim Visualization Module
===========================

Curve plots of sampled clip channels for checking keyframe data.

Modules:
- clip_plotter: Per-channel curve plots
- plot_styling: Shared constants and backend configuration
"""

from .clip_plotter import create_clip_plot
from .plot_styling import setup_matplotlib_backend, PLOT_DPI, SUBPLOT_SIZE

__all__ = [
    'create_clip_plot',
    'setup_matplotlib_backend',
    'PLOT_DPI',
    'SUBPLOT_SIZE',
]
