"""
Plot Styling and Configuration Module
====================================

Provides shared styling constants and matplotlib backend configuration
for consistent visualization of animation curves.

Constants:
    PLOT_DPI: High DPI for saved plots
    SUBPLOT_SIZE: Width/height of one channel subplot
    COMPONENT_COLORS: Line colour per vector/quaternion component
    PATH_YLABELS: Y axis label per animated property

Functions:
    setup_matplotlib_backend: Configure matplotlib backend based on requirements
"""

import logging
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# Plot configuration constants
PLOT_DPI = 150
SUBPLOT_SIZE: Tuple[float, float] = (12, 3)

COMPONENT_COLORS: Dict[str, str] = {
    'x': 'tab:red',
    'y': 'tab:green',
    'z': 'tab:blue',
    'w': 'tab:gray',
}

PATH_YLABELS: Dict[str, str] = {
    'translation': 'Translation',
    'rotation': 'Rotation (quat)',
    'scale': 'Scale',
}


def setup_matplotlib_backend(headless: bool) -> None:
    """
    Configure matplotlib backend.

    Headless runs (CI, servers, batch baking) use the non-interactive 'Agg'
    backend; otherwise the default backend is left in place.

    Args:
        headless: True if no display is available or wanted

    Note:
        Call this before pyplot is imported anywhere else.
    """
    if headless:
        logger.info("Configuring matplotlib for headless rendering (non-interactive backend)")
        try:
            import matplotlib
            matplotlib.use('Agg')
        except Exception as e:
            logger.warning(f"Failed to set matplotlib backend to 'Agg': {e}")
    else:
        logger.debug("Using default matplotlib backend for interactive plotting")
