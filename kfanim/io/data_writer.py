"""
Data export utilities for baked animation clips.

Samples a clip on a grid of times (without touching scene nodes) and writes
one CSV row per time with a column for every channel component. Channels
that are inactive at a time are written as NaN.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple
import numpy as np
from numpy.typing import NDArray

from kfanim.animation import Clip, TargetPath
from kfanim.interpolation import quaternion_to_xyzw

logger = logging.getLogger(__name__)

COMPONENT_NAMES = {
    TargetPath.TRANSLATION: ('x', 'y', 'z'),
    TargetPath.ROTATION: ('x', 'y', 'z', 'w'),
    TargetPath.SCALE: ('x', 'y', 'z'),
}


def bake_clip(clip: Clip, sample_times: NDArray[np.float64]) -> Tuple[List[str], NDArray[np.float64]]:
    """
    Evaluate every channel of a clip at each sample time.

    Args:
        clip: Clip to sample
        sample_times: Times to evaluate at

    Returns:
        (column names, array of shape (len(sample_times), 1 + total components))
        The first column is the sample time.
    """
    sample_times = np.asarray(sample_times, dtype=np.float64).reshape(-1)

    columns = ['Time']
    offsets = []
    for channel in clip.channels:
        node_name = clip.nodes.label(channel.node)
        offsets.append(len(columns))
        columns.extend(f"{node_name}.{channel.path.value}.{c}" for c in COMPONENT_NAMES[channel.path])

    data = np.full((len(sample_times), len(columns)), np.nan)
    data[:, 0] = sample_times

    channel_offsets = {id(channel): offset for channel, offset in zip(clip.channels, offsets)}
    for row, time in enumerate(sample_times):
        for channel, value in clip.sample(float(time)):
            if channel.path is TargetPath.ROTATION:
                value = quaternion_to_xyzw(value)
            offset = channel_offsets[id(channel)]
            data[row, offset:offset + len(value)] = value

    return columns, data


def save_baked_clip(
    output_dir: Path,
    clip: Clip,
    sample_times: NDArray[np.float64],
    timestamp: Optional[str] = None
) -> Path:
    """
    Bake a clip and save the samples to CSV.

    Args:
        output_dir: Directory to save CSV file
        clip: Clip to bake
        sample_times: Times to evaluate at, all finite
        timestamp: Optional HHMM timestamp string. If not provided, generates current time.

    Returns:
        Path to the saved CSV file

    Raises:
        ValueError: If sample_times is empty or contains non-finite values
        RuntimeError: If CSV saving fails
    """
    sample_times = np.asarray(sample_times, dtype=np.float64).reshape(-1)

    # Input validation
    if len(sample_times) == 0:
        raise ValueError("Empty sample_times array provided")
    if not np.all(np.isfinite(sample_times)):
        raise ValueError("sample_times must be finite")

    logger.info(f"Baking clip '{clip.name}' at {len(sample_times)} sample times...")

    columns, data = bake_clip(clip, sample_times)

    try:
        if timestamp is None:
            timestamp = datetime.now().strftime("%H%M")
        data_path = Path(output_dir) / f"{timestamp}_{clip.name}_{len(sample_times)}pts.csv"

        np.savetxt(data_path, data, delimiter=',', header=','.join(columns), fmt='%.9g', comments='')

        logger.info(f"Data saved: {data_path}")
        return data_path

    except Exception as e:
        logger.error(f"Failed to save baked clip: {e}")
        raise RuntimeError(f"CSV export failed: {e}") from e
