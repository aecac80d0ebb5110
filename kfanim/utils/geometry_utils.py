"""
Geometry utilities for node transforms.

Provides:
- build_trs_matrix: Compose translation, rotation and scale into a 4x4 matrix
- is_unit_quaternion: Check a rotation's magnitude against a tolerance
"""

import numpy as np
import quaternion
import logging

logger = logging.getLogger(__name__)


def build_trs_matrix(translation: np.ndarray,
                     rotation: quaternion.quaternion,
                     scale: np.ndarray) -> np.ndarray:
    """
    Build a 4x4 homogeneous matrix M = T * R * S.

    Args:
        translation: Translation vector (3,).
        rotation: Rotation quaternion, normalized before use.
        scale: Per-axis scale factors (3,).

    Returns:
        4x4 homogeneous transform matrix.
    """
    translation = np.asarray(translation, dtype=np.float64)
    scale = np.asarray(scale, dtype=np.float64)

    if translation.shape != (3,) or scale.shape != (3,):
        raise ValueError("Translation and scale must be 3-element vectors.")

    R = quaternion.as_rotation_matrix(rotation)  # normalizes internally

    matrix = np.eye(4)
    matrix[:3, :3] = R * scale[np.newaxis, :]
    matrix[:3, 3] = translation

    return matrix


def is_unit_quaternion(q: quaternion.quaternion, tolerance: float = 1e-5) -> bool:
    """Return True if |q| is within tolerance of 1."""
    return abs(q.abs() - 1.0) <= tolerance
