"""
Mutable node transform written by animation channels.
"""

import logging
from dataclasses import dataclass, field

import numpy as np
import quaternion

from kfanim.utils.geometry_utils import build_trs_matrix

logger = logging.getLogger(__name__)

# Type alias for 3D vectors
Vector3D = np.ndarray  # 3-element array: np.array([x, y, z])


def _as_vector3(value) -> Vector3D:
    vector = np.array(value, dtype=np.float64).reshape(-1)
    if vector.shape[0] < 3:
        raise ValueError(f"Expected at least 3 components, got {vector.shape[0]}")
    return vector[:3].copy()


@dataclass
class Transform:
    """
    Translation, rotation and scale of a scene node.

    Attributes:
        translation: Position relative to the parent [x, y, z].
        rotation: Orientation quaternion (w, x, y, z order in numpy-quaternion).
        scale: Per-axis scale factors [sx, sy, sz].
    """
    translation: Vector3D = field(default_factory=lambda: np.zeros(3))
    rotation: quaternion.quaternion = field(default_factory=lambda: quaternion.one)
    scale: Vector3D = field(default_factory=lambda: np.ones(3))

    def __post_init__(self):
        self.translation = _as_vector3(self.translation)
        self.scale = _as_vector3(self.scale)
        if not isinstance(self.rotation, quaternion.quaternion):
            raise TypeError(f"rotation must be a quaternion, got {type(self.rotation).__name__}")

    def set_translation(self, translation) -> None:
        self.translation = _as_vector3(translation)

    def set_rotation(self, rotation: quaternion.quaternion) -> None:
        if not isinstance(rotation, quaternion.quaternion):
            raise TypeError(f"rotation must be a quaternion, got {type(rotation).__name__}")
        self.rotation = rotation

    def set_scale(self, scale) -> None:
        self.scale = _as_vector3(scale)

    def get_matrix(self) -> np.ndarray:
        """Return the 4x4 local transform matrix (T * R * S)."""
        return build_trs_matrix(self.translation, self.rotation, self.scale)
