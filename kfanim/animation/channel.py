"""
Animation channels: bindings of a keyframe track to one node property.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np
import quaternion

from kfanim.scene import NodeHandle, Transform

logger = logging.getLogger(__name__)


class TargetPath(Enum):
    """Node property a channel animates."""
    TRANSLATION = "translation"
    ROTATION = "rotation"
    SCALE = "scale"

    @property
    def stride(self) -> int:
        """Number of components a track must provide for this property."""
        return 4 if self is TargetPath.ROTATION else 3

    @classmethod
    def parse(cls, value: Union["TargetPath", str]) -> "TargetPath":
        """Accept an enum member or its name/value in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown target path: {value!r} (expected translation, rotation or scale)")


@dataclass(frozen=True)
class Channel:
    """
    Binding of one track's output to one property of one node.

    Attributes:
        path: Animated property.
        track_index: Index of the track in the owning clip.
        node: Handle of the target node in the scene's NodeTable.
    """
    path: TargetPath
    track_index: int
    node: NodeHandle

    def write(self, transform: Transform, value: Union[np.ndarray, quaternion.quaternion]) -> None:
        """Write an evaluated track value into the matching transform property."""
        if self.path is TargetPath.TRANSLATION:
            transform.set_translation(value)
        elif self.path is TargetPath.ROTATION:
            transform.set_rotation(value)
        elif self.path is TargetPath.SCALE:
            transform.set_scale(value)
