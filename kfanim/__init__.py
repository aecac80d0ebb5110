"""
kfanim: keyframe animation interpolation for scene node transforms.
"""

from .scene import NodeTable, NodeHandle, Node, Transform
from .animation import Clip, Channel, TargetPath, KeyframeTrack, InterpolationMode

__version__ = "0.1.0"

__all__ = [
    'Clip',
    'Channel',
    'TargetPath',
    'KeyframeTrack',
    'InterpolationMode',
    'NodeTable',
    'NodeHandle',
    'Node',
    'Transform',
]
