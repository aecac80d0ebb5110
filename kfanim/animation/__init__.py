"""
Animation module: keyframe tracks, channels and clips.

Main components:
- KeyframeTrack: Keyframe times/values with STEP, LINEAR or CUBICSPLINE evaluation
- Channel: Binding of a track to a node's translation, rotation or scale
- Clip: Tracks + channels + looping playback clock
"""

from kfanim.errors import (
    AnimationError,
    MalformedTrackError,
    DegenerateSegmentError,
    InvalidNodeReferenceError,
    UnsupportedInterpolationError,
)
from .channel import Channel, TargetPath
from .sampler import InterpolationMode, KeyframeTrack
from .clip import Clip

__all__ = [
    'Clip',
    'Channel',
    'TargetPath',
    'KeyframeTrack',
    'InterpolationMode',
    'AnimationError',
    'MalformedTrackError',
    'DegenerateSegmentError',
    'InvalidNodeReferenceError',
    'UnsupportedInterpolationError',
]
