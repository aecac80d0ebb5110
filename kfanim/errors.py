"""
Exception types raised by the animation engine.

Per-channel errors (malformed tracks, degenerate segments, stale node
handles) are caught by the clip update loop and logged so that one bad
channel never stops its siblings from being evaluated. Configuration
errors (unknown interpolation modes, invalid bindings) are raised where
the object is constructed.
"""


class AnimationError(RuntimeError):
    """Base class for all animation engine errors."""


class MalformedTrackError(AnimationError):
    """Track data is inconsistent (count/width/order) or produced an invalid rotation."""


class DegenerateSegmentError(AnimationError):
    """A segment has a zero-length (or negative) time interval."""

    def __init__(self, index: int, t0: float, t1: float):
        self.index = index
        self.t0 = t0
        self.t1 = t1
        super().__init__(f"Segment {index} has a degenerate interval [{t0}, {t1}]")


class InvalidNodeReferenceError(AnimationError):
    """A node handle does not refer to a live node."""


class UnsupportedInterpolationError(AnimationError, ValueError):
    """Interpolation mode is not one of STEP, LINEAR, CUBIC."""
