"""
Keyframe tracks (samplers) and their per-segment evaluation.

A track owns the time stamps and output values for one animated property
and evaluates them with one of three interpolation modes:
- STEP: hold the value of the segment's first keyframe
- LINEAR: lerp for vectors, shortest-path SLERP for rotations
- CUBICSPLINE: cubic Hermite spline over (in-tangent, value, out-tangent) triples

Rotation values are stored as [x, y, z, w] rows and are returned as unit
quaternion objects regardless of mode.
"""

import logging
from enum import Enum
from typing import Optional, Union

import numpy as np
import quaternion
from numpy.typing import NDArray

from kfanim.config.anim_config_schemas import DEFAULT_TIME_TOLERANCE
from kfanim.errors import (
    DegenerateSegmentError,
    MalformedTrackError,
    UnsupportedInterpolationError,
)
from kfanim.interpolation import (
    hermite_interpolate,
    linear_interpolate,
    normalize_quaternion,
    quaternion_from_xyzw,
    slerp_xyzw,
)
from .channel import TargetPath

logger = logging.getLogger(__name__)

TrackValue = Union[NDArray[np.float64], quaternion.quaternion]


class InterpolationMode(Enum):
    """Interpolation applied between consecutive keyframes."""
    STEP = "STEP"
    LINEAR = "LINEAR"
    CUBIC = "CUBICSPLINE"

    @property
    def rows_per_keyframe(self) -> int:
        """CUBICSPLINE stores in-tangent, value and out-tangent per keyframe."""
        return 3 if self is InterpolationMode.CUBIC else 1

    @classmethod
    def parse(cls, value: Union["InterpolationMode", str]) -> "InterpolationMode":
        """
        Resolve an interpolation mode from an enum member or name.

        Raises:
            UnsupportedInterpolationError: For anything other than STEP, LINEAR,
                CUBIC or CUBICSPLINE
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key == "CUBIC":
                return cls.CUBIC
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedInterpolationError(f"Unsupported interpolation mode: {value!r}")


class KeyframeTrack:
    """
    Ordered keyframes for one animated property.

    The arrays are copied and made read-only on construction; a track is
    never modified after loading.
    """

    def __init__(self, times, values, mode: Union[InterpolationMode, str] = InterpolationMode.LINEAR):
        """
        Args:
            times: Keyframe time stamps, non-decreasing
            values: Output rows. One per keyframe for STEP/LINEAR; three per
                keyframe (in-tangent, value, out-tangent) for CUBICSPLINE
            mode: Interpolation mode or its name

        Raises:
            UnsupportedInterpolationError: If mode is unknown
            MalformedTrackError: If values cannot form a 2D array of rows
        """
        self.mode = InterpolationMode.parse(mode)

        try:
            self.times = np.array(times, dtype=np.float64).reshape(-1)
            values = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise MalformedTrackError(f"Keyframe data is not numeric/rectangular: {e}") from e

        if values.ndim == 1:
            values = values.reshape(-1, 1)
        if values.ndim != 2:
            raise MalformedTrackError(f"Track values must be rows of components, got shape {values.shape}")
        self.values = values

        self.times.flags.writeable = False
        self.values.flags.writeable = False

    @classmethod
    def from_flat(cls, times, flat_values, mode: Union[InterpolationMode, str], stride: int) -> "KeyframeTrack":
        """
        Build a track from a flat float sequence with the given component stride.

        A CUBICSPLINE rotation track with N keyframes holds 3 * 4 * N floats.
        """
        flat = np.array(flat_values, dtype=np.float64).reshape(-1)
        if stride <= 0 or flat.size % stride != 0:
            raise MalformedTrackError(f"{flat.size} floats cannot be split into rows of {stride}")
        return cls(times, flat.reshape(-1, stride), mode)

    def __repr__(self):
        return f"KeyframeTrack(mode={self.mode.name}, keyframes={len(self.times)}, width={self.width})"

    @property
    def keyframe_count(self) -> int:
        return len(self.times)

    @property
    def width(self) -> int:
        """Components per value row."""
        return self.values.shape[1]

    @property
    def start(self) -> float:
        return float(self.times[0]) if len(self.times) else float("inf")

    @property
    def end(self) -> float:
        return float(self.times[-1]) if len(self.times) else float("-inf")

    # =========================================================================
    # Validation
    # =========================================================================

    def malformed_reason(self, stride: int) -> Optional[str]:
        """
        Describe why this track cannot be evaluated with the given stride.

        Returns:
            None for a well-formed track, otherwise a human readable reason
        """
        n = len(self.times)
        if n == 0:
            return "track has no keyframes"
        expected_rows = n * self.mode.rows_per_keyframe
        if self.values.shape[0] != expected_rows:
            return (f"{n} time stamps but {self.values.shape[0]} value rows "
                    f"(expected {expected_rows} for {self.mode.value})")
        if self.width < stride:
            return f"value rows have {self.width} components, property needs {stride}"
        if not np.all(np.isfinite(self.times)):
            return "time stamps contain non-finite values"
        if np.any(np.diff(self.times) < 0):
            return "time stamps are not sorted"
        if not np.all(np.isfinite(self.values[:, :stride])):
            return "values contain non-finite components"
        return None

    def is_well_formed(self, stride: int) -> bool:
        return self.malformed_reason(stride) is None

    # =========================================================================
    # Segment search
    # =========================================================================

    def find_segment(self, time: float, tolerance: float = DEFAULT_TIME_TOLERANCE) -> Optional[int]:
        """
        Find the first segment i with times[i] <= time <= times[i+1].

        Both bounds are inclusive, so a time on the boundary shared by
        segments i and i+1 resolves to i. Times outside the track by no
        more than tolerance snap to the first/last segment.

        Returns:
            Segment index, or None if the time is outside the track
        """
        n = len(self.times)
        if n < 2:
            return None
        if time < self.times[0] - tolerance or time > self.times[-1] + tolerance:
            return None

        # First keyframe at or after time ends the earliest containing segment
        j = int(np.searchsorted(self.times, time, side='left'))
        return min(max(j - 1, 0), n - 2)

    def fraction(self, index: int, time: float) -> float:
        """
        Normalized position of time within segment index.

        Raises:
            DegenerateSegmentError: If the segment has zero length
        """
        t0 = float(self.times[index])
        t1 = float(self.times[index + 1])
        delta = t1 - t0
        if delta <= 0.0:
            raise DegenerateSegmentError(index, t0, t1)
        return max(0.0, time - t0) / delta

    # =========================================================================
    # Evaluation
    # =========================================================================

    def _row(self, row: int, stride: int) -> NDArray[np.float64]:
        return self.values[row, :stride]

    def _keyframe_value(self, index: int, stride: int) -> NDArray[np.float64]:
        if self.mode is InterpolationMode.CUBIC:
            return self._row(3 * index + 1, stride)
        return self._row(index, stride)

    def _cubic_spline(self, index: int, u: float, stride: int, reuse_start_tangent: bool) -> NDArray[np.float64]:
        delta = float(self.times[index + 1] - self.times[index])
        current = 3 * index
        following = 3 * (index + 1)

        p0 = self._row(current + 1, stride)                 # value at t = 0
        m0 = delta * self._row(current + 2, stride)         # out-tangent at t = 0
        p1 = self._row(following + 1, stride)               # value at t = 1
        m1 = delta * self._row(following, stride)           # in-tangent at t = 1

        if reuse_start_tangent:
            # Legacy evaluation: in-tangent of the start keyframe in both tangent terms
            m0 = delta * self._row(current, stride)
            m1 = m0

        return hermite_interpolate(p0, m0, p1, m1, u)

    def evaluate(self,
                 index: int,
                 time: float,
                 path: TargetPath,
                 reuse_start_tangent: bool = False) -> TrackValue:
        """
        Interpolate segment index at the given time for a target property.

        Args:
            index: Segment index, times[index] <= time <= times[index + 1]
            time: Evaluation time
            path: Property being animated (determines stride and rotation handling)
            reuse_start_tangent: Legacy cubic evaluation, see PlaybackConfig

        Returns:
            (3,) array for translation/scale, unit quaternion for rotation

        Raises:
            DegenerateSegmentError: LINEAR/CUBIC segment of zero length
            MalformedTrackError: Rotation evaluates to a zero quaternion
        """
        stride = path.stride

        if self.mode is InterpolationMode.STEP:
            # Start keyframe of the segment, including at its end time stamp
            result = np.array(self._keyframe_value(index, stride))
        elif self.mode is InterpolationMode.LINEAR:
            u = min(self.fraction(index, time), 1.0)
            v0 = self._keyframe_value(index, stride)
            v1 = self._keyframe_value(index + 1, stride)
            if path is TargetPath.ROTATION:
                try:
                    return normalize_quaternion(slerp_xyzw(v0, v1, u))
                except ValueError as e:
                    raise MalformedTrackError(f"Segment {index}: {e}") from e
            result = linear_interpolate(v0, v1, u)
        else:
            u = min(self.fraction(index, time), 1.0)
            result = self._cubic_spline(index, u, stride, reuse_start_tangent)

        if path is TargetPath.ROTATION:
            try:
                return normalize_quaternion(quaternion_from_xyzw(result))
            except ValueError as e:
                raise MalformedTrackError(f"Segment {index}: {e}") from e
        return result

    def sample(self,
               time: float,
               path: TargetPath,
               tolerance: float = DEFAULT_TIME_TOLERANCE,
               reuse_start_tangent: bool = False) -> Optional[TrackValue]:
        """
        Locate the active segment and evaluate it.

        Returns:
            The interpolated value, or None if no segment is active at time
        """
        index = self.find_segment(time, tolerance)
        if index is None:
            return None
        if self.fraction(index, time) > 1.0 + tolerance:
            return None
        return self.evaluate(index, time, path, reuse_start_tangent)
