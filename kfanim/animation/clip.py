"""
Animation clips: tracks, channels and a looping playback clock.

Each tick the clip advances its clock, wraps it to zero once it passes the
end of the clip, and writes every active channel's value into its target
node. Channels are evaluated in order, so when two channels drive the same
property of the same node the later one wins.
"""

import logging
import math
from typing import List, Optional, Set, Tuple, Union

from kfanim.config.anim_config_schemas import PlaybackConfig
from kfanim.errors import AnimationError, InvalidNodeReferenceError
from kfanim.scene import NodeHandle, NodeTable
from .channel import Channel, TargetPath
from .sampler import KeyframeTrack, TrackValue

logger = logging.getLogger(__name__)


class Clip:
    """One playable animation with its own clock."""

    def __init__(self, name: str, nodes: NodeTable, playback: Optional[PlaybackConfig] = None):
        """
        Args:
            name: Clip name
            nodes: Node table the channels' handles refer to
            playback: Tolerances and evaluation options (defaults if omitted)
        """
        self.name = name
        self.nodes = nodes
        self.playback = playback if playback is not None else PlaybackConfig()

        self._tracks: List[KeyframeTrack] = []
        self._channels: List[Channel] = []

        self._current_time = 0.0
        self._start = math.inf
        self._end = -math.inf

        # (track index, segment) pairs already reported, to log each problem once
        self._reported: Set[Tuple[int, Optional[int]]] = set()

        if self.playback.reuse_start_tangent:
            logger.warning(f"Clip '{name}': legacy cubic tangent evaluation enabled, "
                           f"spline output deviates from the Hermite formula")

    def __repr__(self):
        return (f"Clip(name='{self.name}', tracks={len(self._tracks)}, channels={len(self._channels)}, "
                f"bounds=({self._start}, {self._end}))")

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def tracks(self) -> Tuple[KeyframeTrack, ...]:
        return tuple(self._tracks)

    @property
    def channels(self) -> Tuple[Channel, ...]:
        return tuple(self._channels)

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    def bounds(self) -> Tuple[float, float]:
        return self._start, self._end

    @property
    def duration(self) -> float:
        """Length of the clip, 0 until a track with keyframes is added."""
        if self._end < self._start:
            return 0.0
        return self._end - self._start

    # =========================================================================
    # Construction
    # =========================================================================

    def add_track(self, track: KeyframeTrack) -> int:
        """
        Add a track and widen the clip bounds to cover its time stamps.

        Returns:
            Index of the track, used when binding channels
        """
        self._tracks.append(track)
        if track.keyframe_count:
            self._start = min(self._start, float(track.times.min()))
            self._end = max(self._end, float(track.times.max()))
        return len(self._tracks) - 1

    def fit_bounds(self) -> Tuple[float, float]:
        """Recompute start/end as the min/max time stamp over all tracks."""
        self._start = math.inf
        self._end = -math.inf
        for track in self._tracks:
            if track.keyframe_count:
                self._start = min(self._start, float(track.times.min()))
                self._end = max(self._end, float(track.times.max()))
        return self.bounds()

    def add_channel(self,
                    path: Union[TargetPath, str],
                    track_index: int,
                    node: NodeHandle) -> Channel:
        """
        Bind a track to a node property.

        Raises:
            ValueError: Unknown path
            IndexError: track_index does not name a track of this clip
            InvalidNodeReferenceError: node is not a live handle in the node table
        """
        path = TargetPath.parse(path)
        if not 0 <= track_index < len(self._tracks):
            raise IndexError(f"Clip '{self.name}' has no track {track_index} ({len(self._tracks)} tracks)")
        if not self.nodes.is_valid(node):
            raise InvalidNodeReferenceError(f"Clip '{self.name}': cannot bind {path.value} channel "
                                            f"to invalid node handle {node!r}")

        channel = Channel(path=path, track_index=track_index, node=node)
        self._channels.append(channel)
        logger.debug(f"Clip '{self.name}': bound track {track_index} to "
                     f"'{self.nodes.resolve(node).name}'.{path.value}")
        return channel

    # =========================================================================
    # Playback
    # =========================================================================

    def advance(self, delta_time: float) -> int:
        """
        Move the clock forward and apply the clip at the new time.

        Once the clock passes the end of the clip it restarts at exactly 0;
        overshoot is discarded.

        Args:
            delta_time: Seconds since the previous tick, finite and >= 0

        Returns:
            Number of channel values written to nodes
        """
        if not math.isfinite(delta_time) or delta_time < 0.0:
            raise ValueError(f"delta_time must be a finite non-negative number, got {delta_time}")

        self._set_time(self._current_time + delta_time)
        return self.apply()

    def seek(self, time: float) -> int:
        """Jump to a playback time and apply the clip there."""
        if not math.isfinite(time) or time < 0.0:
            raise ValueError(f"Seek time must be a finite non-negative number, got {time}")

        self._set_time(time)
        return self.apply()

    def reset(self) -> int:
        return self.seek(0.0)

    def _set_time(self, time: float) -> None:
        # TODO: carry the overshoot into the next loop instead of restarting at 0
        if time > self._end:
            time = 0.0
        self._current_time = time

    # =========================================================================
    # Evaluation
    # =========================================================================

    def sample(self, time: float) -> List[Tuple[Channel, TrackValue]]:
        """
        Evaluate every channel at time without touching any node.

        Channels whose track is malformed, has no segment at time, or fails
        to evaluate are left out of the result.

        Returns:
            (channel, value) pairs in channel order
        """
        results = []
        for channel in self._channels:
            track = self._tracks[channel.track_index]

            reason = track.malformed_reason(channel.path.stride)
            if reason is not None:
                self._report(channel.track_index, None,
                             f"Clip '{self.name}': skipping malformed track {channel.track_index}: {reason}")
                continue

            try:
                value = track.sample(time,
                                     channel.path,
                                     tolerance=self.playback.time_tolerance,
                                     reuse_start_tangent=self.playback.reuse_start_tangent)
            except AnimationError as e:
                self._report(channel.track_index, getattr(e, "index", -1),
                             f"Clip '{self.name}': skipping track {channel.track_index} at t={time}: {e}")
                continue

            if value is not None:
                results.append((channel, value))
        return results

    def apply(self) -> int:
        """
        Write every active channel's value at the current time into its node.

        Returns:
            Number of channel values written
        """
        written = 0
        for channel, value in self.sample(self._current_time):
            try:
                node = self.nodes.resolve(channel.node)
            except InvalidNodeReferenceError as e:
                logger.warning(f"Clip '{self.name}': {e}")
                continue
            channel.write(node.get_transform(), value)
            written += 1
        return written

    def _report(self, track_index: int, segment: Optional[int], message: str) -> None:
        key = (track_index, segment)
        if key in self._reported:
            logger.debug(message)
            return
        self._reported.add(key)
        logger.warning(message)
