"""
Animation configuration schemas.
Keyframe clip definitions, scene nodes and playback tuning loaded from YAML.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union
from pathlib import Path

# Tolerance applied to segment containment and the fraction <= 1 guard.
DEFAULT_TIME_TOLERANCE = 1e-6

# Allowed deviation from unit magnitude for evaluated rotations.
QUATERNION_NORM_TOLERANCE = 1e-5


@dataclass
class PlaybackConfig:
    """
    Playback and evaluation tuning.

    reuse_start_tangent reproduces the legacy cubic spline evaluation that
    took the start keyframe's in-tangent as the start tangent and also used
    it in place of the end tangent. Only enable it when matching output of
    that legacy system.
    """
    time_tolerance: float = DEFAULT_TIME_TOLERANCE
    quaternion_tolerance: float = QUATERNION_NORM_TOLERANCE
    reuse_start_tangent: bool = False


@dataclass
class NodeDefinition:
    """Initial transform of a scene node."""
    translation: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    rotation: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])  # Quaternion [x,y,z,w]
    scale: List[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])


@dataclass
class TrackDefinition:
    """
    Keyframe data for one track.

    values holds one row per keyframe for STEP/LINEAR, and three rows per
    keyframe (in-tangent, value, out-tangent) for CUBICSPLINE.
    """
    times: List[float]
    values: List[Union[List[float], float]]
    interpolation: str = "LINEAR"


@dataclass
class ChannelDefinition:
    """Binding of a track (by index) to a node property."""
    node: str
    path: str
    track: int


@dataclass
class ClipDefinition:
    """Tracks and channels of one playable clip."""
    tracks: List[TrackDefinition] = field(default_factory=list)
    channels: List[ChannelDefinition] = field(default_factory=list)


@dataclass
class AnimationConfig:
    """
    Complete animation configuration: scene nodes plus the clips driving them.
    """
    # Basic info
    name: str = "Unnamed Animation"

    playback: PlaybackConfig = field(default_factory=PlaybackConfig)

    nodes: Dict[str, NodeDefinition] = field(default_factory=dict)
    clips: Dict[str, ClipDefinition] = field(default_factory=dict)

    output_dir: str = "animation_results"

    def get_output_directory(self, project_root: Path) -> Path:
        """Get the full output directory path under data/results/."""
        return project_root / "data" / "results" / self.output_dir
