"""
Configuration module: YAML animation definitions and playback tuning.
"""

from .anim_config_schemas import (
    AnimationConfig,
    PlaybackConfig,
    NodeDefinition,
    TrackDefinition,
    ChannelDefinition,
    ClipDefinition,
    DEFAULT_TIME_TOLERANCE,
    QUATERNION_NORM_TOLERANCE,
)
from .anim_config_manager import AnimationConfigManager

__all__ = [
    'AnimationConfig',
    'AnimationConfigManager',
    'PlaybackConfig',
    'NodeDefinition',
    'TrackDefinition',
    'ChannelDefinition',
    'ClipDefinition',
    'DEFAULT_TIME_TOLERANCE',
    'QUATERNION_NORM_TOLERANCE',
]
