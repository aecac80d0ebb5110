"""
Builds runtime scene nodes and clips from an AnimationConfig.

This module provides:
- build_node_table: NodeTable populated from the config's node definitions
- build_clip: Runtime Clip (tracks, channels, bounds) from a ClipDefinition
- load_clips: Both of the above for every clip in a config
"""

import logging
from typing import Dict, Optional, Tuple

from kfanim.animation import Clip, KeyframeTrack
from kfanim.config.anim_config_schemas import AnimationConfig, ClipDefinition, PlaybackConfig
from kfanim.interpolation import normalize_quaternion, quaternion_from_xyzw
from kfanim.scene import NodeHandle, NodeTable, Transform
from kfanim.utils.geometry_utils import is_unit_quaternion

logger = logging.getLogger(__name__)


def build_node_table(config: AnimationConfig,
                     nodes: Optional[NodeTable] = None) -> Tuple[NodeTable, Dict[str, NodeHandle]]:
    """
    Create scene nodes for every node definition in the config.

    Args:
        config: Loaded animation configuration
        nodes: Existing table to add to (a new one is created if omitted)

    Returns:
        (node table, mapping of node name to handle)
    """
    if nodes is None:
        nodes = NodeTable()

    handles: Dict[str, NodeHandle] = {}
    for name, definition in config.nodes.items():
        rotation = quaternion_from_xyzw(definition.rotation)
        if not is_unit_quaternion(rotation, config.playback.quaternion_tolerance):
            logger.warning(f"Node '{name}': initial rotation {definition.rotation} is not unit length, normalizing")
            rotation = normalize_quaternion(rotation)

        transform = Transform(
            translation=definition.translation,
            rotation=rotation,
            scale=definition.scale
        )
        handles[name] = nodes.add(name, transform)

    logger.debug(f"Built {len(handles)} scene nodes")
    return nodes, handles


def build_clip(name: str,
               definition: ClipDefinition,
               nodes: NodeTable,
               handles: Dict[str, NodeHandle],
               playback: Optional[PlaybackConfig] = None) -> Clip:
    """
    Create a runtime clip from its definition.

    Clip bounds are fitted to the min/max time stamp of all tracks.

    Raises:
        UnsupportedInterpolationError: A track names an unknown interpolation mode
        KeyError: A channel names a node missing from handles
    """
    clip = Clip(name, nodes, playback)

    for track_definition in definition.tracks:
        clip.add_track(KeyframeTrack(
            track_definition.times,
            track_definition.values,
            track_definition.interpolation
        ))

    for channel_definition in definition.channels:
        if channel_definition.node not in handles:
            raise KeyError(f"Clip '{name}': node '{channel_definition.node}' was not built")
        clip.add_channel(channel_definition.path, channel_definition.track, handles[channel_definition.node])

    clip.fit_bounds()
    logger.info(f"Built clip '{name}': {len(clip.tracks)} tracks, {len(clip.channels)} channels, "
                f"time range [{clip.start}, {clip.end}]")
    return clip


def load_clips(config: AnimationConfig) -> Tuple[NodeTable, Dict[str, NodeHandle], Dict[str, Clip]]:
    """
    Build the node table and every clip of a configuration.

    Returns:
        (node table, node name -> handle, clip name -> Clip)
    """
    nodes, handles = build_node_table(config)
    clips = {
        clip_name: build_clip(clip_name, definition, nodes, handles, config.playback)
        for clip_name, definition in config.clips.items()
    }
    return nodes, handles, clips
