"""
Animation configuration manager.
Handles loading of YAML animation definitions (scene nodes, clips, playback).
"""

import yaml
import logging
from pathlib import Path
from typing import Union, Any, Dict

# Project Imports
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

logger = logging.getLogger(__name__)


class AnimationConfigManager:
    """
    Configuration manager for animation definitions.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Path = None):
        """Initialize the animation configuration manager."""
        # Initialize project_root (default to project structure)
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        # Relative config paths are resolved against this directory
        self.clips_dir = self.project_root / "data" / "clips"

        self.config_directory = None  # Directory containing the last loaded config

    def load_config(self, config_path: Union[str, Path]) -> AnimationConfig:
        """
        Load animation configuration from YAML file.

        Args:
            config_path: Path to configuration YAML file

        Returns:
            AnimationConfig: Loaded configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file content does not describe a valid configuration
        """
        config_path = Path(config_path)

        # Resolve relative paths
        if not config_path.is_absolute():
            config_path = self.clips_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.config_directory = config_path.parent
        logger.info(f"Loading animation config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)

        config = self.parse_config(config_data)
        logger.info(f"Loaded animation config: {config.name} with {len(config.nodes)} nodes, "
                    f"{len(config.clips)} clips")
        return config

    def parse_config(self, config_data: Dict[str, Any]) -> AnimationConfig:
        """
        Build an AnimationConfig from already-parsed YAML data.

        Channel node names are checked against the node section and channel
        track indices against the clip's track list.
        """
        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Animation config must be a mapping, got {type(config_data).__name__}")

        config = AnimationConfig()

        # Basic info
        config.name = config_data.get('name', 'Unnamed Animation')
        config.output_dir = config_data.get('output_dir', 'animation_results')

        # Playback tuning
        if 'playback' in config_data:
            playback = config_data['playback'] or {}
            config.playback = PlaybackConfig(
                time_tolerance=float(playback.get('time_tolerance', DEFAULT_TIME_TOLERANCE)),
                quaternion_tolerance=float(playback.get('quaternion_tolerance', QUATERNION_NORM_TOLERANCE)),
                reuse_start_tangent=bool(playback.get('reuse_start_tangent', False))
            )
            if config.playback.time_tolerance < 0:
                raise ValueError(f"playback.time_tolerance must be >= 0, got {config.playback.time_tolerance}")

        # Scene nodes
        for node_name, node_data in (config_data.get('nodes') or {}).items():
            node_data = node_data or {}
            config.nodes[node_name] = NodeDefinition(
                translation=node_data.get('translation', [0.0, 0.0, 0.0]),
                rotation=node_data.get('rotation', [0.0, 0.0, 0.0, 1.0]),
                scale=node_data.get('scale', [1.0, 1.0, 1.0])
            )
            logger.debug(f"  Node '{node_name}'")

        # Clips
        for clip_name, clip_data in (config_data.get('clips') or {}).items():
            config.clips[clip_name] = self._parse_clip(clip_name, clip_data or {}, config.nodes)
            logger.debug(f"  Clip '{clip_name}': {len(config.clips[clip_name].tracks)} tracks, "
                         f"{len(config.clips[clip_name].channels)} channels")

        return config

    def _parse_clip(self, clip_name: str, clip_data: Dict[str, Any],
                    nodes: Dict[str, NodeDefinition]) -> ClipDefinition:
        clip = ClipDefinition()

        for i, track_data in enumerate(clip_data.get('tracks') or []):
            if 'times' not in track_data or 'values' not in track_data:
                raise ValueError(f"Clip '{clip_name}' track {i}: 'times' and 'values' are required")
            clip.tracks.append(TrackDefinition(
                times=track_data['times'],
                values=track_data['values'],
                interpolation=track_data.get('interpolation', 'LINEAR')
            ))

        for i, channel_data in enumerate(clip_data.get('channels') or []):
            missing = [key for key in ('node', 'path', 'track') if key not in channel_data]
            if missing:
                raise ValueError(f"Clip '{clip_name}' channel {i}: missing {', '.join(missing)}")

            channel = ChannelDefinition(
                node=channel_data['node'],
                path=channel_data['path'],
                track=int(channel_data['track'])
            )
            if channel.node not in nodes:
                raise ValueError(f"Clip '{clip_name}' channel {i}: unknown node '{channel.node}'")
            if not 0 <= channel.track < len(clip.tracks):
                raise ValueError(f"Clip '{clip_name}' channel {i}: track {channel.track} out of range "
                                 f"({len(clip.tracks)} tracks)")
            clip.channels.append(channel)

        return clip

    def get_output_directory(self, config: AnimationConfig) -> Path:
        """
        Get the output directory path.
        Creates it under data/results/<output_dir_name>.
        """
        output_dir = config.get_output_directory(self.project_root)
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir
