"""
I/O module: building clips from configuration and exporting baked samples.
"""

from .clip_loader import build_node_table, build_clip, load_clips
from .data_writer import bake_clip, save_baked_clip

__all__ = [
    'build_node_table',
    'build_clip',
    'load_clips',
    'bake_clip',
    'save_baked_clip',
]
