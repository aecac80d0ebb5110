"""
Scene module: the node/transform contract animation channels write into.
"""

from .transform import Transform
from .node import Node, NodeHandle, NodeTable

__all__ = ['Transform', 'Node', 'NodeHandle', 'NodeTable']
