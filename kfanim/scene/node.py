"""
Scene nodes and the node table animation channels write into.

This module provides:
- Node: a named holder of a mutable Transform
- NodeHandle: an (index, generation) reference into a NodeTable
- NodeTable: an arena owning nodes, handing out handles instead of references

Channels never hold nodes directly. A handle whose slot was freed (or
reused by a later node) fails validation, so a removed node shows up as an
InvalidNodeReferenceError instead of writes to an orphaned object.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from kfanim.errors import InvalidNodeReferenceError
from .transform import Transform

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """
    A scene node animated by channels.

    Attributes:
        name: Descriptive name (e.g., "cube", "arm_upper").
        transform: Local transform mutated by animation channels.
    """
    name: str
    transform: Transform = field(default_factory=Transform)

    def get_transform(self) -> Transform:
        return self.transform


@dataclass(frozen=True)
class NodeHandle:
    """Reference to a node slot in a NodeTable."""
    index: int
    generation: int = 0


class NodeTable:
    """Arena of scene nodes addressed by NodeHandle."""

    def __init__(self):
        self._nodes: List[Optional[Node]] = []
        self._generations: List[int] = []
        self._free: List[int] = []

    def add(self, name: str, transform: Optional[Transform] = None) -> NodeHandle:
        """
        Add a node and return its handle.

        Args:
            name: Node name
            transform: Initial transform (identity if omitted)

        Returns:
            NodeHandle for the new node
        """
        node = Node(name=name, transform=transform if transform is not None else Transform())

        if self._free:
            index = self._free.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
            self._generations.append(0)

        handle = NodeHandle(index, self._generations[index])
        logger.debug(f"Added node '{name}' at {handle}")
        return handle

    def remove(self, handle: NodeHandle) -> Node:
        """Remove a node, invalidating every handle that refers to it."""
        node = self.resolve(handle)
        self._nodes[handle.index] = None
        self._generations[handle.index] += 1
        self._free.append(handle.index)
        logger.debug(f"Removed node '{node.name}' at {handle}")
        return node

    def is_valid(self, handle) -> bool:
        if not isinstance(handle, NodeHandle):
            return False
        if handle.index < 0 or handle.index >= len(self._nodes):
            return False
        return self._nodes[handle.index] is not None and self._generations[handle.index] == handle.generation

    def resolve(self, handle: NodeHandle) -> Node:
        """
        Return the node a handle refers to.

        Raises:
            InvalidNodeReferenceError: If the handle is out of range or stale
        """
        if not self.is_valid(handle):
            raise InvalidNodeReferenceError(f"Node handle {handle!r} does not refer to a live node")
        return self._nodes[handle.index]

    def label(self, handle: NodeHandle) -> str:
        """Name of the node a handle refers to, or the handle's repr if it is stale."""
        if self.is_valid(handle):
            return self._nodes[handle.index].name
        return repr(handle)

    def find(self, name: str) -> NodeHandle:
        """Return the handle of the first live node with the given name."""
        for handle in self:
            if self._nodes[handle.index].name == name:
                return handle
        raise KeyError(f"Node '{name}' not found")

    def __iter__(self) -> Iterator[NodeHandle]:
        for index, node in enumerate(self._nodes):
            if node is not None:
                yield NodeHandle(index, self._generations[index])

    def __len__(self) -> int:
        return sum(1 for node in self._nodes if node is not None)
