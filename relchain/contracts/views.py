"""
View Contracts

Derived, read-only structures produced by the layer and tree builders.

LAYERS vs TREES:
================
- Layers of one run PARTITION the graph's nodes (each node in exactly one layer)
- Trees carry no global uniqueness; a node may recur across branches and
  roots. Only a per-path no-repeat rule holds.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from .base import Error, ErrorCode, Result
from .graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode


class TraversalDirection(Enum):
    """Which edge endpoint a tree expands towards."""
    FORWARD = "forward"   # children are edge targets
    REVERSE = "reverse"   # children are edge sources


def parse_direction(value: str) -> Result:
    """Parse a direction name; unknown names are an explicit error value."""
    try:
        return Result.success(TraversalDirection(value.lower()))
    except (ValueError, AttributeError):
        return Result.failure(Error(
            code=ErrorCode.UNKNOWN_DIRECTION,
            message=f"Unknown traversal direction: {value!r}"
        ).with_context("allowed", ",".join(d.value for d in TraversalDirection)))


@dataclass(frozen=True)
class Layer:
    """One partition cell of nodes reached at a given chain step."""
    layer_id: str
    name: str
    relationship: str  # "" for the fallback layer
    nodes: Tuple[KnowledgeNode, ...] = field(default_factory=tuple)
    edges: Tuple[KnowledgeEdge, ...] = field(default_factory=tuple)

    def node_ids(self) -> Tuple[str, ...]:
        return tuple(n.node_id for n in self.nodes)


@dataclass(frozen=True)
class LayerResult:
    """Ordered layers plus the untouched input graph."""
    layers: Tuple[Layer, ...]
    flat_graph: KnowledgeGraph

    @property
    def node_count(self) -> int:
        return sum(len(layer.nodes) for layer in self.layers)

    def layer_for(self, node_id: str) -> Optional[Layer]:
        for layer in self.layers:
            if node_id in layer.node_ids():
                return layer
        return None


@dataclass(frozen=True)
class TreeNode:
    """
    One occurrence of a graph node inside a tree.

    `relationship_to_children` is the chain label used to expand this node;
    it is None for every leaf (depth bound, cycle guard, or no matching edges).
    """
    node: KnowledgeNode
    children: Tuple[TreeNode, ...] = field(default_factory=tuple)
    depth: int = 0
    relationship_to_children: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator[TreeNode]:
        """Pre-order traversal of this subtree."""
        yield self
        for child in self.children:
            yield from child.walk()

    def max_depth(self) -> int:
        return max(t.depth for t in self.walk())

    def paths(self) -> Tuple[Tuple[str, ...], ...]:
        """Root-to-leaf node-id paths."""
        if not self.children:
            return ((self.node.node_id,),)
        return tuple(
            (self.node.node_id,) + path
            for child in self.children
            for path in child.paths()
        )
