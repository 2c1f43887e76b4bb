"""
Graph Contracts

Immutable representation of entities and relationship-labeled edges.

PRINCIPLES:
1. Immutable (Frozen)
2. Insertion order of nodes is significant and preserved
3. Edges may reference node ids that do not exist (dangling);
   lookups tolerate this instead of failing
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class KnowledgeNode:
    """A typed entity. `node_type` is an open tag used only for display."""
    node_id: str
    label: str
    node_type: str
    # Opaque metadata, stored read-only; left out of hashing and equality
    metadata: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False, compare=False
    )

    def __post_init__(self):
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def metadata_dict(self) -> Dict[str, Any]:
        return dict(self.metadata)


@dataclass(frozen=True)
class KnowledgeEdge:
    """Directed, relationship-labeled edge: source -> target."""
    edge_id: str
    source: str
    target: str
    relationship: str


@dataclass(frozen=True)
class KnowledgeGraph:
    """
    A set of nodes plus a set of edges.

    Not necessarily acyclic or connected. Parallel edges (same pair, same
    or different relationship) are allowed.
    """
    nodes: Tuple[KnowledgeNode, ...] = field(default_factory=tuple)
    edges: Tuple[KnowledgeEdge, ...] = field(default_factory=tuple)

    @staticmethod
    def of(
        nodes: Iterable[KnowledgeNode],
        edges: Iterable[KnowledgeEdge]
    ) -> KnowledgeGraph:
        """Build a graph from any iterables, freezing them to tuples."""
        return KnowledgeGraph(nodes=tuple(nodes), edges=tuple(edges))

    def node_ids(self) -> FrozenSet[str]:
        return frozenset(n.node_id for n in self.nodes)

    def get_node(self, node_id: str) -> Optional[KnowledgeNode]:
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def nodes_with_ids(self, ids: Iterable[str]) -> Tuple[KnowledgeNode, ...]:
        """
        Nodes whose id is in `ids`, in graph order.

        Ids with no matching node are silently dropped.
        """
        wanted = ids if isinstance(ids, (set, frozenset)) else set(ids)
        return tuple(n for n in self.nodes if n.node_id in wanted)

    def edges_with_relationship(self, relationship: str) -> Tuple[KnowledgeEdge, ...]:
        return tuple(e for e in self.edges if e.relationship == relationship)

    def relationships(self) -> Tuple[str, ...]:
        """Distinct relationship labels in first-seen edge order."""
        seen: Dict[str, None] = {}
        for edge in self.edges:
            seen.setdefault(edge.relationship, None)
        return tuple(seen)

    def dangling_edges(self) -> Tuple[KnowledgeEdge, ...]:
        """Edges with at least one endpoint missing from the node set."""
        ids = self.node_ids()
        return tuple(
            e for e in self.edges
            if e.source not in ids or e.target not in ids
        )

    @property
    def empty(self) -> bool:
        return not self.nodes and not self.edges
