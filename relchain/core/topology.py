"""
Topology Engine
===============

Structural facts about a knowledge graph, computed with NetworkX.

ALLOWED:
- Node/edge counts, dangling edge counts
- Weakly connected components
- Cycle detection (whole graph or one relationship label)
- Step-wise reachability along a relationship chain

FORBIDDEN:
- Layout or positioning
- Ranking or centrality of any kind
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Set, Tuple
import networkx as nx

from ..contracts.graph import KnowledgeGraph


@dataclass(frozen=True)
class GraphMetrics:
    """Immutable structural metrics for a knowledge graph."""
    node_count: int
    edge_count: int
    dangling_edge_count: int
    relationship_count: int
    weakly_connected_components: int
    has_cycle: bool


class TopologyEngine:
    """
    Wraps a NetworkX MultiDiGraph so parallel edges survive.

    Edges with a missing endpoint are counted but never added, so they
    cannot introduce phantom nodes.
    """

    def __init__(self):
        self._graph = nx.MultiDiGraph()
        self._dangling = 0
        self._relationships: Tuple[str, ...] = ()

    def build_graph(self, graph: KnowledgeGraph) -> None:
        """
        Build internal graph from a KnowledgeGraph.

        Replaces internal graph state.
        """
        self._graph = nx.MultiDiGraph()
        self._dangling = 0
        self._relationships = graph.relationships()

        for node in graph.nodes:
            self._graph.add_node(node.node_id, label=node.label, node_type=node.node_type)

        for edge in graph.edges:
            if edge.source not in self._graph or edge.target not in self._graph:
                self._dangling += 1
                continue
            self._graph.add_edge(
                edge.source,
                edge.target,
                key=edge.edge_id,
                relationship=edge.relationship
            )

    def compute_metrics(self) -> GraphMetrics:
        if not self._graph:
            return GraphMetrics(0, 0, self._dangling, len(self._relationships), 0, False)

        return GraphMetrics(
            node_count=self._graph.number_of_nodes(),
            edge_count=self._graph.number_of_edges(),
            dangling_edge_count=self._dangling,
            relationship_count=len(self._relationships),
            weakly_connected_components=nx.number_weakly_connected_components(self._graph),
            has_cycle=not nx.is_directed_acyclic_graph(self._graph)
        )

    def relationship_has_cycle(self, relationship: str) -> bool:
        """True when edges carrying `relationship` alone form a directed cycle."""
        sub = nx.DiGraph()
        sub.add_edges_from(
            (u, v) for u, v, rel in self._graph.edges(data="relationship")
            if rel == relationship
        )
        if not sub:
            return False
        return not nx.is_directed_acyclic_graph(sub)

    def reachable_by_chain(
        self,
        start_id: str,
        chain: Sequence[str]
    ) -> Tuple[FrozenSet[str], ...]:
        """
        Node ids reached after each chain step, starting from `start_id`.

        One entry per step. Once a step reaches nothing, later steps are
        empty too. Unknown start ids reach nothing.
        """
        steps: List[FrozenSet[str]] = []
        frontier: Set[str] = {start_id} if start_id in self._graph else set()
        for relationship in chain:
            frontier = {
                v for u in frontier
                for _, v, rel in self._graph.out_edges(u, data="relationship")
                if rel == relationship
            }
            steps.append(frozenset(frontier))
        return tuple(steps)

    def clear(self):
        self._graph.clear()
        self._dangling = 0
        self._relationships = ()
