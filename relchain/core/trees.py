"""
Tree Builder
============

Expands a forest of trees along a relationship chain: depth d of every
tree follows chain[d].

CYCLE SAFETY:
=============
Each branch carries its own frozenset of node ids seen on the path from
the root. Extending it creates a new set, so sibling branches never see
each other's visits. A node already on the current path becomes a leaf;
the same node may still appear in other branches or other trees.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, FrozenSet, Sequence, Tuple

from ..contracts.graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode
from ..contracts.views import TraversalDirection, TreeNode

_LOGGER = logging.getLogger(__name__)

Endpoint = Callable[[KnowledgeEdge], str]


def _source(edge: KnowledgeEdge) -> str:
    return edge.source


def _target(edge: KnowledgeEdge) -> str:
    return edge.target


# (endpoint matched against the current node, endpoint yielding children)
_ENDPOINTS: Dict[TraversalDirection, Tuple[Endpoint, Endpoint]] = {
    TraversalDirection.FORWARD: (_source, _target),
    TraversalDirection.REVERSE: (_target, _source),
}


def build_forest(
    graph: KnowledgeGraph,
    chain: Sequence[str],
    direction: TraversalDirection = TraversalDirection.FORWARD
) -> Tuple[TreeNode, ...]:
    """
    Build one tree per root of `chain[0]`.

    Forward roots are sources of `chain[0]` edges; reverse roots are their
    targets. Roots follow graph node order. An empty chain yields an
    empty forest.
    """
    chain = tuple(chain)
    if not chain:
        return ()

    match_endpoint, child_endpoint = _ENDPOINTS[direction]
    # Roots sit on the matched side of the first relationship
    root_ids = {match_endpoint(e) for e in graph.edges_with_relationship(chain[0])}
    roots = graph.nodes_with_ids(root_ids)

    forest = tuple(
        _expand(graph, root, chain, 0, frozenset(), match_endpoint, child_endpoint)
        for root in roots
    )
    _LOGGER.debug(
        "Built %s forest with %d roots for chain %s",
        direction.value, len(forest), list(chain)
    )
    return forest


def build_reverse_forest(graph: KnowledgeGraph, chain: Sequence[str]) -> Tuple[TreeNode, ...]:
    """Forest rooted at targets of `chain[0]`, expanding towards edge sources."""
    return build_forest(graph, chain, TraversalDirection.REVERSE)


def _expand(
    graph: KnowledgeGraph,
    node: KnowledgeNode,
    chain: Tuple[str, ...],
    depth: int,
    path: FrozenSet[str],
    match_endpoint: Endpoint,
    child_endpoint: Endpoint
) -> TreeNode:
    # Cycle guard: already on this root-to-here path
    if node.node_id in path:
        return TreeNode(node=node, depth=depth)

    # Chain exhausted
    if depth >= len(chain):
        return TreeNode(node=node, depth=depth)

    relationship = chain[depth]
    child_path = path | {node.node_id}

    child_ids = {
        child_endpoint(e) for e in graph.edges
        if e.relationship == relationship and match_endpoint(e) == node.node_id
    }
    children = tuple(
        _expand(graph, child, chain, depth + 1, child_path, match_endpoint, child_endpoint)
        for child in graph.nodes_with_ids(child_ids)
    )

    return TreeNode(
        node=node,
        children=children,
        depth=depth,
        relationship_to_children=relationship if children else None,
    )
