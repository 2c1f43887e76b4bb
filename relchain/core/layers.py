"""
Layer Builder
=============

Splits a graph into ordered, disjoint layers by following a relationship
chain one step at a time.

PARTITION RULE:
===============
Every node lands in exactly one layer. A node reachable from several
steps is claimed by the earliest layer that reaches it (first claim wins).
The frontier used to seed each step is the FULL target set of the previous
step, so nodes claimed earlier can still act as sources later on.
"""

from __future__ import annotations
import logging
from typing import List, Sequence, Set

from ..contracts.graph import KnowledgeGraph
from ..contracts.views import Layer, LayerResult

_LOGGER = logging.getLogger(__name__)

UNASSIGNED_LAYER_ID = "layer-unassigned"
UNASSIGNED_LAYER_NAME = "Other Nodes"


def build_layers(graph: KnowledgeGraph, chain: Sequence[str]) -> LayerResult:
    """
    Build ordered layers for `chain` over `graph`.

    Returns zero layers for an empty chain. `flat_graph` is always the
    input graph, unfiltered.
    """
    chain = tuple(chain)
    if not chain:
        return LayerResult(layers=(), flat_graph=graph)

    layers: List[Layer] = []
    assigned: Set[str] = set()

    first = chain[0]
    root_ids = {e.source for e in graph.edges_with_relationship(first)}
    root_nodes = graph.nodes_with_ids(root_ids)
    assigned.update(n.node_id for n in root_nodes)

    layers.append(Layer(
        layer_id="layer-0",
        name=f'Sources of "{first}"',
        relationship=first,
        nodes=root_nodes,
        edges=(),
    ))

    frontier = root_ids
    for index, relationship in enumerate(chain):
        relevant = tuple(
            e for e in graph.edges
            if e.relationship == relationship and e.source in frontier
        )
        target_ids = {e.target for e in relevant}
        new_nodes = tuple(
            n for n in graph.nodes_with_ids(target_ids)
            if n.node_id not in assigned
        )
        assigned.update(n.node_id for n in new_nodes)

        if new_nodes:
            layers.append(Layer(
                layer_id=f"layer-{index + 1}",
                name=f'Targets of "{relationship}"',
                relationship=relationship,
                nodes=new_nodes,
                edges=relevant,
            ))

        # Advance on the full target set, not just the newly claimed nodes
        frontier = target_ids

    remaining = tuple(n for n in graph.nodes if n.node_id not in assigned)
    if remaining:
        layers.append(Layer(
            layer_id=UNASSIGNED_LAYER_ID,
            name=UNASSIGNED_LAYER_NAME,
            relationship="",
            nodes=remaining,
            edges=(),
        ))

    _LOGGER.debug(
        "Built %d layers for chain %s (%d unassigned nodes)",
        len(layers), list(chain), len(remaining)
    )
    return LayerResult(layers=tuple(layers), flat_graph=graph)
