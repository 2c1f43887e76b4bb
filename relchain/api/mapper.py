"""
API Mapper
==========

Transforms contracts into response payloads. No view logic lives here.
"""
from dataclasses import asdict
from typing import Any, Dict, Sequence

from ..contracts.graph import KnowledgeGraph
from ..contracts.views import LayerResult, TraversalDirection, TreeNode
from ..core.topology import GraphMetrics
from ..domain.serialization import forest_to_dict, graph_to_dict, layer_result_to_dict


def map_graph(graph: KnowledgeGraph) -> Dict[str, Any]:
    payload = graph_to_dict(graph)
    payload["relationships"] = list(graph.relationships())
    return payload


def map_metrics(metrics: GraphMetrics) -> Dict[str, Any]:
    return asdict(metrics)


def map_layers(chain: Sequence[str], result: LayerResult) -> Dict[str, Any]:
    payload = layer_result_to_dict(result)
    payload["chain"] = list(chain)
    payload["nodeCount"] = result.node_count
    return payload


def map_forest(
    chain: Sequence[str],
    direction: TraversalDirection,
    forest: Sequence[TreeNode]
) -> Dict[str, Any]:
    return {
        "chain": list(chain),
        "direction": direction.value,
        "trees": forest_to_dict(forest),
    }
