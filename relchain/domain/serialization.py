"""
Plain-dict renderings of graphs and derived views.

Field names follow the presentation layer's shapes (`id`, `type`,
`relationshipToChildren`), so the API can return them unchanged.
"""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, Sequence

from ..contracts.graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode
from ..contracts.views import Layer, LayerResult, TreeNode


def node_to_dict(node: KnowledgeNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": node.node_id,
        "label": node.label,
        "type": node.node_type,
    }
    if node.metadata:
        data["metadata"] = node.metadata_dict()
    return data


def edge_to_dict(edge: KnowledgeEdge) -> Dict[str, Any]:
    return {
        "id": edge.edge_id,
        "source": edge.source,
        "target": edge.target,
        "relationship": edge.relationship,
    }


def graph_to_dict(graph: KnowledgeGraph) -> Dict[str, Any]:
    return {
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "edges": [edge_to_dict(e) for e in graph.edges],
    }


def layer_to_dict(layer: Layer) -> Dict[str, Any]:
    return {
        "id": layer.layer_id,
        "name": layer.name,
        "relationship": layer.relationship,
        "nodes": [node_to_dict(n) for n in layer.nodes],
        "edges": [edge_to_dict(e) for e in layer.edges],
    }


def layer_result_to_dict(result: LayerResult) -> Dict[str, Any]:
    return {
        "layers": [layer_to_dict(layer) for layer in result.layers],
        "flatGraph": graph_to_dict(result.flat_graph),
    }


def tree_to_dict(tree: TreeNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "node": node_to_dict(tree.node),
        "children": [tree_to_dict(child) for child in tree.children],
        "depth": tree.depth,
    }
    # Absent rather than null, like an optional field on the client
    if tree.relationship_to_children is not None:
        data["relationshipToChildren"] = tree.relationship_to_children
    return data


def forest_to_dict(forest: Sequence[TreeNode]) -> list:
    return [tree_to_dict(tree) for tree in forest]


class GraphJSONEncoder(json.JSONEncoder):
    """
    JSON Encoder for package contracts.

    RULES:
    1. Known contracts use the dict renderings above.
    2. Enums use their .value.
    3. Sets -> Lists (sorted for determinism).
    4. Other dataclasses fall back to asdict().
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, KnowledgeGraph):
            return graph_to_dict(obj)
        if isinstance(obj, LayerResult):
            return layer_result_to_dict(obj)
        if isinstance(obj, Layer):
            return layer_to_dict(obj)
        if isinstance(obj, TreeNode):
            return tree_to_dict(obj)
        if isinstance(obj, KnowledgeNode):
            return node_to_dict(obj)
        if isinstance(obj, KnowledgeEdge):
            return edge_to_dict(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        if hasattr(obj, "__dataclass_fields__"):
            return asdict(obj)

        return super().default(obj)
