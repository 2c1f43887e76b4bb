"""
Graph Loader

Turns the JSON-like graph shape used by the presentation layer into an
immutable KnowledgeGraph:

    {"nodes": [{"id", "label", "type", "metadata"?}],
     "edges": [{"id", "source", "target", "relationship"}]}

BOUNDARY ENFORCEMENT:
- Failures are returned as Result.failure(Error), never raised
- Dangling edges are accepted; the builders tolerate them
- Node and edge ids must be unique
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from ..contracts.base import Error, ErrorCode, Result
from ..contracts.graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode

_LOGGER = logging.getLogger(__name__)


class NodePayload(BaseModel):
    id: str
    label: str
    type: str
    metadata: Optional[Dict[str, Any]] = None


class EdgePayload(BaseModel):
    id: str
    source: str
    target: str
    relationship: str


class GraphPayload(BaseModel):
    nodes: List[NodePayload] = []
    edges: List[EdgePayload] = []


def load_graph(payload: Mapping[str, Any]) -> Result:
    """Validate and convert a graph payload. Result.value is a KnowledgeGraph."""
    try:
        parsed = GraphPayload.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return Result.failure(Error(
            code=ErrorCode.MALFORMED_PAYLOAD,
            message=f"Invalid graph payload: {first['msg']}"
        ).with_context("location", location))

    nodes: List[KnowledgeNode] = []
    seen_nodes = set()
    for item in parsed.nodes:
        if item.id in seen_nodes:
            return Result.failure(Error(
                code=ErrorCode.DUPLICATE_NODE_ID,
                message=f"Duplicate node id: {item.id}"
            ).with_context("node_id", item.id))
        seen_nodes.add(item.id)
        metadata = dict(item.metadata or {})
        nodes.append(KnowledgeNode(
            node_id=item.id,
            label=item.label,
            node_type=item.type,
            metadata=metadata
        ))

    edges: List[KnowledgeEdge] = []
    seen_edges = set()
    for item in parsed.edges:
        if item.id in seen_edges:
            return Result.failure(Error(
                code=ErrorCode.DUPLICATE_EDGE_ID,
                message=f"Duplicate edge id: {item.id}"
            ).with_context("edge_id", item.id))
        seen_edges.add(item.id)
        edges.append(KnowledgeEdge(
            edge_id=item.id,
            source=item.source,
            target=item.target,
            relationship=item.relationship
        ))

    graph = KnowledgeGraph.of(nodes, edges)
    dangling = len(graph.dangling_edges())
    if dangling:
        _LOGGER.warning("Loaded graph has %d dangling edge(s); they will be ignored", dangling)
    _LOGGER.info("Loaded graph with %d nodes and %d edges", len(nodes), len(edges))
    return Result.success(graph)


def load_graph_file(path: Union[str, Path]) -> Result:
    """Read a JSON graph file and load it."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except OSError as e:
        return Result.failure(Error(
            code=ErrorCode.SOURCE_UNREADABLE,
            message=f"Cannot read graph file: {e}"
        ).with_context("path", str(path)))
    except json.JSONDecodeError as e:
        return Result.failure(Error(
            code=ErrorCode.MALFORMED_PAYLOAD,
            message=f"Graph file is not valid JSON: {e.msg}"
        ).with_context("path", str(path)))

    if not isinstance(payload, dict):
        return Result.failure(Error(
            code=ErrorCode.MALFORMED_PAYLOAD,
            message="Graph file must contain a JSON object"
        ).with_context("path", str(path)))

    result = load_graph(payload)
    if result.is_failure:
        return Result.failure(result.error.with_context("path", str(path)))
    return result
