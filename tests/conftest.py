"""Shared graph fixtures."""

import pytest

from relchain.contracts.graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode
from relchain.data.school import SCHOOL_GRAPH


def make_node(node_id: str, node_type: str = "entity") -> KnowledgeNode:
    return KnowledgeNode(node_id=node_id, label=node_id, node_type=node_type)


def make_graph(node_ids, edges) -> KnowledgeGraph:
    """edges: iterable of (source, target, relationship)."""
    return KnowledgeGraph.of(
        (make_node(n) for n in node_ids),
        (
            KnowledgeEdge(edge_id=f"e{i}", source=s, target=t, relationship=r)
            for i, (s, t, r) in enumerate(edges, start=1)
        )
    )


@pytest.fixture
def school_graph():
    return SCHOOL_GRAPH


@pytest.fixture
def classroom_graph():
    """One teacher teaching one class, one student enrolled in it."""
    return KnowledgeGraph.of(
        (
            KnowledgeNode("T1", "Teacher", "teacher"),
            KnowledgeNode("C1", "Class", "class"),
            KnowledgeNode("S1", "Student", "student"),
        ),
        (
            KnowledgeEdge("e1", "T1", "C1", "teaches"),
            KnowledgeEdge("e2", "S1", "C1", "enrolled_in"),
        )
    )


@pytest.fixture
def cyclic_graph():
    """A -r-> B -r-> A"""
    return make_graph(["A", "B"], [("A", "B", "r"), ("B", "A", "r")])


@pytest.fixture
def graph_of():
    """Factory: graph_of(node_ids, [(source, target, relationship), ...])."""
    return make_graph
