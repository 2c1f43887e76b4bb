"""
School Sample Graph

Classes, teachers, students and departments connected by four
relationships. Used as the default graph of the API server and as a
fixture in tests.
"""

from ..contracts.graph import KnowledgeEdge, KnowledgeGraph, KnowledgeNode


def _node(node_id: str, label: str, node_type: str) -> KnowledgeNode:
    return KnowledgeNode(node_id=node_id, label=label, node_type=node_type)


def _edge(edge_id: str, source: str, target: str, relationship: str) -> KnowledgeEdge:
    return KnowledgeEdge(edge_id=edge_id, source=source, target=target, relationship=relationship)


SCHOOL_GRAPH = KnowledgeGraph(
    nodes=(
        # Classes
        _node("class-101", "Math 101", "class"),
        _node("class-102", "Physics 102", "class"),
        _node("class-201", "Chemistry 201", "class"),

        # Teachers
        _node("teacher-1", "Dr. Smith", "teacher"),
        _node("teacher-2", "Prof. Johnson", "teacher"),
        _node("teacher-3", "Dr. Williams", "teacher"),

        # Students
        _node("student-1", "Alice", "student"),
        _node("student-2", "Bob", "student"),
        _node("student-3", "Charlie", "student"),
        _node("student-4", "Diana", "student"),
        _node("student-5", "Eve", "student"),
        _node("student-6", "Frank", "student"),

        # Departments
        _node("dept-science", "Science Dept", "department"),
        _node("dept-math", "Math Dept", "department"),
    ),
    edges=(
        _edge("e1", "teacher-1", "class-101", "teaches"),
        _edge("e2", "teacher-2", "class-102", "teaches"),
        _edge("e3", "teacher-3", "class-201", "teaches"),
        _edge("e4", "teacher-1", "class-201", "teaches"),

        _edge("e5", "student-1", "class-101", "enrolled_in"),
        _edge("e6", "student-1", "class-102", "enrolled_in"),
        _edge("e7", "student-2", "class-101", "enrolled_in"),
        _edge("e8", "student-3", "class-102", "enrolled_in"),
        _edge("e9", "student-3", "class-201", "enrolled_in"),
        _edge("e10", "student-4", "class-201", "enrolled_in"),
        _edge("e11", "student-5", "class-101", "enrolled_in"),
        _edge("e12", "student-6", "class-102", "enrolled_in"),

        _edge("e13", "dept-math", "class-101", "offers"),
        _edge("e14", "dept-science", "class-102", "offers"),
        _edge("e15", "dept-science", "class-201", "offers"),

        _edge("e16", "teacher-1", "dept-math", "belongs_to"),
        _edge("e17", "teacher-2", "dept-science", "belongs_to"),
        _edge("e18", "teacher-3", "dept-science", "belongs_to"),
    ),
)

AVAILABLE_RELATIONSHIPS = ("teaches", "enrolled_in", "offers", "belongs_to")
