"""
Contracts

Immutable data types shared by every layer. No behavior beyond basic queries.
"""

from .base import Error, ErrorCode, Result
from .graph import KnowledgeNode, KnowledgeEdge, KnowledgeGraph
from .views import (
    Layer, LayerResult, TreeNode, TraversalDirection, parse_direction
)

__all__ = [
    'Error', 'ErrorCode', 'Result',
    'KnowledgeNode', 'KnowledgeEdge', 'KnowledgeGraph',
    'Layer', 'LayerResult', 'TreeNode', 'TraversalDirection', 'parse_direction',
]
