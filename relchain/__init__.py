"""
relchain

Layered and tree views of a relationship-labeled knowledge graph,
driven by an ordered chain of relationship labels.
"""

from .contracts import (
    KnowledgeNode, KnowledgeEdge, KnowledgeGraph,
    Layer, LayerResult, TreeNode, TraversalDirection,
)
from .core import build_layers, build_forest, build_reverse_forest
from .engine import ChainViewEngine, ChainViews

__all__ = [
    'KnowledgeNode', 'KnowledgeEdge', 'KnowledgeGraph',
    'Layer', 'LayerResult', 'TreeNode', 'TraversalDirection',
    'build_layers', 'build_forest', 'build_reverse_forest',
    'ChainViewEngine', 'ChainViews',
]
