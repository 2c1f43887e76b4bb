"""
Core View Builders

Pure functions deriving layered and tree views from a KnowledgeGraph,
plus structural topology metrics.
"""

from .layers import build_layers
from .trees import build_forest, build_reverse_forest
from .topology import GraphMetrics, TopologyEngine

__all__ = [
    'build_layers', 'build_forest', 'build_reverse_forest',
    'GraphMetrics', 'TopologyEngine',
]
