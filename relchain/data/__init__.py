"""Bundled sample graphs."""

from .school import SCHOOL_GRAPH, AVAILABLE_RELATIONSHIPS

__all__ = ['SCHOOL_GRAPH', 'AVAILABLE_RELATIONSHIPS']
