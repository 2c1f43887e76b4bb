"""
Chain View Engine
=================

Single entry point for a presentation layer: given a graph and a
relationship chain, produce the layered view and the tree views.

Both builders are pure, so results can be memoised by
(graph, chain, direction). KnowledgeGraph is a frozen dataclass and
therefore hashable. A cached entry is only reused for the very graph
object it was built from: node metadata sits outside graph equality, and
results point back at their input graph.
"""

from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
from typing import Hashable, Sequence, Tuple
import logging

from .config import EngineConfig
from .contracts.graph import KnowledgeGraph
from .contracts.views import LayerResult, TraversalDirection, TreeNode
from .core.layers import build_layers
from .core.trees import build_forest

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheStats:
    entries: int
    hits: int
    misses: int
    evictions: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


@dataclass(frozen=True)
class ChainViews:
    """Every view derived for one (graph, chain) pair."""
    chain: Tuple[str, ...]
    layers: LayerResult
    forest: Tuple[TreeNode, ...]
    reverse_forest: Tuple[TreeNode, ...]


class ViewCache:
    """Bounded LRU cache for derived views."""

    def __init__(self, max_entries: int = 128):
        self._max_entries = max(0, max_entries)
        self._cache: OrderedDict = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable, owner: object = None):
        """Cached value for `key`, provided it was stored for this same `owner` object."""
        entry = self._cache.get(key)
        if entry is None or entry[0] is not owner:
            self._misses += 1
            return None
        self._hits += 1
        self._cache.move_to_end(key)
        return entry[1]

    def put(self, key: Hashable, value, owner: object = None) -> None:
        self._cache[key] = (owner, value)
        self._cache.move_to_end(key)
        while len(self._cache) > self._max_entries:
            self._cache.popitem(last=False)
            self._evictions += 1

    def clear(self):
        self._cache.clear()

    def get_stats(self) -> CacheStats:
        return CacheStats(
            entries=len(self._cache),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions
        )


class ChainViewEngine:
    """
    Orchestrates the layer and tree builders.

    Builders are re-run from scratch for every new (graph, chain); there is
    no incremental update.
    """

    def __init__(self, config: EngineConfig = None):
        self._config = config or EngineConfig()
        self._cache = ViewCache(self._config.max_cache_entries)

    def layers(self, graph: KnowledgeGraph, chain: Sequence[str]) -> LayerResult:
        chain = tuple(chain)
        return self._cached(graph, ("layers", graph, chain), lambda: build_layers(graph, chain))

    def forest(
        self,
        graph: KnowledgeGraph,
        chain: Sequence[str],
        direction: TraversalDirection = TraversalDirection.FORWARD
    ) -> Tuple[TreeNode, ...]:
        chain = tuple(chain)
        return self._cached(
            graph,
            ("forest", graph, chain, direction),
            lambda: build_forest(graph, chain, direction)
        )

    def views(self, graph: KnowledgeGraph, chain: Sequence[str]) -> ChainViews:
        chain = tuple(chain)
        return ChainViews(
            chain=chain,
            layers=self.layers(graph, chain),
            forest=self.forest(graph, chain, TraversalDirection.FORWARD),
            reverse_forest=self.forest(graph, chain, TraversalDirection.REVERSE),
        )

    def cache_stats(self) -> CacheStats:
        return self._cache.get_stats()

    def clear_cache(self):
        self._cache.clear()

    def _cached(self, graph, key, compute):
        if not self._config.cache_enabled:
            return compute()
        value = self._cache.get(key, owner=graph)
        if value is None:
            _LOGGER.debug("View cache miss for %s %s", key[0], list(key[2]))
            value = compute()
            self._cache.put(key, value, owner=graph)
        return value
