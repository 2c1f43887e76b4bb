"""
Relationship Chain Editing

Every edit returns a NEW editor; the chain itself is a plain tuple of
relationship labels that can be handed straight to the builders.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ChainEditor:
    """Immutable relationship chain plus the labels a user may pick from."""
    chain: Tuple[str, ...] = field(default_factory=tuple)
    available: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.chain

    def add(self, relationship: str) -> ChainEditor:
        return ChainEditor(chain=self.chain + (relationship,), available=self.available)

    def remove_at(self, index: int) -> ChainEditor:
        """Drop the label at `index`. Out-of-range indices leave the chain as is."""
        if not 0 <= index < len(self.chain):
            return self
        return ChainEditor(
            chain=self.chain[:index] + self.chain[index + 1:],
            available=self.available
        )

    def clear(self) -> ChainEditor:
        return ChainEditor(chain=(), available=self.available)

    def unused(self) -> Tuple[str, ...]:
        """Available labels not yet in the chain, in offered order."""
        return tuple(r for r in self.available if r not in self.chain)
