"""
Base Contracts and Shared Types

Foundational types shared by every layer of the package.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- Layers may import types but MUST NOT modify this module
- All types are frozen dataclasses for immutability guarantee
- Errors are values; the graph builders never raise
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from enum import Enum, auto


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    Only the loading boundary can fail; view construction cannot.
    """
    # Loading errors
    MALFORMED_PAYLOAD = auto()
    SOURCE_UNREADABLE = auto()
    DUPLICATE_NODE_ID = auto()
    DUPLICATE_EDGE_ID = auto()

    # Query errors
    UNKNOWN_DIRECTION = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and inspected.
    """
    code: ErrorCode
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )

    def context_dict(self) -> dict:
        return dict(self.context)


@dataclass(frozen=True)
class Result:
    """
    Generic result type for operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[object] = None
    error: Optional[Error] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @staticmethod
    def success(value: object) -> Result:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result:
        return Result(value=None, error=error)
