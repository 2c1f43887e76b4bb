"""
View & Selection State

Immutable UI state shared between the 2D and 3D views: what is selected,
hovered or focused, and which layout is showing.

PRINCIPLES:
1. Immutable (Frozen)
2. No rendering logic
3. Transitions return new instances
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence, Tuple


class LayoutMode(Enum):
    HOME = "home"
    GRAPH = "graph"
    TREE_LIST = "tree-list"
    HORIZONTAL_TREE = "horizontal-tree"


class ViewMode(Enum):
    TWO_D = "2d"
    THREE_D = "3d"
    SPLIT = "split"


@dataclass(frozen=True)
class SyncState:
    """Selection shared by every view of the same graph."""
    selected_node_id: Optional[str] = None
    hovered_node_id: Optional[str] = None
    focused_layer_index: Optional[int] = None

    def select_node(self, node_id: Optional[str]) -> SyncState:
        return replace(self, selected_node_id=node_id)

    def hover_node(self, node_id: Optional[str]) -> SyncState:
        return replace(self, hovered_node_id=node_id)

    def focus_layer(self, layer_index: Optional[int]) -> SyncState:
        return replace(self, focused_layer_index=layer_index)

    def clear_selection(self) -> SyncState:
        return SyncState()


@dataclass(frozen=True)
class ViewState:
    """
    Layout and display mode plus the drill-down path through layers.

    Changing layout resets the drill-down path.
    """
    layout_mode: LayoutMode = LayoutMode.HOME
    view_mode: ViewMode = ViewMode.SPLIT
    layer_path: Tuple[str, ...] = field(default_factory=tuple)

    def with_layout(self, mode: LayoutMode) -> ViewState:
        return replace(self, layout_mode=mode, layer_path=())

    def with_view_mode(self, mode: ViewMode) -> ViewState:
        return replace(self, view_mode=mode)

    def drill_down(self, layer_id: str) -> ViewState:
        return replace(self, layer_path=self.layer_path + (layer_id,))

    def drill_up(self) -> ViewState:
        if not self.layer_path:
            return self
        return replace(self, layer_path=self.layer_path[:-1])

    @staticmethod
    def available_layouts(chain: Sequence[str]) -> Tuple[LayoutMode, ...]:
        """Layered layouts only make sense once a chain exists."""
        if not chain:
            return (LayoutMode.HOME,)
        return tuple(LayoutMode)
