"""
Presentation State

Pure, immutable state transitions for a presentation layer that drives
chain edits and view switching. No rendering happens here.
"""

from .chain import ChainEditor
from .view import LayoutMode, ViewMode, SyncState, ViewState

__all__ = ['ChainEditor', 'LayoutMode', 'ViewMode', 'SyncState', 'ViewState']
