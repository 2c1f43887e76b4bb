"""
Presentation State Tests

All state objects are frozen; every transition returns a new instance.
"""

import pytest
from dataclasses import FrozenInstanceError

from relchain.config import AppConfig, ServerConfig
from relchain.data.school import AVAILABLE_RELATIONSHIPS
from relchain.state import ChainEditor, LayoutMode, SyncState, ViewMode, ViewState


class TestChainEditor:

    @pytest.fixture
    def editor(self):
        return ChainEditor(available=AVAILABLE_RELATIONSHIPS)

    def test_add_returns_new_editor(self, editor):
        edited = editor.add("teaches").add("enrolled_in")

        assert editor.chain == ()
        assert edited.chain == ("teaches", "enrolled_in")
        assert edited.available == AVAILABLE_RELATIONSHIPS

    def test_remove_at(self, editor):
        edited = editor.add("teaches").add("offers").add("belongs_to")

        assert edited.remove_at(1).chain == ("teaches", "belongs_to")

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_remove_out_of_range_is_noop(self, editor, index):
        edited = editor.add("teaches").add("offers").add("belongs_to")
        assert edited.remove_at(index) is edited

    def test_clear(self, editor):
        assert editor.add("teaches").clear().is_empty

    def test_unused_keeps_offered_order(self, editor):
        edited = editor.add("offers")
        assert edited.unused() == ("teaches", "enrolled_in", "belongs_to")

    def test_frozen(self, editor):
        with pytest.raises(FrozenInstanceError):
            editor.chain = ("teaches",)


class TestSyncState:

    def test_transitions(self):
        state = SyncState().select_node("teacher-1").hover_node("class-101").focus_layer(2)

        assert state == SyncState("teacher-1", "class-101", 2)
        assert state.hover_node(None).hovered_node_id is None
        assert state.clear_selection() == SyncState()


class TestViewState:

    def test_defaults(self):
        state = ViewState()
        assert (state.layout_mode, state.view_mode) == (LayoutMode.HOME, ViewMode.SPLIT)

    def test_drill_down_and_up(self):
        state = ViewState().drill_down("layer-0").drill_down("layer-1")

        assert state.layer_path == ("layer-0", "layer-1")
        assert state.drill_up().layer_path == ("layer-0",)

    def test_drill_up_on_empty_path(self):
        state = ViewState()
        assert state.drill_up() is state

    def test_layout_change_resets_path(self):
        state = ViewState().drill_down("layer-0").with_layout(LayoutMode.TREE_LIST)

        assert state.layout_mode == LayoutMode.TREE_LIST
        assert state.layer_path == ()

    def test_view_mode_keeps_path(self):
        state = ViewState().drill_down("layer-0").with_view_mode(ViewMode.THREE_D)
        assert state.layer_path == ("layer-0",)

    def test_available_layouts(self):
        assert ViewState.available_layouts([]) == (LayoutMode.HOME,)
        assert LayoutMode.HORIZONTAL_TREE in ViewState.available_layouts(["teaches"])


class TestConfig:

    def test_defaults(self):
        config = AppConfig()
        assert config.engine.cache_enabled is True
        assert config.server.port == 8000

    def test_from_env(self):
        config = ServerConfig.from_env({
            "RELCHAIN_PORT": "9001",
            "RELCHAIN_GRAPH_PATH": "/data/graph.json",
            "RELCHAIN_LOG_LEVEL": "debug",
        })

        assert config.port == 9001
        assert config.graph_path == "/data/graph.json"
        assert config.log_level == "DEBUG"
        assert config.host == "0.0.0.0"

    def test_empty_graph_path_means_none(self):
        assert ServerConfig.from_env({"RELCHAIN_GRAPH_PATH": ""}).graph_path is None

    @pytest.mark.parametrize("raw", ["eighty", "80.5", ""])
    def test_bad_port_falls_back_to_default(self, raw):
        assert ServerConfig.from_env({"RELCHAIN_PORT": raw}).port == 8000

    def test_bad_port_does_not_break_app_config(self):
        assert AppConfig.from_env({"RELCHAIN_PORT": "x"}).server.port == 8000
