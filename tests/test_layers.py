"""
Layer Builder Tests
===================

Verifies that the layer builder:
1. Partitions every node into exactly one layer
2. Lets the earliest layer claim a node (first claim wins)
3. Seeds each step with the FULL previous target set
4. Tolerates dangling edges and labels that match nothing
"""

import pytest

from relchain.contracts.views import LayerResult
from relchain.core.layers import build_layers


def ids(layer):
    return list(layer.node_ids())


class TestEmptyChain:

    def test_no_layers_and_flat_graph_unchanged(self, school_graph):
        result = build_layers(school_graph, [])

        assert isinstance(result, LayerResult)
        assert result.layers == ()
        assert result.flat_graph is school_graph


class TestClassroomScenarios:

    def test_single_step_chain(self, classroom_graph):
        """teaches: teacher, then class, then the leftover student."""
        result = build_layers(classroom_graph, ["teaches"])

        assert [l.name for l in result.layers] == [
            'Sources of "teaches"', 'Targets of "teaches"', "Other Nodes"
        ]
        assert [ids(l) for l in result.layers] == [["T1"], ["C1"], ["S1"]]
        assert [l.relationship for l in result.layers] == ["teaches", "teaches", ""]

    def test_second_step_without_matching_edges_is_skipped(self, classroom_graph):
        """No enrolled_in edge starts at C1, so step two adds nothing."""
        result = build_layers(classroom_graph, ["teaches", "enrolled_in"])

        assert [l.layer_id for l in result.layers] == ["layer-0", "layer-1", "layer-unassigned"]
        assert ids(result.layers[-1]) == ["S1"]

    def test_flat_graph_is_input_graph(self, classroom_graph):
        result = build_layers(classroom_graph, ["teaches"])
        assert result.flat_graph is classroom_graph


class TestSchoolGraph:

    def test_teaches_layers(self, school_graph):
        result = build_layers(school_graph, ["teaches"])

        assert ids(result.layers[0]) == ["teacher-1", "teacher-2", "teacher-3"]
        assert ids(result.layers[1]) == ["class-101", "class-102", "class-201"]
        assert [e.edge_id for e in result.layers[1].edges] == ["e1", "e2", "e3", "e4"]
        assert ids(result.layers[2]) == [
            "student-1", "student-2", "student-3", "student-4", "student-5", "student-6",
            "dept-science", "dept-math",
        ]

    def test_two_step_chain(self, school_graph):
        result = build_layers(school_graph, ["belongs_to", "offers"])

        assert [l.layer_id for l in result.layers] == [
            "layer-0", "layer-1", "layer-2", "layer-unassigned"
        ]
        # Graph order, not edge order
        assert ids(result.layers[1]) == ["dept-science", "dept-math"]
        assert ids(result.layers[2]) == ["class-101", "class-102", "class-201"]
        assert [e.edge_id for e in result.layers[2].edges] == ["e13", "e14", "e15"]
        assert len(result.layers[3].nodes) == 6

    def test_root_layer_has_no_edges(self, school_graph):
        result = build_layers(school_graph, ["offers"])
        assert result.layers[0].edges == ()

    def test_node_count_covers_graph(self, school_graph):
        result = build_layers(school_graph, ["enrolled_in", "offers"])
        assert result.node_count == len(school_graph.nodes)


class TestClaiming:

    def test_claimed_nodes_are_not_reemitted(self, graph_of):
        """B -s-> A reaches A again, but A already sits in layer 0."""
        graph = graph_of(["A", "B", "C"], [("A", "B", "r"), ("B", "A", "s")])

        result = build_layers(graph, ["r", "s"])

        assert [ids(l) for l in result.layers] == [["A"], ["B"], ["C"]]
        assert result.layers[-1].name == "Other Nodes"

    def test_frontier_keeps_claimed_targets(self, graph_of):
        """
        B is claimed by the root layer but is also a target of step one,
        so it still sources the s-edge to D in step two.
        """
        graph = graph_of(
            ["A", "B", "C", "D"],
            [("A", "B", "r"), ("B", "C", "r"), ("B", "D", "s")]
        )

        result = build_layers(graph, ["r", "s"])

        assert [ids(l) for l in result.layers] == [["A", "B"], ["C"], ["D"]]
        assert [l.layer_id for l in result.layers] == ["layer-0", "layer-1", "layer-2"]

    def test_skipped_step_keeps_layer_numbering(self, graph_of):
        graph = graph_of(
            ["A", "B", "C"],
            [("A", "B", "r"), ("B", "A", "s"), ("A", "C", "t")]
        )

        result = build_layers(graph, ["r", "s", "t"])

        assert [l.layer_id for l in result.layers] == ["layer-0", "layer-1", "layer-3"]
        assert ids(result.layers[2]) == ["C"]

    def test_repeated_label_in_chain(self, graph_of):
        graph = graph_of(["A", "B", "C"], [("A", "B", "r"), ("B", "C", "r")])

        result = build_layers(graph, ["r", "r"])

        # Roots are A and B; step one claims C; step two finds nothing new
        assert [ids(l) for l in result.layers] == [["A", "B"], ["C"]]


class TestPermissiveInputs:

    def test_unknown_first_label(self, school_graph):
        result = build_layers(school_graph, ["mentors", "teaches"])

        assert len(result.layers) == 2
        assert result.layers[0].nodes == ()
        assert result.layers[0].name == 'Sources of "mentors"'
        assert result.layers[1].nodes == school_graph.nodes

    def test_dangling_edges_are_ignored(self, graph_of):
        graph = graph_of(["A", "B"], [("A", "ghost", "r"), ("ghost", "B", "r")])

        result = build_layers(graph, ["r", "r"])

        all_ids = [i for l in result.layers for i in l.node_ids()]
        assert "ghost" not in all_ids
        assert [ids(l) for l in result.layers] == [["A"], ["B"]]

    def test_empty_graph(self, graph_of):
        result = build_layers(graph_of([], []), ["r"])

        assert len(result.layers) == 1
        assert result.layers[0].nodes == ()

    @pytest.mark.parametrize("chain", [("teaches",), ["teaches"]])
    def test_chain_sequence_types(self, school_graph, chain):
        result = build_layers(school_graph, chain)
        assert len(result.layers) == 3
