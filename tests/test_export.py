"""Tests for DOT / JSON graph export."""
import json

from contacttrace.graph.export import to_dict, to_dot
from contacttrace.graph.query import infection_path


class TestExport:
    """Tests for export functions."""

    def test_to_dict_counts(self, scenario_graph):
        """Dict export lists every node and edge."""
        data = to_dict(scenario_graph)
        assert len(data["nodes"]) == 5
        assert len(data["edges"]) == 7
        assert data["index"]["2"] == [4, 8]

    def test_to_dict_is_json(self, scenario_graph):
        """Dict export serializes to JSON."""
        json.dumps(to_dict(scenario_graph))

    def test_to_dot_structure(self, scenario_graph):
        """DOT export has one rank per timestamp and each contact once."""
        dot = to_dot(scenario_graph)
        assert dot.startswith("digraph contacts {")
        assert dot.rstrip().endswith("}")
        assert dot.count("rank=same") == 2
        assert dot.count("dir=both") == 3
        assert dot.count("style=dashed") == 1

    def test_to_dot_highlights_path(self, scenario_graph, capsys):
        """Nodes on a given path are filled."""
        path = infection_path(scenario_graph, 1, 3, 4, 8)
        dot = to_dot(scenario_graph, path)
        assert dot.count("fillcolor=salmon") == 5
