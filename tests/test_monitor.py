"""Tests for the CommunicationsMonitor session facade."""
import pytest

from contacttrace.core.receipt import GraphNotBuilt, InvalidQueryWindow, RepeatedBuild
from contacttrace.graph.node import TemporalNode
from contacttrace.monitor import CommunicationsMonitor


class TestCommunicationsMonitor:
    """Tests for the record -> build -> query lifecycle."""

    def test_scenario(self, scenario_monitor):
        """Facade answers the scenario query with the five-node path."""
        path = scenario_monitor.query(1, 3, 4, 8)
        assert [(n.entity_id, n.timestamp) for n in path] == [
            (1, 4), (2, 4), (2, 8), (4, 8), (3, 8)
        ]

    def test_append_after_build_ignored(self, scenario_monitor, capsys):
        """append_event after build() is a silent no-op."""
        scenario_monitor.append_event(1, 9, 5)
        assert scenario_monitor.get_node_sequence(9) == ()
        assert scenario_monitor.query(1, 9, 0, 100) is None

    def test_add_communication_alias(self, capsys):
        """add_communication records like append_event."""
        monitor = CommunicationsMonitor()
        monitor.add_communication(1, 2, 3)
        monitor.build()
        assert monitor.get_node_sequence(1) == (TemporalNode(1, 3),)

    def test_build_twice_raises(self, scenario_monitor):
        """A second build() is reported, not silently repeated."""
        with pytest.raises(RepeatedBuild):
            scenario_monitor.build()
        assert len(scenario_monitor.get_node_sequence(2)) == 2

    def test_query_before_build(self):
        """query() before build() raises GraphNotBuilt."""
        monitor = CommunicationsMonitor()
        monitor.append_event(1, 2, 3)
        with pytest.raises(GraphNotBuilt):
            monitor.query(1, 2, 0, 5)

    def test_reachable_before_build(self):
        """reachable() before build() raises GraphNotBuilt."""
        monitor = CommunicationsMonitor()
        monitor.append_event(1, 2, 3)
        with pytest.raises(GraphNotBuilt):
            monitor.reachable(1, 0, 5)

    def test_index_before_build(self):
        """Index accessors need a built graph."""
        monitor = CommunicationsMonitor()
        with pytest.raises(GraphNotBuilt):
            monitor.get_index()
        assert monitor.is_built is False

    def test_get_index(self, scenario_monitor):
        """get_index maps every communicating entity to its nodes."""
        index = scenario_monitor.get_index()
        assert sorted(index) == [1, 2, 3, 4]
        assert [n.timestamp for n in index[2]] == [4, 8]

    def test_invalid_window(self, scenario_monitor):
        """x > y raises InvalidQueryWindow."""
        with pytest.raises(InvalidQueryWindow):
            scenario_monitor.query(1, 3, 8, 4)

    def test_reachable(self, scenario_monitor):
        """reachable() lists infectable entities."""
        assert scenario_monitor.reachable(3, 8, 8) == {2, 3, 4}

    def test_empty_session(self, capsys):
        """Building with no events gives an empty, queryable graph."""
        monitor = CommunicationsMonitor()
        monitor.build()
        assert len(monitor.get_index()) == 0
        assert monitor.query(1, 2, 0, 10) is None
