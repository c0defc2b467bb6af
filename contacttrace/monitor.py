"""Session facade over the event log and the frozen contact graph.

A CommunicationsMonitor holds one analysis session: record events, build
once, then query as often as needed.
"""
from typing import Optional

from contacttrace.core.constants import DEFAULT_TENANT
from contacttrace.core.receipt import GraphNotBuilt, RepeatedBuild
from contacttrace.graph.backend import ContactGraph
from contacttrace.graph.events import EventLog
from contacttrace.graph.node import TemporalNode
from contacttrace.graph.query import infection_path, reachable_entities


class CommunicationsMonitor:
    """Record communications, build the contact graph, answer infection queries."""

    def __init__(self, tenant_id: str = DEFAULT_TENANT):
        self.tenant_id = tenant_id
        self._log = EventLog(tenant_id)
        self._graph: Optional[ContactGraph] = None

    @property
    def is_built(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> ContactGraph:
        if self._graph is None:
            raise GraphNotBuilt("Contact graph not built; call build() first")
        return self._graph

    def append_event(self, entity_a: int, entity_b: int, timestamp: int) -> None:
        """Record a communication. Ignored once build() has run."""
        self._log.append(entity_a, entity_b, timestamp)

    add_communication = append_event

    def build(self) -> ContactGraph:
        """Sort the recorded events and freeze them into the contact graph.

        Raises:
            RepeatedBuild: build() already ran for this session
        """
        if self._graph is not None:
            raise RepeatedBuild("Contact graph already built for this session")
        self._graph = self._log.freeze()
        return self._graph

    def query(self, source_id: int, target_id: int, x: int, y: int) -> Optional[list[TemporalNode]]:
        """Infection path from source_id at time x to target_id by time y, or None."""
        return infection_path(self.graph, source_id, target_id, x, y)

    def reachable(self, source_id: int, x: int, y: int) -> set[int]:
        return reachable_entities(self.graph, source_id, x, y)

    def get_index(self):
        """Read-only mapping of entity id to its time-ordered nodes."""
        return self.graph.get_index()

    def get_node_sequence(self, entity_id: int) -> tuple[TemporalNode, ...]:
        return self.graph.get_node_sequence(entity_id)
