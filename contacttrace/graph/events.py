"""Append-only log of raw communication events.

The log is the Building half of the two-phase lifecycle: it accepts
writes until freeze() converts it into a frozen ContactGraph, after which
writes are ignored (or rejected under FEATURE_STRICT_WRITES_ENABLED).
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from contacttrace.config import features
from contacttrace.core.constants import DEFAULT_TENANT
from contacttrace.core.receipt import GraphFrozen, RepeatedBuild, emit_receipt


@dataclass(frozen=True)
class CommunicationEvent:
    """Entities a and b communicated at timestamp."""
    entity_a: int
    entity_b: int
    timestamp: int


class EventLog:
    """Append-only event buffer, writable only before construction."""

    def __init__(self, tenant_id: str = DEFAULT_TENANT):
        self.tenant_id = tenant_id
        self._events: list[CommunicationEvent] = []
        self._frozen = False
        self._ignored = 0

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def ignored_writes(self) -> int:
        return self._ignored

    def append(self, entity_a: int, entity_b: int, timestamp: int) -> Optional[CommunicationEvent]:
        """Record that entity_a and entity_b communicated at timestamp.

        O(1) amortized. No ordering is imposed on timestamps.

        Returns:
            The recorded event, or None if the log is frozen
        """
        if self._frozen:
            if features.FEATURE_STRICT_WRITES_ENABLED:
                raise GraphFrozen(
                    f"Event ({entity_a}, {entity_b}, {timestamp}) rejected: log already built"
                )
            self._ignored += 1
            emit_receipt("ignored_write", {
                "entity_a": entity_a,
                "entity_b": entity_b,
                "timestamp": timestamp,
                "ignored_total": self._ignored,
                "tenant_id": self.tenant_id,
            })
            return None

        event = CommunicationEvent(int(entity_a), int(entity_b), int(timestamp))
        self._events.append(event)
        return event

    record = append

    def extend(self, triples: Iterable[tuple[int, int, int]]) -> int:
        """Append many (a, b, timestamp) triples. Returns how many were recorded."""
        recorded = 0
        for a, b, timestamp in triples:
            if self.append(a, b, timestamp) is not None:
                recorded += 1
        return recorded

    def consume(self) -> list[CommunicationEvent]:
        """Hand the events to the builder exactly once and close the log."""
        if self._frozen:
            raise RepeatedBuild("Event log already consumed by a previous build")
        self._frozen = True
        return list(self._events)

    def freeze(self):
        """Build the contact graph from this log and return it.

        Returns:
            ContactGraph, the immutable queryable half of the lifecycle
        """
        from .build import build_graph
        return build_graph(self)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[CommunicationEvent]:
        return iter(tuple(self._events))
