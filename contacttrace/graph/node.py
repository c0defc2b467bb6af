"""Temporal nodes: one entity at one distinct timestamp."""
from dataclasses import dataclass, field

NodeKey = tuple[int, int]


@dataclass(frozen=True)
class TemporalNode:
    """A vertex (entity_id, timestamp) of the time-expanded contact graph.

    Equality and hashing use entity_id and timestamp only. Neighbours are
    stored as keys in the order their edges were created.
    """
    entity_id: int
    timestamp: int
    neighbors: tuple[NodeKey, ...] = field(default=(), compare=False, repr=False)

    @property
    def key(self) -> NodeKey:
        return (self.entity_id, self.timestamp)

    def out_neighbors(self) -> tuple[NodeKey, ...]:
        """Keys of nodes this node has an outgoing edge to."""
        return self.neighbors

    def to_dict(self) -> dict:
        return {
            "id": self.entity_id,
            "timestamp": self.timestamp,
            "neighbors": [list(k) for k in self.neighbors],
        }

    def __str__(self) -> str:
        return f"({self.entity_id}, {self.timestamp})"
