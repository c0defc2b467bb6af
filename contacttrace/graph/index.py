"""Read-only adjacency index: entity id -> time-ordered node sequence.

Lookups:
    - Whole mapping (Mapping interface)
    - One entity's sequence (empty tuple when unknown)
    - Earliest node at or after a timestamp (query start resolution)
"""
from bisect import bisect_left
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional

from .node import TemporalNode


class AdjacencyIndex(Mapping):
    """Immutable mapping from entity id to its node sequence.

    Sequences are tuples strictly increasing by timestamp. The backing
    dict is wrapped in a MappingProxyType, so neither the mapping nor
    its sequences can be mutated by callers.
    """

    def __init__(self, sequences: dict[int, tuple[TemporalNode, ...]]):
        self._sequences = MappingProxyType(dict(sequences))

    def __getitem__(self, entity_id: int) -> tuple[TemporalNode, ...]:
        return self._sequences[entity_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._sequences)

    def __len__(self) -> int:
        return len(self._sequences)

    def as_mapping(self) -> MappingProxyType:
        return self._sequences

    def sequence(self, entity_id: int) -> tuple[TemporalNode, ...]:
        """Node sequence for entity_id, or () if it never communicated."""
        return self._sequences.get(entity_id, ())

    def first_at_or_after(self, entity_id: int, timestamp: int) -> Optional[TemporalNode]:
        """Earliest node of entity_id with node.timestamp >= timestamp.

        Returns:
            The node, or None if the entity is unknown or has no activity
            at or after timestamp
        """
        sequence = self._sequences.get(entity_id)
        if not sequence:
            return None
        if sequence[-1].timestamp < timestamp:
            return None
        position = bisect_left(sequence, timestamp, key=lambda n: n.timestamp)
        return sequence[position]
