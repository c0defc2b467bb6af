"""Frozen contact graph.

The Frozen half of the two-phase lifecycle. Wraps a networkx DiGraph
whose nodes are addressed by stable (entity_id, timestamp) keys and
materializes immutable TemporalNode objects plus the adjacency index.

Nothing here mutates after __init__: the DiGraph is passed through
nx.freeze and every public collection is a tuple or a mapping proxy.
"""
from typing import Iterator, Optional

import networkx as nx

from contacttrace.core.constants import DEFAULT_TENANT

from .index import AdjacencyIndex
from .node import NodeKey, TemporalNode


class ContactGraph:
    """Immutable time-expanded contact graph shared by all queries."""

    def __init__(
        self,
        graph: nx.DiGraph,
        sequences: dict[int, list[NodeKey]],
        event_count: int = 0,
        tenant_id: str = DEFAULT_TENANT,
    ):
        self._graph = graph if nx.is_frozen(graph) else nx.freeze(graph)
        self.event_count = event_count
        self.tenant_id = tenant_id

        self._nodes: dict[NodeKey, TemporalNode] = {
            key: TemporalNode(key[0], key[1], tuple(self._graph.successors(key)))
            for key in self._graph.nodes
        }
        self._index = AdjacencyIndex({
            entity_id: tuple(self._nodes[key] for key in keys)
            for entity_id, keys in sequences.items()
        })

    @property
    def index(self) -> AdjacencyIndex:
        return self._index

    def get_index(self) -> AdjacencyIndex:
        """Read-only mapping of entity id to its node sequence."""
        return self._index

    def get_node_sequence(self, entity_id: int) -> tuple[TemporalNode, ...]:
        """Node sequence for one entity, () if it never communicated."""
        return self._index.sequence(entity_id)

    def node(self, entity_id: int, timestamp: int) -> Optional[TemporalNode]:
        return self._nodes.get((entity_id, timestamp))

    def successors(self, key: NodeKey) -> tuple[NodeKey, ...]:
        return self._nodes[key].neighbors

    def edge_type(self, source: NodeKey, target: NodeKey) -> str:
        return self._graph.edges[source, target].get("edge_type", "UNKNOWN")

    def edges(self) -> Iterator[tuple[NodeKey, NodeKey, str]]:
        """Yield (source, target, edge_type) for every directed edge."""
        for u, v, data in self._graph.edges(data=True):
            yield u, v, data.get("edge_type", "UNKNOWN")

    def nodes(self) -> Iterator[TemporalNode]:
        return iter(self._nodes.values())

    def entities(self) -> tuple[int, ...]:
        return tuple(self._index)

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def stats(self) -> dict:
        """Summary counts for status reporting."""
        longest = max(
            ((entity_id, len(seq)) for entity_id, seq in self._index.items()),
            key=lambda x: x[1],
            default=(None, 0),
        )
        return {
            "events": self.event_count,
            "entities": len(self._index),
            "nodes": self.node_count(),
            "edges": self.edge_count(),
            "longest_sequence": longest,
        }

    def __contains__(self, key: NodeKey) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
