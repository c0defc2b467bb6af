"""Temporal graph construction.

Consumes an EventLog once and materializes the time-expanded graph:

    - One node per (entity, distinct timestamp) observed
    - CONTINUITY edges: entity's earlier node -> its next node
    - CONTACT edges: both directions between the two entities' nodes
      at the timestamp of their event

Runs in O(m log m) for m events: one stable sort, one pass.
"""
import time

import networkx as nx

from contacttrace.core.constants import BUILD_SLO_MS, CONTINUITY_EDGE, CROSS_EDGE
from contacttrace.core.receipt import emit_receipt

from .backend import ContactGraph
from .events import EventLog
from .node import NodeKey


def build_graph(log: EventLog) -> ContactGraph:
    """Build and freeze the contact graph for log.

    Args:
        log: Event log to consume; it is frozen afterwards

    Returns:
        ContactGraph ready for queries

    Raises:
        RepeatedBuild: log was already consumed
    """
    start = time.perf_counter()

    events = sorted(log.consume(), key=lambda e: e.timestamp)

    graph = nx.DiGraph()
    sequences: dict[int, list[NodeKey]] = {}

    for event in events:
        current_a = _advance(graph, sequences, event.entity_a, event.timestamp)
        current_b = _advance(graph, sequences, event.entity_b, event.timestamp)

        # Self-communication resolves both ends to the same node
        if current_a != current_b:
            graph.add_edge(current_a, current_b, edge_type=CROSS_EDGE)
            graph.add_edge(current_b, current_a, edge_type=CROSS_EDGE)

    contact_graph = ContactGraph(
        graph,
        sequences,
        event_count=len(events),
        tenant_id=log.tenant_id,
    )

    elapsed_ms = (time.perf_counter() - start) * 1000

    if elapsed_ms > BUILD_SLO_MS:
        emit_receipt("graph_slo_violation", {
            "operation": "build",
            "elapsed_ms": elapsed_ms,
            "slo_ms": BUILD_SLO_MS,
            "tenant_id": log.tenant_id,
        })

    emit_receipt("graph_build", {
        "events": len(events),
        "entities": len(sequences),
        "nodes": contact_graph.node_count(),
        "edges": contact_graph.edge_count(),
        "elapsed_ms": elapsed_ms,
        "tenant_id": log.tenant_id,
    })

    return contact_graph


def _advance(
    graph: nx.DiGraph,
    sequences: dict[int, list[NodeKey]],
    entity_id: int,
    timestamp: int,
) -> NodeKey:
    """Return entity's node at timestamp, appending it if it is new.

    Events arrive in timestamp order, so only the last node of the
    sequence can share the timestamp. Same-timestamp events merge onto it.
    """
    key = (entity_id, timestamp)
    sequence = sequences.get(entity_id)

    if sequence is None:
        sequences[entity_id] = [key]
        graph.add_node(key, entity_id=entity_id, timestamp=timestamp)
        return key

    last = sequence[-1]
    if last[1] != timestamp:
        sequence.append(key)
        graph.add_node(key, entity_id=entity_id, timestamp=timestamp)
        graph.add_edge(last, key, edge_type=CONTINUITY_EDGE)

    return sequence[-1]
