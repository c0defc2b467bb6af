"""Time-expanded contact graph for contacttrace.

Turns an unordered stream of (a, b, timestamp) communication events into a
frozen graph and answers "could c1 infected at x reach c2 by y?" queries.

Key concepts:
    - Each (entity, distinct timestamp) becomes a node
    - CONTINUITY edges carry an infection forward in time on one entity
    - CONTACT edges carry it both ways between entities at one instant

Usage:
    from contacttrace.graph import EventLog, infection_path

    log = EventLog()
    log.append(1, 2, 4)
    log.append(2, 4, 8)
    log.append(4, 3, 8)
    graph = log.freeze()

    path = infection_path(graph, 1, 3, 4, 8)

Performance SLOs:
    - Build (~100k events): <2000ms
    - Single query: <100ms
"""

from .backend import ContactGraph
from .build import build_graph
from .events import CommunicationEvent, EventLog
from .index import AdjacencyIndex
from .ingest import graph_from_file, ingest_file, read_events
from .node import NodeKey, TemporalNode
from .query import infection_path, reachable_entities

__all__ = [
    # Lifecycle
    "EventLog",
    "CommunicationEvent",
    "build_graph",
    "ContactGraph",
    # Index
    "AdjacencyIndex",
    "TemporalNode",
    "NodeKey",
    # Ingest
    "read_events",
    "ingest_file",
    "graph_from_file",
    # Query
    "infection_path",
    "reachable_entities",
]
