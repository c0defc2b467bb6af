"""contacttrace: temporal reachability over communication events.

Public API:
- Session: CommunicationsMonitor
- Graph: EventLog, ContactGraph, TemporalNode, build_graph
- Query: infection_path, reachable_entities
- Core: emit_receipt, StopRule and its subclasses
"""
__version__ = "1.0.0"

from .core import (
    EventFormatError,
    GraphFrozen,
    GraphNotBuilt,
    InvalidQueryWindow,
    RepeatedBuild,
    StopRule,
    dual_hash,
    emit_receipt,
)
from .graph import (
    AdjacencyIndex,
    CommunicationEvent,
    ContactGraph,
    EventLog,
    TemporalNode,
    build_graph,
    graph_from_file,
    infection_path,
    reachable_entities,
)
from .monitor import CommunicationsMonitor

__all__ = [
    "__version__",
    # Session
    "CommunicationsMonitor",
    # Graph
    "EventLog",
    "CommunicationEvent",
    "ContactGraph",
    "AdjacencyIndex",
    "TemporalNode",
    "build_graph",
    "graph_from_file",
    # Query
    "infection_path",
    "reachable_entities",
    # Core
    "dual_hash",
    "emit_receipt",
    "StopRule",
    "GraphFrozen",
    "RepeatedBuild",
    "GraphNotBuilt",
    "InvalidQueryWindow",
    "EventFormatError",
]
