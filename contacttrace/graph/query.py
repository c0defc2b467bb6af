"""Reachability queries over a frozen ContactGraph.

Query patterns:
    - Infection path: "Can c1 infected at x reach c2 by y, and how?"
    - Spread: "Which entities can c1 infected at x reach by y?"

Both run a breadth-first search in O(n + m). All traversal state (the
frontier and the predecessor map) is local to one call, so concurrent
queries against the same graph do not interfere.
"""
import time
from collections import deque
from typing import Optional

from contacttrace.core.constants import QUERY_SLO_MS
from contacttrace.core.receipt import GraphNotBuilt, InvalidQueryWindow, emit_receipt

from .backend import ContactGraph
from .node import NodeKey, TemporalNode


def infection_path(
    graph: ContactGraph,
    source_id: int,
    target_id: int,
    x: int,
    y: int,
) -> Optional[list[TemporalNode]]:
    """Find a transmission path from source at time x to target by time y.

    SLO: <100ms

    Args:
        graph: Frozen contact graph
        source_id: Entity hypothetically infected at time x
        target_id: Entity tested for infection by time y
        x: Infection time of source_id
        y: Deadline for target_id

    Returns:
        Nodes from source to target in chronological order, or None

    Raises:
        InvalidQueryWindow: x > y
        GraphNotBuilt: graph is None
    """
    _check(graph, x, y)
    start = time.perf_counter()

    path = None
    origin = graph.index.first_at_or_after(source_id, x)
    if origin is not None:
        path = _search(graph, origin, target_id, y)

    elapsed_ms = (time.perf_counter() - start) * 1000

    if elapsed_ms > QUERY_SLO_MS:
        emit_receipt("graph_slo_violation", {
            "query_type": "infection_path",
            "elapsed_ms": elapsed_ms,
            "slo_ms": QUERY_SLO_MS,
            "tenant_id": graph.tenant_id,
        })

    emit_receipt("graph_query", {
        "query_type": "infection_path",
        "source_id": source_id,
        "target_id": target_id,
        "x": x,
        "y": y,
        "found": path is not None,
        "path_length": len(path) if path else 0,
        "elapsed_ms": elapsed_ms,
        "tenant_id": graph.tenant_id,
    })

    return path


def reachable_entities(
    graph: ContactGraph,
    source_id: int,
    x: int,
    y: int,
) -> set[int]:
    """Entities that source_id, infected at time x, can reach by time y.

    Includes source_id itself when it has a node in [x, y].

    Raises:
        InvalidQueryWindow: x > y
        GraphNotBuilt: graph is None
    """
    _check(graph, x, y)
    start = time.perf_counter()

    reached: set[int] = set()
    origin = graph.index.first_at_or_after(source_id, x)

    # Edges never go back in time, so nodes past y cannot lead anywhere useful
    if origin is not None and origin.timestamp <= y:
        discovered = {origin.key}
        frontier = deque([origin.key])
        while frontier:
            current = frontier.popleft()
            reached.add(current[0])
            for succ in graph.successors(current):
                if succ not in discovered and succ[1] <= y:
                    discovered.add(succ)
                    frontier.append(succ)

    elapsed_ms = (time.perf_counter() - start) * 1000

    emit_receipt("graph_spread", {
        "source_id": source_id,
        "x": x,
        "y": y,
        "entities_reached": len(reached),
        "elapsed_ms": elapsed_ms,
        "tenant_id": graph.tenant_id,
    })

    return reached


def _check(graph: Optional[ContactGraph], x: int, y: int) -> None:
    if graph is None:
        raise GraphNotBuilt("Contact graph not built; call build() first")
    if x > y:
        raise InvalidQueryWindow(x, y)


def _search(
    graph: ContactGraph,
    origin: TemporalNode,
    target_id: int,
    y: int,
) -> Optional[list[TemporalNode]]:
    """BFS from origin until a node of target_id with timestamp <= y is discovered."""
    if origin.entity_id == target_id and origin.timestamp <= y:
        return [origin]

    predecessor: dict[NodeKey, Optional[NodeKey]] = {origin.key: None}
    frontier = deque([origin.key])

    while frontier:
        current = frontier.popleft()
        for succ in graph.successors(current):
            if succ in predecessor:
                continue
            predecessor[succ] = current
            if succ[0] == target_id and succ[1] <= y:
                return _reconstruct(graph, predecessor, succ)
            frontier.append(succ)

    return None


def _reconstruct(
    graph: ContactGraph,
    predecessor: dict[NodeKey, Optional[NodeKey]],
    end: NodeKey,
) -> list[TemporalNode]:
    path = []
    key: Optional[NodeKey] = end
    while key is not None:
        path.append(graph.node(*key))
        key = predecessor[key]
    path.reverse()
    return path
