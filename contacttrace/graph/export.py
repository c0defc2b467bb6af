"""Export a frozen ContactGraph for visualization.

DOT output groups each timestamp into one rank so contacts line up
vertically and continuity edges run left to right.
"""
from collections import defaultdict

from contacttrace.core.constants import CROSS_EDGE

from .backend import ContactGraph
from .node import NodeKey


def _node_id(key: NodeKey) -> str:
    return f"{key[0]}@{key[1]}"


def to_dict(graph: ContactGraph) -> dict:
    """Export graph to dictionary format."""
    return {
        "nodes": [
            {
                "id": _node_id(node.key),
                "entity_id": node.entity_id,
                "timestamp": node.timestamp,
            }
            for node in graph.nodes()
        ],
        "edges": [
            {
                "source": _node_id(u),
                "target": _node_id(v),
                "type": edge_type,
            }
            for u, v, edge_type in graph.edges()
        ],
        "index": {
            str(entity_id): [node.timestamp for node in sequence]
            for entity_id, sequence in graph.get_index().items()
        },
    }


def to_dot(graph: ContactGraph, path: list | None = None) -> str:
    """Export graph to DOT, optionally highlighting an infection path."""
    highlighted = {node.key for node in path} if path else set()

    by_time = defaultdict(list)
    for node in graph.nodes():
        by_time[node.timestamp].append(node.key)

    lines = ["digraph contacts {"]
    lines.append('  rankdir="LR";')

    for timestamp in sorted(by_time):
        members = " ".join(f'"{_node_id(k)}";' for k in by_time[timestamp])
        lines.append(f"  {{ rank=same; {members} }}")

    for node in graph.nodes():
        style = ", style=filled, fillcolor=salmon" if node.key in highlighted else ""
        lines.append(f'  "{_node_id(node.key)}" [label="C{node.entity_id}, t={node.timestamp}"{style}];')

    seen_contacts = set()
    for u, v, edge_type in graph.edges():
        if edge_type == CROSS_EDGE:
            # Draw each bidirectional contact once
            pair = frozenset((u, v))
            if pair in seen_contacts:
                continue
            seen_contacts.add(pair)
            lines.append(f'  "{_node_id(u)}" -> "{_node_id(v)}" [dir=both];')
        else:
            lines.append(f'  "{_node_id(u)}" -> "{_node_id(v)}" [style=dashed];')

    lines.append("}")
    return "\n".join(lines)
