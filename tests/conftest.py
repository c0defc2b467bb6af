"""Pytest fixtures for contacttrace tests."""
import json

import pytest

from contacttrace.graph.events import EventLog
from contacttrace.monitor import CommunicationsMonitor


# (1,4) -> (2,4) -> (2,8) -> (4,8) -> (3,8)
SCENARIO_EVENTS = [(1, 2, 4), (2, 4, 8), (4, 3, 8)]


def read_receipts(captured: str) -> list[dict]:
    """Parse every JSON receipt line out of captured stdout."""
    receipts = []
    for line in captured.splitlines():
        line = line.strip()
        if line.startswith("{") and line.endswith("}"):
            try:
                receipts.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return receipts


@pytest.fixture
def scenario_events():
    """Provide the three-event infection scenario."""
    return list(SCENARIO_EVENTS)


@pytest.fixture
def scenario_graph(scenario_events, capsys):
    """Provide a frozen ContactGraph built from the scenario events."""
    log = EventLog()
    log.extend(scenario_events)
    graph = log.freeze()
    capsys.readouterr()
    return graph


@pytest.fixture
def scenario_monitor(scenario_events, capsys):
    """Provide a built CommunicationsMonitor for the scenario events."""
    monitor = CommunicationsMonitor()
    for a, b, t in scenario_events:
        monitor.append_event(a, b, t)
    monitor.build()
    capsys.readouterr()
    return monitor


@pytest.fixture
def event_file(tmp_path, scenario_events):
    """Write the scenario events to a whitespace-separated event file."""
    path = tmp_path / "events.txt"
    lines = ["# a b timestamp"] + [f"{a} {b} {t}" for a, b, t in scenario_events]
    path.write_text("\n".join(lines) + "\n")
    return path
