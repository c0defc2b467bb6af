"""Event file ingestion.

Reads communication events from a text file, one per line:

    {"a": 1, "b": 2, "timestamp": 4}     JSON object (c1/c2/t also accepted)
    1 2 4                                 three whitespace-separated integers

Blank lines and lines starting with '#' are skipped.
"""
import json
import time
from pathlib import Path

from contacttrace.core.constants import DEFAULT_TENANT, EVENT_KEY_ALIASES
from contacttrace.core.receipt import EventFormatError, emit_receipt

from .backend import ContactGraph
from .events import EventLog


def parse_line(line: str, line_no: int = 0) -> tuple[int, int, int]:
    """Parse one event line into an (a, b, timestamp) triple.

    Raises:
        EventFormatError: line is neither a valid JSON event nor three integers
    """
    text = line.strip()

    if text.startswith("{"):
        try:
            record = json.loads(text)
        except json.JSONDecodeError as e:
            raise EventFormatError(line_no, line, f"invalid JSON ({e.msg})") from e
        return tuple(_field(record, name, line_no, line) for name in ("a", "b", "timestamp"))

    parts = text.split()
    if len(parts) != 3:
        raise EventFormatError(line_no, line, f"expected 3 fields, got {len(parts)}")
    try:
        a, b, timestamp = (int(p) for p in parts)
    except ValueError as e:
        raise EventFormatError(line_no, line, "fields must be integers") from e
    return a, b, timestamp


def _field(record: dict, name: str, line_no: int, line: str) -> int:
    for alias in EVENT_KEY_ALIASES[name]:
        if alias in record:
            value = record[alias]
            if isinstance(value, bool) or not isinstance(value, int):
                raise EventFormatError(line_no, line, f"field '{alias}' must be an integer")
            return value
    raise EventFormatError(line_no, line, f"missing field '{name}'")


def read_events(path: str) -> list[tuple[int, int, int]]:
    """Read every event triple from an event file."""
    triples = []
    with open(Path(path), encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            triples.append(parse_line(line, line_no))
    return triples


def ingest_file(path: str, log: EventLog) -> dict:
    """Append every event in path to log.

    Args:
        path: Event file path
        log: Log to append to (must not be frozen)

    Returns:
        Summary dict with counts
    """
    start_time = time.perf_counter()

    triples = read_events(path)
    recorded = log.extend(triples)

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    summary = {
        "path": str(path),
        "total": len(triples),
        "recorded": recorded,
        "elapsed_ms": elapsed_ms,
    }

    emit_receipt("events_loaded", {
        **summary,
        "tenant_id": log.tenant_id,
    })

    return summary


def graph_from_file(path: str, tenant_id: str = DEFAULT_TENANT) -> ContactGraph:
    """Load an event file and return its frozen contact graph."""
    log = EventLog(tenant_id)
    ingest_file(path, log)
    return log.freeze()
