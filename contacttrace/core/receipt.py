"""Core receipt primitives used by every contacttrace module.

Functions:
    dual_hash: SHA256:BLAKE3 dual-hash format
    emit_receipt: Emit receipt with required fields to stdout

Exceptions:
    StopRule: Base for every reported failure
    GraphFrozen, RepeatedBuild, GraphNotBuilt, InvalidQueryWindow,
    EventFormatError: lifecycle and input failures
"""
import hashlib
import json
from datetime import datetime, timezone

import blake3

from .constants import DEFAULT_TENANT


class StopRule(Exception):
    """Raised when stoprule triggers. Never catch silently."""
    pass


class GraphFrozen(StopRule):
    """Write attempted on an event log that has already been built."""
    pass


class RepeatedBuild(StopRule):
    """build() invoked on a log that was already consumed."""
    pass


class GraphNotBuilt(StopRule):
    """Query attempted before the contact graph was built."""
    pass


class InvalidQueryWindow(StopRule, ValueError):
    """Query window with x > y."""

    def __init__(self, x: int, y: int):
        super().__init__(f"Invalid query window: x={x} is after y={y}")
        self.x = x
        self.y = y


class EventFormatError(StopRule, ValueError):
    """Malformed line in an event file."""

    def __init__(self, line_no: int, line: str, reason: str):
        super().__init__(f"Line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line


def dual_hash(data: bytes | str | dict) -> str:
    """Compute dual hash in format 'sha256hex:blake3hex'.

    Pure function with no side effects.

    Args:
        data: Bytes, string, or dict to hash

    Returns:
        String in format 'sha256hex:blake3hex' (both 64 hex chars)
    """
    if isinstance(data, dict):
        data = json.dumps(data, sort_keys=True, separators=(",", ":"))
    if isinstance(data, str):
        data = data.encode("utf-8")

    sha256_hex = hashlib.sha256(data).hexdigest()
    blake3_hex = blake3.blake3(data).hexdigest()

    return f"{sha256_hex}:{blake3_hex}"


def emit_receipt(receipt_type: str, data: dict, tenant_id: str = DEFAULT_TENANT) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True.

    Args:
        receipt_type: Type of receipt (graph_build, graph_query, ignored_write, ...)
        data: Receipt payload data
        tenant_id: Tenant identifier (default: "default")

    Returns:
        Complete receipt dict with receipt_type, ts, tenant_id, payload_hash
    """
    tenant_id = data.get("tenant_id", tenant_id)

    payload_bytes = json.dumps(data, sort_keys=True).encode("utf-8")
    payload_hash = dual_hash(payload_bytes)

    receipt = {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "tenant_id": tenant_id,
        "payload_hash": payload_hash,
        **data
    }

    print(json.dumps(receipt, sort_keys=True), flush=True)

    return receipt
