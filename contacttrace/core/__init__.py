"""Core subpackage for contacttrace receipt primitives.

Exports all from receipt.py and constants.py.
"""
from .receipt import (
    dual_hash,
    emit_receipt,
    StopRule,
    GraphFrozen,
    RepeatedBuild,
    GraphNotBuilt,
    InvalidQueryWindow,
    EventFormatError,
)
from .constants import (
    DEFAULT_TENANT,
    BUILD_SLO_MS,
    QUERY_SLO_MS,
    CONTINUITY_EDGE,
    CROSS_EDGE,
)

__all__ = [
    # Receipt primitives
    "dual_hash",
    "emit_receipt",
    # Errors
    "StopRule",
    "GraphFrozen",
    "RepeatedBuild",
    "GraphNotBuilt",
    "InvalidQueryWindow",
    "EventFormatError",
    # Constants
    "DEFAULT_TENANT",
    "BUILD_SLO_MS",
    "QUERY_SLO_MS",
    "CONTINUITY_EDGE",
    "CROSS_EDGE",
]
