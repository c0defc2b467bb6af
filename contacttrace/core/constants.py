"""contacttrace constants and thresholds.

All magic numbers live here. No exceptions.
"""

# Receipts
DEFAULT_TENANT = "default"

# SLO thresholds
BUILD_SLO_MS = 2000        # Construction of a ~100k event log
QUERY_SLO_MS = 100         # Single reachability query

# Event file parsing: accepted JSON keys for each triple field
EVENT_KEY_ALIASES = {
    "a": ("a", "c1", "ci", "entity_a"),
    "b": ("b", "c2", "cj", "entity_b"),
    "timestamp": ("timestamp", "t", "ts"),
}

# Graph export
EXPORT_FORMATS = ("dot", "json")
CONTINUITY_EDGE = "CONTINUITY"
CROSS_EDGE = "CONTACT"
