"""Feature flags for contacttrace.

All flags start DISABLED. Deployment sequence:
1. All OFF (silent contract, receipts only)
2. STRICT_WRITES (appends after build raise instead of being dropped)
"""

# =============================================================================
# Event log
# =============================================================================

# Raise GraphFrozen on append after build instead of ignoring the write
FEATURE_STRICT_WRITES_ENABLED = False
