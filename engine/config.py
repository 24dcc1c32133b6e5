"""
config.py — Comparison Constants
=================================
The comparison semantics are a teaching choice, not a measurement, so
the numbers live here as named defaults instead of being re-derived.
"""

from dataclasses import dataclass


COMPARE_COST        = 1       # work units per compare event
SWAP_COST           = 3       # work units per swap / shift event
TIE_EPSILON_S       = 0.005   # durations this close are a tie
MIN_INTERVAL_MS     = 1200    # shared clock never steps faster than this
DEFAULT_INTERVAL_MS = 1200


@dataclass(frozen=True)
class ComparisonConfig:
    compare_cost:        int   = COMPARE_COST
    swap_cost:           int   = SWAP_COST
    tie_epsilon_s:       float = TIE_EPSILON_S
    min_interval_ms:     float = MIN_INTERVAL_MS
    default_interval_ms: float = DEFAULT_INTERVAL_MS


DEFAULT_CONFIG = ComparisonConfig()
