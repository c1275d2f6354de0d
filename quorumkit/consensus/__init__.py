"""Consensus package for quorumkit.

Provides the sequential quorum aggregator and threshold helpers. Utilities
are side-effect free and easy to test.
"""

from __future__ import annotations

from .aggregator import QuorumAggregator, TallyStep, aggregate, decide, iter_tally
from .quorum import required_quorum_count, validate_quorum_size

__all__ = [
    "QuorumAggregator",
    "TallyStep",
    "aggregate",
    "decide",
    "iter_tally",
    "required_quorum_count",
    "validate_quorum_size",
]
