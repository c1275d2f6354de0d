"""quorumkit: sequential quorum vote aggregation.

Re-exports the public API so callers can write ``from quorumkit import aggregate``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import (  # noqa: F401
    InvalidProposalError,
    InvalidQuorumSizeError,
    ProposalDecodeError,
    QuorumKitError,
)
from .types import Proposal, ProposalId, TimestampMs  # noqa: F401
from .consensus import (  # noqa: F401
    QuorumAggregator,
    TallyStep,
    aggregate,
    decide,
    iter_tally,
    required_quorum_count,
    validate_quorum_size,
)
from .messages import ProposalBatch  # noqa: F401

__all__ = [
    "__version__",
    "QuorumKitError",
    "InvalidQuorumSizeError",
    "InvalidProposalError",
    "ProposalDecodeError",
    "Proposal",
    "ProposalId",
    "TimestampMs",
    "QuorumAggregator",
    "TallyStep",
    "aggregate",
    "decide",
    "iter_tally",
    "required_quorum_count",
    "validate_quorum_size",
    "ProposalBatch",
]
