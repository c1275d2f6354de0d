"""Base types and data structures for quorum vote aggregation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from quorumkit.errors import InvalidProposalError

T = TypeVar("T")

ProposalId = int
TimestampMs = int


def now_ms() -> TimestampMs:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Proposal(Generic[T]):
    """A single vote-bearing record.

    Proposals sharing a ``proposal_id`` vote for the same outcome. The
    ``value`` is opaque and ``timestamp`` is kept for record-keeping only.
    """

    proposal_id: ProposalId
    value: T
    timestamp: TimestampMs = field(default_factory=now_ms)

    def __post_init__(self) -> None:
        """Reject identifiers and timestamps that are not plain integers."""
        if isinstance(self.proposal_id, bool) or not isinstance(self.proposal_id, int):
            raise InvalidProposalError(f"proposal_id must be an int, got {self.proposal_id!r}")
        if self.proposal_id < 0:
            raise InvalidProposalError(f"proposal_id must be non-negative, got {self.proposal_id}")
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise InvalidProposalError(f"timestamp must be an int (ms), got {self.timestamp!r}")


__all__ = ["Proposal", "ProposalId", "TimestampMs", "now_ms"]
