"""Sequential vote aggregation over a pre-collected batch of proposals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Generic, Iterable, Iterator, Optional, TypeVar

from quorumkit.config import Settings, get_settings
from quorumkit.consensus.quorum import validate_quorum_size
from quorumkit.types import Proposal, ProposalId

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TallyStep(Generic[T]):
    """Running tally state right after one proposal has been counted."""

    index: int
    proposal: Proposal[T]
    count: int
    reached: bool

    @property
    def value(self) -> T:
        """Return the value carried by the counted proposal."""
        return self.proposal.value


def _scan(proposals: Iterable[Proposal[T]], quorum_size: int) -> Iterator[TallyStep[T]]:
    tally: Dict[ProposalId, int] = {}
    for index, proposal in enumerate(proposals):
        count = tally.get(proposal.proposal_id, 0) + 1
        tally[proposal.proposal_id] = count
        reached = count >= quorum_size
        if reached:
            LOGGER.debug(
                "Quorum of %d reached by id %d at index %d", quorum_size, proposal.proposal_id, index
            )
        yield TallyStep(index=index, proposal=proposal, count=count, reached=reached)
        if reached:
            return
    LOGGER.debug("No quorum of %d among %d distinct ids", quorum_size, len(tally))


def iter_tally(proposals: Iterable[Proposal[T]], quorum_size: int) -> Iterator[TallyStep[T]]:
    """Lazily yield the running tally, one step per consumed proposal.

    The threshold is validated immediately. The iterator stops right after
    the first step whose ``reached`` flag is set, so input past the quorum
    point is never pulled from ``proposals``.

    Raises:
        InvalidQuorumSizeError: If ``quorum_size`` is not a positive int.
    """
    validate_quorum_size(quorum_size)
    return _scan(proposals, quorum_size)


def decide(proposals: Iterable[Proposal[T]], quorum_size: int) -> Optional[TallyStep[T]]:
    """Return the step that triggered quorum, or ``None`` if none did."""
    for step in iter_tally(proposals, quorum_size):
        if step.reached:
            return step
    return None


def aggregate(proposals: Iterable[Proposal[T]], quorum_size: int) -> Optional[T]:
    """Return the value of the first proposal whose id reaches ``quorum_size`` votes.

    Proposals are scanned strictly in order. Each one adds a vote to its
    ``proposal_id``; as soon as a count reaches the threshold the scan stops
    and the value of that triggering proposal is returned. Timestamps are
    ignored.

    Args:
        proposals: Ordered proposals; may be empty.
        quorum_size: Positive vote threshold.

    Returns:
        The winning value, or ``None`` when no id reached quorum.

    Raises:
        InvalidQuorumSizeError: If ``quorum_size`` is not a positive int.
    """
    step = decide(proposals, quorum_size)
    return step.value if step is not None else None


class QuorumAggregator(Generic[T]):
    """Aggregator bound to a fixed quorum threshold.

    No tally survives between calls; each call starts from an empty count.
    """

    def __init__(self, quorum_size: int) -> None:
        self._quorum_size = validate_quorum_size(quorum_size)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "QuorumAggregator[T]":
        """Build an aggregator using the configured ``quorum_size``."""
        if settings is None:
            settings = get_settings()
        return cls(settings.quorum_size)

    @property
    def quorum_size(self) -> int:
        """Return the number of votes required to decide."""
        return self._quorum_size

    def aggregate(self, proposals: Iterable[Proposal[T]]) -> Optional[T]:
        """Return the winning value for ``proposals`` or ``None``."""
        return aggregate(proposals, self._quorum_size)

    def decide(self, proposals: Iterable[Proposal[T]]) -> Optional[TallyStep[T]]:
        """Return the triggering tally step for ``proposals`` or ``None``."""
        return decide(proposals, self._quorum_size)

    def iter_tally(self, proposals: Iterable[Proposal[T]]) -> Iterator[TallyStep[T]]:
        """Lazily yield the running tally for ``proposals``."""
        return iter_tally(proposals, self._quorum_size)

    def __repr__(self) -> str:
        return f"QuorumAggregator(quorum_size={self._quorum_size})"


__all__ = [
    "TallyStep",
    "iter_tally",
    "decide",
    "aggregate",
    "QuorumAggregator",
]
