"""Quorum threshold helpers.

Small, pure functions for validating a vote threshold and deriving one from
an electorate size. They hold no state and can be unit-tested in isolation.
"""

from __future__ import annotations

from quorumkit.errors import InvalidQuorumSizeError


def validate_quorum_size(quorum_size: int) -> int:
    """Return ``quorum_size`` if it is a positive integer.

    Raises:
        InvalidQuorumSizeError: If the value is zero, negative, a bool or not
            an integer at all. A non-positive threshold would let the first
            proposal win unconditionally.
    """
    if isinstance(quorum_size, bool) or not isinstance(quorum_size, int):
        raise InvalidQuorumSizeError(f"quorum_size must be an int, got {quorum_size!r}")
    if quorum_size <= 0:
        raise InvalidQuorumSizeError(f"quorum_size must be positive, got {quorum_size}")
    return quorum_size


def required_quorum_count(num_voters: int, ratio: float = 2.0 / 3.0) -> int:
    """Return the minimum number of votes for a quorum among ``num_voters``.

    Args:
        num_voters: Size of the electorate.
        ratio: Fraction of voters required (default: 2/3).

    Returns:
        ``floor(num_voters * ratio) + 1``, the traditional "2/3 + 1" rule,
        capped at ``num_voters`` so a full electorate can always decide.
    """
    if isinstance(num_voters, bool) or not isinstance(num_voters, int) or num_voters <= 0:
        raise InvalidQuorumSizeError(f"num_voters must be a positive int, got {num_voters!r}")
    if not 0.0 < ratio <= 1.0:
        raise InvalidQuorumSizeError(f"ratio must be in (0, 1], got {ratio}")
    threshold = int(num_voters * ratio)
    return min(threshold + 1, num_voters)


__all__ = [
    "validate_quorum_size",
    "required_quorum_count",
]
