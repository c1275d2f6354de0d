"""Exception types raised by quorumkit."""

from __future__ import annotations


class QuorumKitError(Exception):
    """Base class for all quorumkit errors."""


class InvalidQuorumSizeError(QuorumKitError, ValueError):
    """Raised when a quorum threshold is not a positive integer."""


class InvalidProposalError(QuorumKitError, ValueError):
    """Raised when a proposal carries an unusable identifier or timestamp."""


class ProposalDecodeError(QuorumKitError, ValueError):
    """Raised when a proposal batch cannot be decoded from JSON."""


__all__ = [
    "QuorumKitError",
    "InvalidQuorumSizeError",
    "InvalidProposalError",
    "ProposalDecodeError",
]
