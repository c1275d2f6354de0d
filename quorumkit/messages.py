"""JSON batch format for proposals fed to the aggregator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from quorumkit.errors import InvalidProposalError, ProposalDecodeError
from quorumkit.types import Proposal


def proposal_to_payload(proposal: Proposal[Any]) -> Dict[str, Any]:
    """Convert a proposal to its wire dictionary."""
    return {
        "id": proposal.proposal_id,
        "value": proposal.value,
        "timestamp": proposal.timestamp,
    }


def proposal_from_payload(payload: Any) -> Proposal[Any]:
    """Create a proposal from its wire dictionary.

    ``timestamp`` is optional and defaults to the current time.
    """
    if not isinstance(payload, dict):
        raise ProposalDecodeError(f"proposal must be an object, got {type(payload).__name__}")
    if "id" not in payload or "value" not in payload:
        raise ProposalDecodeError("proposal requires 'id' and 'value' fields")
    kwargs: Dict[str, Any] = {"proposal_id": payload["id"], "value": payload["value"]}
    if payload.get("timestamp") is not None:
        kwargs["timestamp"] = payload["timestamp"]
    try:
        return Proposal(**kwargs)
    except InvalidProposalError as exc:
        raise ProposalDecodeError(str(exc)) from exc


@dataclass
class ProposalBatch:
    """An ordered batch of proposals with an optional quorum threshold."""

    proposals: List[Proposal[Any]] = field(default_factory=list)
    quorum_size: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the object form of the batch."""
        data: Dict[str, Any] = {"proposals": [proposal_to_payload(p) for p in self.proposals]}
        if self.quorum_size is not None:
            data["quorum_size"] = self.quorum_size
        return data

    def to_json(self) -> str:
        """Serialize the batch to JSON."""
        return json.dumps(self.to_payload())

    @classmethod
    def from_payload(cls, payload: Any) -> "ProposalBatch":
        """Create a batch from a decoded JSON object or bare array."""
        if isinstance(payload, list):
            raw_proposals, quorum_size = payload, None
        elif isinstance(payload, dict):
            raw_proposals = payload.get("proposals", [])
            quorum_size = payload.get("quorum_size")
            if not isinstance(raw_proposals, list):
                raise ProposalDecodeError("'proposals' must be an array")
            if quorum_size is not None and (isinstance(quorum_size, bool) or not isinstance(quorum_size, int)):
                raise ProposalDecodeError(f"'quorum_size' must be an integer, got {quorum_size!r}")
        else:
            raise ProposalDecodeError(f"batch must be an object or array, got {type(payload).__name__}")
        return cls(
            proposals=[proposal_from_payload(item) for item in raw_proposals],
            quorum_size=quorum_size,
        )

    @classmethod
    def from_json(cls, json_str: str) -> "ProposalBatch":
        """Deserialize a batch from JSON."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise ProposalDecodeError(f"invalid JSON: {exc}") from exc
        return cls.from_payload(data)


__all__ = ["ProposalBatch", "proposal_to_payload", "proposal_from_payload"]
