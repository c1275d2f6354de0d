"""Tests for the JSON proposal batch format."""

from __future__ import annotations

import json

import pytest

from quorumkit.errors import ProposalDecodeError
from quorumkit.messages import ProposalBatch, proposal_from_payload
from quorumkit.types import Proposal


def test_batch_object_form_is_decoded() -> None:
    """The object form carries proposals and an optional threshold."""
    batch = ProposalBatch.from_json(
        json.dumps(
            {
                "quorum_size": 2,
                "proposals": [
                    {"id": 1, "value": "A", "timestamp": 1700000000000},
                    {"id": 2, "value": {"nested": [1, 2]}, "timestamp": 1700000000001},
                ],
            }
        )
    )
    assert batch.quorum_size == 2
    assert batch.proposals == [
        Proposal(proposal_id=1, value="A", timestamp=1700000000000),
        Proposal(proposal_id=2, value={"nested": [1, 2]}, timestamp=1700000000001),
    ]


def test_batch_array_form_is_decoded() -> None:
    """A bare array is a batch without a threshold."""
    batch = ProposalBatch.from_json('[{"id": 3, "value": null, "timestamp": 5}]')
    assert batch.quorum_size is None
    assert batch.proposals == [Proposal(proposal_id=3, value=None, timestamp=5)]


def test_missing_timestamp_defaults_to_now() -> None:
    """Timestamps are optional on the wire."""
    proposal = proposal_from_payload({"id": 1, "value": "A"})
    assert proposal.timestamp > 0


def test_batch_to_json_writes_object_form() -> None:
    """Encoding emits the documented field names."""
    batch = ProposalBatch(proposals=[Proposal(proposal_id=1, value="A", timestamp=9)], quorum_size=1)
    assert json.loads(batch.to_json()) == {
        "quorum_size": 1,
        "proposals": [{"id": 1, "value": "A", "timestamp": 9}],
    }


def test_batch_without_threshold_omits_field() -> None:
    """An unset threshold is left out of the payload."""
    assert "quorum_size" not in ProposalBatch().to_payload()


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '"a string"',
        '{"proposals": {"id": 1}}',
        '{"proposals": [], "quorum_size": "2"}',
        '{"proposals": [], "quorum_size": true}',
        '[{"value": "A"}]',
        '[{"id": 1}]',
        '[{"id": -1, "value": "A"}]',
        '[{"id": 1.5, "value": "A"}]',
        '[{"id": 1, "value": "A", "timestamp": "yesterday"}]',
        "[42]",
    ],
)
def test_malformed_batches_raise_decode_error(raw: str) -> None:
    """Every malformed input surfaces as ProposalDecodeError."""
    with pytest.raises(ProposalDecodeError):
        ProposalBatch.from_json(raw)
