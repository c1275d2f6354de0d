"""Command-line entry point for quorumkit.

Usage::

    quorumkit aggregate votes.json --quorum 3
    cat votes.json | quorumkit aggregate - --voters 7 --ratio 0.5

The winning value is printed as JSON. When no id reaches quorum ``null`` is
printed and the process exits with :data:`EXIT_NO_QUORUM` so batch jobs can
branch on the outcome.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from pydantic import ValidationError

from quorumkit import __version__
from quorumkit.config import Settings, get_settings
from quorumkit.consensus import QuorumAggregator, required_quorum_count
from quorumkit.errors import QuorumKitError
from quorumkit.messages import ProposalBatch

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_QUORUM = 3


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``quorumkit`` command."""
    parser = argparse.ArgumentParser(
        prog="quorumkit",
        description="Sequential quorum vote aggregation over JSON proposal batches.",
    )
    parser.add_argument("--version", "-v", action="version", version=f"quorumkit {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: QUORUMKIT_LOG_LEVEL or WARNING)",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_agg = sub.add_parser("aggregate", help="Return the first value to reach quorum")
    p_agg.add_argument("file", help="Path to a JSON batch, or '-' for stdin")
    threshold = p_agg.add_mutually_exclusive_group()
    threshold.add_argument("--quorum", "-q", type=int, help="Votes required for one id to win")
    threshold.add_argument("--voters", "-n", type=int, help="Derive the quorum from the electorate size")
    p_agg.add_argument("--ratio", "-r", type=float, help="Fraction of voters required with --voters")
    p_agg.set_defaults(handler=_cmd_aggregate)
    return parser


def _read_source(source: str, stdin: TextIO) -> str:
    if source == "-":
        return stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_quorum(args: argparse.Namespace, batch: ProposalBatch, settings: Settings) -> int:
    """Pick the threshold: --quorum, then --voters, then the batch, then settings."""
    if args.quorum is not None:
        return args.quorum
    if args.voters is not None:
        ratio = args.ratio if args.ratio is not None else settings.quorum_ratio
        return required_quorum_count(args.voters, ratio)
    if batch.quorum_size is not None:
        return batch.quorum_size
    return settings.quorum_size


def _cmd_aggregate(args: argparse.Namespace, settings: Settings, stdin: TextIO, stdout: TextIO) -> int:
    batch = ProposalBatch.from_json(_read_source(args.file, stdin))
    aggregator: QuorumAggregator = QuorumAggregator(_resolve_quorum(args, batch, settings))
    LOGGER.info("Aggregating %d proposals with quorum %d", len(batch.proposals), aggregator.quorum_size)

    step = aggregator.decide(batch.proposals)
    if step is None:
        stdout.write("null\n")
        return EXIT_NO_QUORUM
    LOGGER.info("Proposal id %d won at index %d", step.proposal.proposal_id, step.index)
    stdout.write(json.dumps(step.value) + "\n")
    return EXIT_OK


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the CLI and return a process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.ratio is not None and args.voters is None:
        parser.error("--ratio requires --voters")

    try:
        settings = get_settings()
    except ValidationError as exc:
        stderr.write(f"quorumkit: invalid configuration: {exc}\n")
        return EXIT_ERROR

    logging.basicConfig(level=args.log_level or settings.log_level)

    try:
        return args.handler(args, settings, stdin, stdout)
    except (QuorumKitError, OSError) as exc:
        stderr.write(f"quorumkit: {exc}\n")
        return EXIT_ERROR


def app(argv: Optional[List[str]] = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


if __name__ == "__main__":
    app()
