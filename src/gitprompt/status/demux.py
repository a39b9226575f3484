"""Probe result demultiplexing.

Routes each probe result to the parser for its field. Unknown results are
ignored so that one unexpected line never aborts a render.
"""

import logging
from collections.abc import Iterable

from gitprompt.status.classifier import apply_diff_result, apply_status_counts, classify_porcelain
from gitprompt.status.models.probe_results import (
    ActionResult,
    AheadBehindResult,
    CommitResult,
    DiffResult,
    PositionResult,
    ProbeResult,
    RemoteResult,
    StashResult,
    StatusScanResult,
    UnknownProbeResult,
    decode_probe_line,
)
from gitprompt.status.models.status_data import FieldValues

logger = logging.getLogger(__name__)

REMOTE_REF_PREFIX = "refs/remotes/"


def strip_remote_prefix(ref: str) -> str:
    """Turn "refs/remotes/origin/main" into "origin/main".

    Upstreams that are local branches ("refs/heads/main") keep their short
    name as well.
    """
    ref = ref.strip()
    if ref.startswith(REMOTE_REF_PREFIX):
        return ref[len(REMOTE_REF_PREFIX) :]
    if ref.startswith("refs/heads/"):
        return ref[len("refs/heads/") :]
    return ref


def apply_probe_result(values: FieldValues, result: ProbeResult) -> None:
    """Store one probe result on the field values."""
    if isinstance(result, ActionResult):
        values.action = result.action.strip()
    elif isinstance(result, StashResult):
        values.stashed = max(result.count, 0)
    elif isinstance(result, RemoteResult):
        values.remote = strip_remote_prefix(result.ref)
    elif isinstance(result, AheadBehindResult):
        values.ahead = max(result.ahead, 0)
        values.behind = max(result.behind, 0)
    elif isinstance(result, CommitResult):
        values.commit = result.sha.strip()
    elif isinstance(result, PositionResult):
        values.position = result.label.strip()
    elif isinstance(result, DiffResult):
        apply_diff_result(values, result)
    elif isinstance(result, StatusScanResult):
        apply_status_counts(values, classify_porcelain(result.entries))
    elif isinstance(result, UnknownProbeResult):
        logger.debug("Ignoring probe line with tag %r: %r", result.tag, result.payload_text)


def demultiplex(results: Iterable[ProbeResult], values: FieldValues | None = None) -> FieldValues:
    """Apply a stream of typed probe results.

    Args:
        results: Results in any order
        values: Accumulator to update (default: a fresh FieldValues)

    Returns:
        The updated FieldValues
    """
    target = values if values is not None else FieldValues()
    for result in results:
        apply_probe_result(target, result)
    return target


def demultiplex_lines(lines: Iterable[str], values: FieldValues | None = None) -> FieldValues:
    """Apply a stream of `<tag>:<payload>` lines.

    Blank lines are skipped; unknown tags and unparsable payloads are ignored.
    """
    decoded = (decode_probe_line(line) for line in lines)
    return demultiplex((result for result in decoded if result is not None), values)
