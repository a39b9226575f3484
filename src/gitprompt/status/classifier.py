"""Dirty/clean classification.

Two mutually exclusive algorithms, selected by the `verbose` config flag:

- Fast mode uses up to two quiet diffs that only answer "differs or not".
  dirty becomes 1 when any diff reports differences; there are no per-file
  counts.
- Verbose mode runs one porcelain status scan and counts every path.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from gitprompt.status.models.probe_results import DiffResult, ProbeKind
from gitprompt.status.models.status_data import FieldValues

UNTRACKED_CODE = "??"


@dataclass(frozen=True)
class StatusCounts:
    """Per-path counts from a verbose status scan."""

    indexed: int
    unindexed: int
    untracked: int
    dirty: int


def classify_porcelain(entries: Iterable[str]) -> StatusCounts:
    """Count porcelain status entries.

    Args:
        entries: Lines of the form "XY path" where X is the index column and Y
                 the working tree column

    Returns:
        StatusCounts. Untracked paths ("??") count only as untracked; any other
        path counts as indexed when X is not blank and as unindexed when Y is
        not blank (possibly both). Every path counts once toward dirty.
    """
    indexed = 0
    unindexed = 0
    untracked = 0
    dirty = 0

    for entry in entries:
        if len(entry) < 2:
            continue

        dirty += 1
        code = entry[:2]
        if code == UNTRACKED_CODE:
            untracked += 1
            continue

        if code[0] != " ":
            indexed += 1
        if code[1] != " ":
            unindexed += 1

    return StatusCounts(indexed=indexed, unindexed=unindexed, untracked=untracked, dirty=dirty)


def apply_status_counts(values: FieldValues, counts: StatusCounts) -> None:
    """Store verbose-scan counts on the field values."""
    values.indexed = counts.indexed
    values.unindexed = counts.unindexed
    values.untracked = counts.untracked
    values.dirty = counts.dirty
    values.status_counted = True


def apply_diff_result(values: FieldValues, result: DiffResult) -> None:
    """Record one fast-mode diff.

    A non-zero exit code marks the matching field present and sets the
    shared dirty flag. A zero exit code never clears a flag set by the other
    diff.
    """
    present = 1 if result.differs else 0
    if result.kind is ProbeKind.INDEX_DIFF:
        values.indexed = present
    else:
        values.unindexed = present

    if result.differs:
        values.dirty = 1
    elif values.dirty is None:
        values.dirty = 0
