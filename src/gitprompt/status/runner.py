"""Concurrent probe execution.

Each planned probe runs on its own worker thread and spawns its own git child
process. Results are fanned back in to the coordinator through a single
iterator, in completion order.
"""

import logging
import subprocess
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from gitprompt.core.git.abc import Git
from gitprompt.status.models.probe_results import (
    ActionResult,
    AheadBehindResult,
    CommitResult,
    DiffResult,
    PositionResult,
    ProbeKind,
    ProbeResult,
    RemoteResult,
    StashResult,
    StatusScanResult,
    empty_result,
)

logger = logging.getLogger(__name__)

ProbeFunction = Callable[[Git, Path, str | None], ProbeResult]


def _probe_action(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    return ActionResult(action=git.get_in_progress_action(cwd))


def _probe_stash(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    return StashResult(count=git.count_stash_entries(cwd))


def _probe_remote(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    return RemoteResult(ref=git.get_upstream_ref(cwd))


def _probe_ahead_behind(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    counts = git.count_ahead_behind(cwd)
    if counts is None:
        return empty_result(ProbeKind.AHEAD_BEHIND)
    ahead, behind = counts
    return AheadBehindResult(ahead=ahead, behind=behind)


def _probe_commit(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    return CommitResult(sha=git.get_short_commit(cwd))


def _probe_position(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    return PositionResult(label=git.describe_position(cwd))


def _probe_index_diff(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    exit_code = git.diff_exit_code(cwd, cached=True, ignore_submodules=ignore_submodules)
    return DiffResult(kind=ProbeKind.INDEX_DIFF, exit_code=exit_code)


def _probe_worktree_diff(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    exit_code = git.diff_exit_code(cwd, cached=False, ignore_submodules=ignore_submodules)
    return DiffResult(kind=ProbeKind.WORKTREE_DIFF, exit_code=exit_code)


def _probe_status_scan(git: Git, cwd: Path, ignore_submodules: str | None) -> ProbeResult:
    entries = git.list_status_entries(cwd, ignore_submodules=ignore_submodules)
    return StatusScanResult(entries=tuple(entries))


PROBE_FUNCTIONS: dict[ProbeKind, ProbeFunction] = {
    ProbeKind.ACTION: _probe_action,
    ProbeKind.STASH: _probe_stash,
    ProbeKind.REMOTE: _probe_remote,
    ProbeKind.AHEAD_BEHIND: _probe_ahead_behind,
    ProbeKind.COMMIT: _probe_commit,
    ProbeKind.POSITION: _probe_position,
    ProbeKind.INDEX_DIFF: _probe_index_diff,
    ProbeKind.WORKTREE_DIFF: _probe_worktree_diff,
    ProbeKind.STATUS_SCAN: _probe_status_scan,
}


def run_probe(
    git: Git, kind: ProbeKind, cwd: Path, ignore_submodules: str | None = None
) -> ProbeResult:
    """Run a single probe synchronously.

    Process-level failures (git not installed, timeout) degrade to the
    probe's empty result instead of propagating.
    """
    try:
        return PROBE_FUNCTIONS[kind](git, cwd, ignore_submodules)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Probe %s failed: %s: %s", kind.name, type(e).__name__, e)
        return empty_result(kind)


class ProbeRunner:
    """Runs planned probes concurrently and fans their results back in.

    Probes are independent: none reads another's result, and none writes to
    the repository. The runner joins on all of them; it never stops at the
    first result.
    """

    def __init__(self, git: Git, *, max_workers: int = 8) -> None:
        self._git = git
        self._max_workers = max_workers

    def run(
        self,
        cwd: Path,
        probes: Sequence[ProbeKind],
        *,
        ignore_submodules: str | None = None,
    ) -> Iterator[ProbeResult]:
        """Yield one result per planned probe, in completion order.

        Args:
            cwd: Directory inside the repository to run git in
            probes: Planned probes (distinct)
            ignore_submodules: Value for --ignore-submodules, or None

        Yields:
            Exactly one ProbeResult per probe. The iterator is exhausted only
            once every probe has finished.
        """
        if not probes:
            return

        workers = min(self._max_workers, len(probes))
        logger.debug("Running %d probe(s) on %d worker(s)", len(probes), workers)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="gitprompt-probe") as pool:
            futures = [
                pool.submit(run_probe, self._git, kind, cwd, ignore_submodules) for kind in probes
            ]
            for future in as_completed(futures):
                yield future.result()
