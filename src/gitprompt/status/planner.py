"""Probe planning.

Decides which probes a render needs from the set of requested fields. A probe
is only planned when some requested field consumes its result.
"""

from gitprompt.cli.config_schema import PromptConfig
from gitprompt.status.models.probe_results import ProbeKind

# Fields whose rendering depends on knowing the current branch.
HEAD_DEPENDENT_FIELDS: tuple[str, ...] = (
    "branch",
    "remote",
    "ahead",
    "behind",
    "diverged",
    "commit",
    "position",
)

STATUS_FIELDS: tuple[str, ...] = ("indexed", "unindexed", "untracked", "dirty", "clean")


def needs_head(config: PromptConfig) -> bool:
    """Check whether the current branch must be looked up before planning."""
    return config.wants(*HEAD_DEPENDENT_FIELDS)


def plan_probes(config: PromptConfig, branch: str | None) -> tuple[ProbeKind, ...]:
    """Produce the minimal ordered list of probes for this render.

    Args:
        config: Requested field templates and mode flags
        branch: Current branch, or None when HEAD is detached (or unknown)

    Returns:
        Tuple of distinct probes; empty when nothing needs probing

    Fast mode only plans the index diff when `indexed` itself is requested.
    dirty/clean are then decided from the working-tree diff alone, so a
    clean working tree never triggers the index probe.
    """
    planned: list[ProbeKind] = []

    def enqueue(kind: ProbeKind) -> None:
        if kind not in planned:
            planned.append(kind)

    if config.wants("action"):
        enqueue(ProbeKind.ACTION)

    if config.wants("stashed"):
        enqueue(ProbeKind.STASH)

    if branch is not None:
        if config.wants("remote"):
            enqueue(ProbeKind.REMOTE)
        if config.wants("ahead", "behind", "diverged"):
            enqueue(ProbeKind.AHEAD_BEHIND)
    else:
        if config.wants("commit"):
            enqueue(ProbeKind.COMMIT)
        if config.wants("position"):
            enqueue(ProbeKind.POSITION)

    if config.verbose:
        if config.wants(*STATUS_FIELDS):
            enqueue(ProbeKind.STATUS_SCAN)
    else:
        if config.wants("unindexed", "dirty", "clean"):
            enqueue(ProbeKind.WORKTREE_DIFF)
        if config.wants("indexed"):
            enqueue(ProbeKind.INDEX_DIFF)

    return tuple(planned)
