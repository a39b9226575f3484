"""Prompt state aggregation.

Drives one render end to end:

    locate repo -> look up HEAD -> plan probes -> run probes concurrently
    -> demultiplex results -> format fields -> render outputs

Everything is rebuilt on each call. The only state carried between calls is
the PromptCache the caller passes back in.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gitprompt.cli.config_schema import PromptConfig
from gitprompt.core.git.abc import Git
from gitprompt.core.repo_discovery import NoRepoSentinel, RepoContext, discover_repo_or_sentinel
from gitprompt.formatting.formatter import format_fields, render_outputs
from gitprompt.status.demux import demultiplex
from gitprompt.status.models.probe_results import ProbeKind, ProbeResult
from gitprompt.status.models.status_data import FieldValues, PromptCache, PromptResult
from gitprompt.status.planner import needs_head, plan_probes
from gitprompt.status.runner import ProbeRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeRun:
    """Outcome of the probe stage for one render."""

    repo: RepoContext
    branch: str | None
    planned: tuple[ProbeKind, ...]
    results: tuple[ProbeResult, ...]


def lookup_branch(git: Git, cwd: Path) -> str | None:
    """Look up the current branch, treating process failures as detached HEAD."""
    try:
        return git.get_current_branch(cwd)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Branch lookup failed: %s: %s", type(e).__name__, e)
        return None


def run_probes(
    git: Git,
    cwd: Path,
    config: PromptConfig,
    *,
    runner: ProbeRunner | None = None,
) -> ProbeRun | NoRepoSentinel:
    """Locate the repository, plan the probes and run them.

    Args:
        git: Git gateway
        cwd: Directory to describe
        config: Requested fields and mode flags
        runner: Probe runner (default: ProbeRunner over `git`)

    Returns:
        ProbeRun with every probe result, or NoRepoSentinel outside a repository
    """
    repo = discover_repo_or_sentinel(cwd, git)
    if isinstance(repo, NoRepoSentinel):
        logger.debug("No repository: %s", repo.message)
        return repo

    branch = lookup_branch(git, cwd) if needs_head(config) else None
    planned = plan_probes(config, branch)
    logger.debug(
        "Planned probes for %s (branch=%s): %s",
        repo.root,
        branch,
        ", ".join(kind.name for kind in planned) or "none",
    )

    if not planned:
        return ProbeRun(repo=repo, branch=branch, planned=planned, results=())

    if runner is None:
        runner = ProbeRunner(git, max_workers=config.max_workers)
    results = tuple(runner.run(cwd, planned, ignore_submodules=config.ignore_submodules))
    return ProbeRun(repo=repo, branch=branch, planned=planned, results=results)


def compute_prompt(
    git: Git,
    cwd: Path,
    config: PromptConfig,
    *,
    runner: ProbeRunner | None = None,
) -> PromptResult:
    """Compute the rendered prompt outputs for `cwd`.

    Outside a repository every declared output renders as "" and the
    returned cache is empty.
    """
    probe_run = run_probes(git, cwd, config, runner=runner)
    if isinstance(probe_run, NoRepoSentinel):
        return PromptResult(
            outputs=dict.fromkeys(config.outputs, ""),
            cache=PromptCache(),
            in_repo=False,
        )

    values = FieldValues(branch=probe_run.branch or "")
    demultiplex(probe_run.results, values)

    formatted = format_fields(values, config)
    outputs = render_outputs(formatted, config.outputs)

    return PromptResult(
        outputs=outputs,
        cache=PromptCache(branch=values.branch, position=values.position),
        formatted=formatted,
    )
