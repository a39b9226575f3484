"""Repository discovery functionality.

Discovers the git repository enclosing a given path by walking up the
directory tree. Runs no git subprocess, so it is cheap enough to execute on
every prompt render.
"""

from dataclasses import dataclass
from pathlib import Path

from gitprompt.core.git.abc import Git
from gitprompt.core.git.real import RealGit


@dataclass(frozen=True)
class RepoContext:
    """Represents a located git repository."""

    root: Path
    git_path: Path  # <root>/.git, a directory or a gitdir file for linked worktrees


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Not an error: the engine short-circuits and renders every output key as
    an empty string.
    """

    message: str = "Not inside a git repository"


def discover_repo_or_sentinel(cwd: Path, git: Git | None = None) -> RepoContext | NoRepoSentinel:
    """Walk up from `cwd` to find a directory containing `.git`.

    A `.git` directory marks a regular checkout; a `.git` file marks a linked
    worktree or a submodule. Both count as a repository root.

    Args:
        cwd: Current working directory to start search from
        git: Git operations interface (defaults to RealGit)

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    ops = git if git is not None else RealGit()

    if not ops.path_exists(cwd):
        return NoRepoSentinel(message=f"Start path '{cwd}' does not exist")

    cur = cwd.resolve()
    for parent in [cur, *cur.parents]:
        git_path = parent / ".git"
        if ops.path_exists(git_path):
            return RepoContext(root=parent, git_path=git_path)

    return NoRepoSentinel(message="Not inside a git repository (no .git found up the tree)")
