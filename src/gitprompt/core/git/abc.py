"""Git query interface used by the prompt engine.

This module provides a clean abstraction over the git subprocess calls the
engine needs, making the probe layer testable without a real repository.

Architecture:
- Git: Abstract base class defining the read-only queries
- RealGit: Production implementation using subprocess (see real.py)
- FakeGit: In-memory implementation for tests (see tests/fakes/git.py)

Every query is read-only. Queries never raise for "expected" negative
answers (no upstream, no stash, detached HEAD); they return an empty value
instead. Process-level failures (git missing, timeouts) propagate so the
caller decides how to degrade.
"""

from abc import ABC, abstractmethod
from pathlib import Path

# Order matters: the first marker present in the git dir wins.
ACTION_MARKERS: tuple[tuple[str, str], ...] = (
    ("rebase-merge/interactive", "rebase-i"),
    ("rebase-merge", "rebase-m"),
    ("rebase-apply/rebasing", "rebase"),
    ("rebase-apply/applying", "am"),
    ("rebase-apply", "am/rebase"),
    ("MERGE_HEAD", "merge"),
    ("CHERRY_PICK_HEAD", "cherry-pick"),
    ("REVERT_HEAD", "revert"),
    ("BISECT_LOG", "bisect"),
)


def detect_action_from_git_dir(git_dir: Path) -> str:
    """Map the marker files inside a git dir to an in-progress action name.

    Args:
        git_dir: Absolute path to the repository's git directory

    Returns:
        Action name (e.g. "rebase-i", "merge"), or "" when nothing is in progress
    """
    for marker, action in ACTION_MARKERS:
        if (git_dir / marker).exists():
            return action
    return ""


class Git(ABC):
    """Abstract interface for the git queries behind each prompt probe.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime queries - no test setup methods.
    """

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        """Check if a path exists on the filesystem."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch, or None when HEAD is detached."""
        ...

    @abstractmethod
    def get_in_progress_action(self, cwd: Path) -> str:
        """Get the name of the in-progress action (merge, rebase-i, ...), or ""."""
        ...

    @abstractmethod
    def count_stash_entries(self, cwd: Path) -> int:
        """Count stash entries. Returns 0 when there is no stash."""
        ...

    @abstractmethod
    def get_upstream_ref(self, cwd: Path) -> str:
        """Get the fully-qualified upstream ref of the current branch.

        Returns:
            Ref name such as "refs/remotes/origin/main", or "" when no
            upstream is configured
        """
        ...

    @abstractmethod
    def count_ahead_behind(self, cwd: Path) -> tuple[int, int] | None:
        """Count commits ahead of and behind the upstream.

        Returns:
            (ahead, behind) tuple, or None when there is no upstream
        """
        ...

    @abstractmethod
    def get_short_commit(self, cwd: Path) -> str:
        """Get the abbreviated hash of HEAD, or "" on an unborn branch."""
        ...

    @abstractmethod
    def describe_position(self, cwd: Path) -> str:
        """Get a tag-relative description of HEAD, or "" when none exists."""
        ...

    @abstractmethod
    def diff_exit_code(self, cwd: Path, *, cached: bool, ignore_submodules: str | None) -> int:
        """Run a quiet diff and return its exit code.

        Args:
            cwd: Working directory inside the repository
            cached: True compares the index against HEAD, False compares the
                    working tree against the index
            ignore_submodules: Value for --ignore-submodules, or None to omit it

        Returns:
            0 when there are no differences, non-zero otherwise
        """
        ...

    @abstractmethod
    def list_status_entries(self, cwd: Path, *, ignore_submodules: str | None) -> list[str]:
        """List porcelain status entries, one per changed or untracked path.

        Each entry starts with the two status columns (e.g. "M ", " M", "??")
        followed by a space and the path.
        """
        ...
