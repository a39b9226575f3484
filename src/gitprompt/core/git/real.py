"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess. Each query spawns exactly one git child process.
"""

import subprocess
from pathlib import Path

from gitprompt.core.git.abc import Git, detect_action_from_git_dir

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git queries execute actual git commands via subprocess. Non-zero exit
    codes are mapped to empty answers; OSError and subprocess.TimeoutExpired
    propagate to the caller.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        """Create a git gateway.

        Args:
            timeout: Per-command timeout in seconds, or None to wait forever
        """
        self._timeout = timeout

    def _run(self, args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
            timeout=self._timeout,
        )

    def path_exists(self, path: Path) -> bool:
        """Check if a path exists on the filesystem."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = self._run(["symbolic-ref", "--short", "-q", "HEAD"], cwd)
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if not branch:
            return None

        return branch

    def get_in_progress_action(self, cwd: Path) -> str:
        """Get the in-progress action by inspecting the git dir markers."""
        result = self._run(["rev-parse", "--absolute-git-dir"], cwd)
        if result.returncode != 0:
            return ""

        git_dir = Path(result.stdout.strip())
        return detect_action_from_git_dir(git_dir)

    def count_stash_entries(self, cwd: Path) -> int:
        """Count stash entries via the stash reflog."""
        result = self._run(["rev-list", "--walk-reflogs", "--count", "refs/stash"], cwd)
        if result.returncode != 0:
            return 0

        text = result.stdout.strip()
        if not text.isdigit():
            return 0

        return int(text)

    def get_upstream_ref(self, cwd: Path) -> str:
        """Get the fully-qualified upstream ref of the current branch."""
        result = self._run(["rev-parse", "--symbolic-full-name", "@{upstream}"], cwd)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def count_ahead_behind(self, cwd: Path) -> tuple[int, int] | None:
        """Count commits ahead/behind using a symmetric-difference rev-list."""
        result = self._run(["rev-list", "--count", "--left-right", "HEAD...@{upstream}"], cwd)
        if result.returncode != 0:
            return None

        parts = result.stdout.split()
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            return None

        return int(parts[0]), int(parts[1])

    def get_short_commit(self, cwd: Path) -> str:
        """Get the abbreviated hash of HEAD."""
        result = self._run(["rev-parse", "--short", "HEAD"], cwd)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def describe_position(self, cwd: Path) -> str:
        """Describe HEAD relative to the nearest tag."""
        result = self._run(["describe", "--tags", "HEAD"], cwd)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def diff_exit_code(self, cwd: Path, *, cached: bool, ignore_submodules: str | None) -> int:
        """Run `git diff --quiet` and return its exit code."""
        args = ["diff", "--no-ext-diff", "--quiet"]
        if cached:
            args.append("--cached")
        if ignore_submodules is not None:
            args.append(f"--ignore-submodules={ignore_submodules}")

        result = self._run(args, cwd)
        return result.returncode

    def list_status_entries(self, cwd: Path, *, ignore_submodules: str | None) -> list[str]:
        """List `git status --porcelain -z` entries."""
        args = ["status", "--porcelain", "-z"]
        if ignore_submodules is not None:
            args.append(f"--ignore-submodules={ignore_submodules}")

        result = self._run(args, cwd)
        if result.returncode != 0:
            return []

        entries: list[str] = []
        raw_entries = result.stdout.split("\0")
        index = 0
        while index < len(raw_entries):
            entry = raw_entries[index]
            index += 1
            if len(entry) < 4:
                continue

            entries.append(entry)

            # Renames/copies carry the original path as an extra entry
            if entry[0] in ("R", "C"):
                index += 1

        return entries
