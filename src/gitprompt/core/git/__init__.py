"""Git operations subpackage.

This subpackage provides the read-only git queries behind each prompt probe,
with support for testing via fakes.
"""

from gitprompt.core.git.abc import ACTION_MARKERS, Git, detect_action_from_git_dir
from gitprompt.core.git.real import RealGit

__all__ = [
    "ACTION_MARKERS",
    "Git",
    "RealGit",
    "detect_action_from_git_dir",
]
