"""Tests for RealGit output parsing with subprocess mocked out."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from gitprompt.core.git.abc import detect_action_from_git_dir
from gitprompt.core.git.real import RealGit


def _completed(stdout: str = "", returncode: int = 0) -> Mock:
    result = Mock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = ""
    return result


def test_commands_run_in_cwd_with_timeout() -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed("main\n")

        branch = RealGit(timeout=2.5).get_current_branch(Path("/repo"))

        assert branch == "main"
        mock_run.assert_called_once_with(
            ["git", "symbolic-ref", "--short", "-q", "HEAD"],
            cwd=Path("/repo"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
            timeout=2.5,
        )


def test_detached_head_has_no_branch() -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed("", returncode=1)

        assert RealGit().get_current_branch(Path("/repo")) is None


@pytest.mark.parametrize(
    "stdout, returncode, expected",
    [
        ("3\t1\n", 0, (3, 1)),
        ("0 0\n", 0, (0, 0)),
        ("", 128, None),
        ("oops\n", 0, None),
    ],
)
def test_count_ahead_behind(stdout: str, returncode: int, expected) -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(stdout, returncode)

        assert RealGit().count_ahead_behind(Path("/repo")) == expected


def test_count_stash_entries_without_stash() -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed("", returncode=128)

        assert RealGit().count_stash_entries(Path("/repo")) == 0


def test_diff_exit_code_passes_flags() -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(returncode=1)

        code = RealGit().diff_exit_code(Path("/repo"), cached=True, ignore_submodules="dirty")

        assert code == 1
        args = mock_run.call_args.args[0]
        assert args == [
            "git",
            "diff",
            "--no-ext-diff",
            "--quiet",
            "--cached",
            "--ignore-submodules=dirty",
        ]


def test_list_status_entries_skips_rename_sources() -> None:
    stdout = "?? new.txt\0R  renamed.txt\0original.txt\0 M mod.txt\0"
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.return_value = _completed(stdout)

        entries = RealGit().list_status_entries(Path("/repo"), ignore_submodules=None)

        assert entries == ["?? new.txt", "R  renamed.txt", " M mod.txt"]
        assert "--ignore-submodules" not in " ".join(mock_run.call_args.args[0])


def test_timeout_propagates() -> None:
    with patch("gitprompt.core.git.real.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=1.0)

        with pytest.raises(subprocess.TimeoutExpired):
            RealGit(timeout=1.0).get_upstream_ref(Path("/repo"))


@pytest.mark.parametrize(
    "markers, expected",
    [
        ([], ""),
        (["MERGE_HEAD"], "merge"),
        (["rebase-merge/interactive"], "rebase-i"),
        (["rebase-merge/"], "rebase-m"),
        (["rebase-apply/rebasing"], "rebase"),
        (["rebase-apply/applying"], "am"),
        (["rebase-apply/"], "am/rebase"),
        (["CHERRY_PICK_HEAD"], "cherry-pick"),
        (["REVERT_HEAD"], "revert"),
        (["BISECT_LOG"], "bisect"),
        (["BISECT_LOG", "MERGE_HEAD"], "merge"),
    ],
)
def test_detect_action_from_git_dir(tmp_path: Path, markers: list[str], expected: str) -> None:
    for marker in markers:
        path = tmp_path / marker
        if marker.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")

    assert detect_action_from_git_dir(tmp_path) == expected
