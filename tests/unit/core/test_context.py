"""Tests for context creation."""

from pathlib import Path
from unittest.mock import patch

import pytest

from gitprompt.cli.config_schema import PromptConfig
from gitprompt.core.context import GitPromptContext, create_context, get_safe_cwd
from gitprompt.core.git.real import RealGit
from tests.fakes.git import FakeGit


def test_get_safe_cwd_with_valid_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert get_safe_cwd() == tmp_path.resolve()


@patch("pathlib.Path.cwd")
def test_get_safe_cwd_with_deleted_directory(mock_cwd) -> None:
    mock_cwd.side_effect = FileNotFoundError("No such file or directory")

    assert get_safe_cwd() is None


def test_create_context_loads_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("verbose = true\nprobe_timeout = 3\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    ctx = create_context(config_path=cfg)

    assert isinstance(ctx.git, RealGit)
    assert ctx.cwd == tmp_path.resolve()
    assert ctx.config.verbose is True
    assert ctx.config.probe_timeout == 3.0
    assert ctx.config_path == cfg


@patch("gitprompt.core.context.get_safe_cwd", return_value=None)
def test_create_context_with_deleted_cwd(mock_cwd, tmp_path: Path) -> None:
    ctx = create_context(config_path=tmp_path / "missing.toml")

    assert ctx.cwd == Path("/nonexistent-cwd")
    assert ctx.config == PromptConfig()


def test_for_test_defaults() -> None:
    git = FakeGit()

    ctx = GitPromptContext.for_test(git, Path("/repo"))

    assert ctx.git is git
    assert ctx.config == PromptConfig()
    assert ctx.config_path == Path("/test/gitprompt/config.toml")
