"""Tests for the config command group."""

from pathlib import Path

from click.testing import CliRunner

from gitprompt.cli.cli import cli
from gitprompt.cli.config import load_config
from gitprompt.cli.config_schema import PromptConfig
from gitprompt.core.context import GitPromptContext
from tests.fakes.git import FakeGit


def test_config_path_prints_location(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    ctx = GitPromptContext.for_test(FakeGit(), tmp_path, config_path=cfg)
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "path"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.strip() == str(cfg)


def test_config_init_writes_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "gitprompt" / "config.toml"
    ctx = GitPromptContext.for_test(FakeGit(), tmp_path, config_path=cfg)
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 0
    assert f"Wrote {cfg}" in result.output
    assert load_config(cfg) == PromptConfig()


def test_config_init_refuses_to_overwrite(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("verbose = true\n", encoding="utf-8")
    ctx = GitPromptContext.for_test(FakeGit(), tmp_path, config_path=cfg)
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert cfg.read_text(encoding="utf-8") == "verbose = true\n"


def test_config_init_force_overwrites(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("verbose = true\n", encoding="utf-8")
    ctx = GitPromptContext.for_test(FakeGit(), tmp_path, config_path=cfg)
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "init", "--force"], obj=ctx)

    assert result.exit_code == 0
    assert load_config(cfg).verbose is False


def test_config_show_prints_toml() -> None:
    config = PromptConfig(verbose=True, outputs={"prompt": "{branch}"})
    ctx = GitPromptContext.for_test(FakeGit(), Path("/repo"), config=config)
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0
    assert "verbose = true" in result.output
    assert 'prompt = "{branch}"' in result.output


def test_invalid_config_file_reports_error(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("max_workers = -1\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["--config", str(cfg), "config", "path"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "max_workers" in result.output
