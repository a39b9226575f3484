"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitprompt.cli.config import default_config_path, load_config
from gitprompt.cli.config_schema import PromptConfig
from gitprompt.core.git.abc import Git
from gitprompt.core.git.real import RealGit


@dataclass(frozen=True)
class GitPromptContext:
    """Immutable context holding all dependencies for gitprompt commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Current working directory at CLI invocation
    config: PromptConfig
    config_path: Path

    @staticmethod
    def for_test(
        git: Git,
        cwd: Path,
        config: PromptConfig | None = None,
        config_path: Path | None = None,
    ) -> "GitPromptContext":
        """Create a context for tests without touching the real config file.

        Args:
            git: Git implementation (usually FakeGit with test configuration)
            cwd: Current working directory path for the context
            config: PromptConfig to use (default: built-in defaults)
            config_path: Config file path reported by `config path` and used
                         by `config init` (default: /test/gitprompt/config.toml)

        Returns:
            Frozen GitPromptContext
        """
        return GitPromptContext(
            git=git,
            cwd=cwd,
            config=config if config is not None else PromptConfig(),
            config_path=(
                config_path if config_path is not None else Path("/test/gitprompt/config.toml")
            ),
        )


def get_safe_cwd() -> Path | None:
    """Return the current directory, or None if it has been deleted."""
    try:
        return Path.cwd()
    except FileNotFoundError:
        return None


def create_context(*, config_path: Path | None = None) -> GitPromptContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        config_path: Explicit config file path (default: default_config_path())

    Returns:
        GitPromptContext with RealGit and the loaded configuration

    Raises:
        ValueError: If the config file exists but is invalid
    """
    path = config_path if config_path is not None else default_config_path()
    config = load_config(path)

    # Repo discovery reports a nonexistent start path as "no repository"
    cwd = get_safe_cwd()
    if cwd is None:
        cwd = Path("/nonexistent-cwd")

    return GitPromptContext(
        git=RealGit(timeout=config.probe_timeout),
        cwd=cwd,
        config=config,
        config_path=path,
    )
