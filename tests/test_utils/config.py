"""Config builders shared by tests."""

from gitprompt.cli.config_schema import PromptConfig


def disabled_config(outputs: dict[str, str] | None = None) -> PromptConfig:
    """Create a config with every field template disabled.

    Args:
        outputs: Output templates to keep (default: no outputs)

    Returns:
        PromptConfig for which the engine plans no probes
    """
    return PromptConfig(fields={}, outputs=dict(outputs) if outputs else {})
