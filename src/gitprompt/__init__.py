"""Render git repository state for shell prompts."""

from gitprompt.cli.config_schema import PromptConfig
from gitprompt.status.engine import compute_prompt
from gitprompt.status.models.status_data import PromptCache, PromptResult

__all__ = ["PromptCache", "PromptConfig", "PromptResult", "compute_prompt"]
