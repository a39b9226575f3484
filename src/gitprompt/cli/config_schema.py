"""Configuration schema definitions.

This module defines the typed dataclasses representing gitprompt configuration.
"""

from dataclasses import dataclass, field

IGNORE_SUBMODULES_CHOICES: tuple[str, ...] = ("none", "untracked", "dirty", "all")

DEFAULT_FIELD_TEMPLATES: dict[str, str] = {
    "branch": "{branch}",
    "commit": ":{commit}",
    "remote": "",
    "ahead": "↑{ahead}",
    "behind": "↓{behind}",
    "diverged": "↕{ahead}/{behind}",
    "action": "|{action}",
    "stashed": "⚑{stashed}",
    "position": "({position})",
    "indexed": "●{indexed}",
    "unindexed": "✚{unindexed}",
    "untracked": "…{untracked}",
    "dirty": "✗",
    "clean": "✔",
}

DEFAULT_OUTPUTS: dict[str, str] = {
    "prompt": (
        "[{branch}{commit}{position}{action}|"
        "{diverged}{ahead}{behind}{stashed}{indexed}{unindexed}{untracked}{dirty}{clean}]"
    ),
}


@dataclass(frozen=True)
class PromptConfig:
    """User configuration for the prompt engine.

    Stored in ~/.config/gitprompt/config.toml

    `fields` maps a field name to its format template; an empty template means
    the field is never computed. `outputs` maps an output key to a composite
    template over formatted fields. `actions` overrides the display name of an
    in-progress action (e.g. "rebase-i" -> "REBASE").
    """

    fields: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FIELD_TEMPLATES))
    outputs: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_OUTPUTS))
    actions: dict[str, str] = field(default_factory=dict)
    verbose: bool = False
    ignore_submodules: str | None = None
    probe_timeout: float | None = None
    escape_percent: bool = False
    max_workers: int = 8

    def template(self, name: str) -> str:
        """Return the template for a field, or "" when it is not requested."""
        return self.fields.get(name, "")

    def wants(self, *names: str) -> bool:
        """Check whether any of the given fields has a non-empty template."""
        return any(self.template(name) for name in names)
