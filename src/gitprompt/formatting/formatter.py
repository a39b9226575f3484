"""Two-stage prompt formatting.

Stage 1 (`format_fields`) turns raw field values into formatted field strings
using each field's own template. Stage 2 (`render_outputs`) assembles every
declared output key from the formatted fields. Splitting the stages lets one
computed state feed several differently-shaped prompts.
"""

from gitprompt.cli.config_schema import PromptConfig
from gitprompt.formatting.template import compile_template
from gitprompt.status.models.status_data import FIELD_NAMES, FieldValues

BRANCH_DISPLAY_BUDGET = 32
ELLIPSIS = "…"


def shorten_branch(branch: str, budget: int = BRANCH_DISPLAY_BUDGET) -> str:
    """Shorten a branch name to at most `budget` characters.

    Long names keep their start and end around an ellipsis, e.g. a 40
    character name becomes 13 leading + "…" + 18 trailing characters. This
    bounds prompt width; it says nothing about git's name for the branch.
    """
    if len(branch) <= budget:
        return branch

    prefix_len = budget // 2 - 3
    suffix_len = budget - prefix_len - len(ELLIPSIS)
    return f"{branch[:prefix_len]}{ELLIPSIS}{branch[-suffix_len:]}"


def escape_prompt_percent(value: str) -> str:
    """Double `%` so zsh prompt expansion shows it literally."""
    return value.replace("%", "%%")


def _render(config: PromptConfig, name: str, values: dict[str, str]) -> str:
    template = config.template(name)
    if not template:
        return ""
    return compile_template(template).render(values)


def _count_text(values: FieldValues, count: int) -> str:
    # Fast mode only knows "differs", not how many files differ
    return str(count) if values.status_counted else ""


def format_fields(values: FieldValues, config: PromptConfig) -> dict[str, str]:
    """Stage 1: format every field from its raw value.

    Args:
        values: Raw values gathered from the probes
        config: Field templates and action overrides

    Returns:
        Mapping of every field name to its formatted string ("" when the field
        is not requested or its condition does not hold)
    """
    if config.escape_percent:
        untrusted = escape_prompt_percent
    else:
        untrusted = str

    formatted = dict.fromkeys(FIELD_NAMES, "")

    if values.branch:
        formatted["branch"] = _render(
            config, "branch", {"branch": untrusted(shorten_branch(values.branch))}
        )
    else:
        if values.commit:
            formatted["commit"] = _render(config, "commit", {"commit": untrusted(values.commit)})
        if values.position:
            formatted["position"] = _render(
                config, "position", {"position": untrusted(values.position)}
            )

    if values.remote:
        formatted["remote"] = _render(config, "remote", {"remote": untrusted(values.remote)})

    ahead, behind = values.ahead, values.behind
    if config.template("diverged") and ahead > 0 and behind > 0:
        formatted["diverged"] = _render(
            config, "diverged", {"ahead": str(ahead), "behind": str(behind)}
        )
    else:
        if ahead > 0:
            formatted["ahead"] = _render(config, "ahead", {"ahead": str(ahead)})
        if behind > 0:
            formatted["behind"] = _render(config, "behind", {"behind": str(behind)})

    if values.action:
        override = config.actions.get(values.action)
        display = override if override is not None else untrusted(values.action)
        formatted["action"] = _render(config, "action", {"action": display})

    if values.stashed > 0:
        formatted["stashed"] = _render(config, "stashed", {"stashed": str(values.stashed)})

    for name in ("indexed", "unindexed", "untracked"):
        count = getattr(values, name)
        if count:
            formatted[name] = _render(config, name, {name: _count_text(values, count)})

    if values.dirty is not None:
        if values.dirty > 0:
            formatted["dirty"] = _render(
                config, "dirty", {"dirty": _count_text(values, values.dirty)}
            )
        else:
            formatted["clean"] = _render(config, "clean", {})

    return formatted


def render_outputs(formatted: dict[str, str], outputs: dict[str, str]) -> dict[str, str]:
    """Stage 2: render every declared output key from the formatted fields.

    An output whose placeholders all resolve to empty strings renders as "",
    so surrounding decoration disappears outside a repository.
    """
    return {
        key: compile_template(template).render_if_any(formatted)
        for key, template in outputs.items()
    }
