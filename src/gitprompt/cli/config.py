import os
import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from gitprompt.cli.config_schema import (
    DEFAULT_FIELD_TEMPLATES,
    DEFAULT_OUTPUTS,
    IGNORE_SUBMODULES_CHOICES,
    PromptConfig,
)
from gitprompt.status.models.status_data import FIELD_NAMES

CONFIG_ENV_VAR = "GITPROMPT_CONFIG"


def default_config_path() -> Path:
    """Return the config path, honoring $GITPROMPT_CONFIG and $XDG_CONFIG_HOME."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "gitprompt" / "config.toml"


def _string_table(data: dict[str, Any], section: str, cfg_path: Path) -> dict[str, str]:
    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{section}] must be a table in {cfg_path}")

    result: dict[str, str] = {}
    for key, value in table.items():
        if not isinstance(value, str):
            raise ValueError(f"{section}.{key} must be a string in {cfg_path}")
        result[str(key)] = value
    return result


def _bool_setting(data: dict[str, Any], key: str, cfg_path: Path) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean in {cfg_path}")
    return value


def load_config(path: Path | None = None) -> PromptConfig:
    """Load config.toml if present; otherwise return defaults.

    Example config:
      verbose = true
      ignore_submodules = "dirty"

      [fields]
      ahead = "+{ahead}"
      remote = "→{remote}"

      [outputs]
      prompt = "{branch}{ahead}{behind}{dirty}{clean}"
      rprompt = "{action}{stashed}"

      [actions]
      rebase-i = "REBASE"

    Field templates are merged over the built-in defaults. Outputs replace the
    default outputs entirely when the [outputs] table is present.

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values
    """
    cfg_path = path if path is not None else default_config_path()
    if not cfg_path.exists():
        return PromptConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    field_overrides = _string_table(data, "fields", cfg_path)
    unknown = sorted(set(field_overrides) - set(FIELD_NAMES))
    if unknown:
        raise ValueError(f"Unknown field(s) {', '.join(unknown)} in {cfg_path}")
    fields = {**DEFAULT_FIELD_TEMPLATES, **field_overrides}

    outputs = _string_table(data, "outputs", cfg_path) if "outputs" in data else DEFAULT_OUTPUTS
    actions = _string_table(data, "actions", cfg_path)

    ignore_submodules = data.get("ignore_submodules")
    if ignore_submodules is not None and ignore_submodules not in IGNORE_SUBMODULES_CHOICES:
        choices = ", ".join(IGNORE_SUBMODULES_CHOICES)
        raise ValueError(f"ignore_submodules must be one of {choices} in {cfg_path}")

    probe_timeout = data.get("probe_timeout")
    if probe_timeout is not None:
        if isinstance(probe_timeout, bool) or not isinstance(probe_timeout, int | float):
            raise ValueError(f"probe_timeout must be a number in {cfg_path}")
        if probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive in {cfg_path}")
        probe_timeout = float(probe_timeout)

    max_workers = data.get("max_workers", 8)
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise ValueError(f"max_workers must be a positive integer in {cfg_path}")

    verbose = _bool_setting(data, "verbose", cfg_path)
    escape_percent = _bool_setting(data, "escape_percent", cfg_path)

    return PromptConfig(
        fields=fields,
        outputs=dict(outputs),
        actions=actions,
        verbose=verbose,
        ignore_submodules=ignore_submodules,
        probe_timeout=probe_timeout,
        escape_percent=escape_percent,
        max_workers=max_workers,
    )


def config_to_toml(config: PromptConfig) -> str:
    """Serialize a PromptConfig as a TOML document."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("gitprompt configuration"))
    doc["verbose"] = config.verbose
    doc["escape_percent"] = config.escape_percent
    doc["max_workers"] = config.max_workers
    if config.ignore_submodules is not None:
        doc["ignore_submodules"] = config.ignore_submodules
    if config.probe_timeout is not None:
        doc["probe_timeout"] = config.probe_timeout

    fields = tomlkit.table()
    for name in FIELD_NAMES:
        fields[name] = config.template(name)
    doc["fields"] = fields

    outputs = tomlkit.table()
    for key, template in config.outputs.items():
        outputs[key] = template
    doc["outputs"] = outputs

    if config.actions:
        actions = tomlkit.table()
        for name, display in config.actions.items():
            actions[name] = display
        doc["actions"] = actions

    return tomlkit.dumps(doc)


def save_config(config: PromptConfig, path: Path | None = None) -> Path:
    """Save PromptConfig to config.toml.

    Creates the config directory if it doesn't exist.
    Uses tomlkit to preserve TOML formatting and comments.

    Returns:
        Path the config was written to
    """
    cfg_path = path if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(config_to_toml(config), encoding="utf-8")
    return cfg_path
