"""Render command implementation - prints the rendered prompt outputs."""

import json
import re
import shlex

import click

from gitprompt.core.context import GitPromptContext
from gitprompt.status.engine import compute_prompt
from gitprompt.status.models.status_data import PromptCache, PromptResult

DEFAULT_OUTPUT_KEY = "prompt"


def shell_variable_name(key: str) -> str:
    """Map an output key to a shell variable name (gitprompt_<key>)."""
    return "gitprompt_" + re.sub(r"[^A-Za-z0-9_]", "_", key)


def _emit_shell(result: PromptResult, changed: bool) -> None:
    # Values come from the repository; always quote them
    for key, value in result.outputs.items():
        click.echo(f"{shell_variable_name(key)}={shlex.quote(value)}")
    click.echo(f"gitprompt_last_branch={shlex.quote(result.cache.branch)}")
    click.echo(f"gitprompt_last_position={shlex.quote(result.cache.position)}")
    click.echo(f"gitprompt_changed={1 if changed else 0}")


def _emit_json(result: PromptResult, changed: bool) -> None:
    payload = {
        "in_repo": result.in_repo,
        "outputs": result.outputs,
        "branch": result.cache.branch,
        "position": result.cache.position,
        "changed": changed,
    }
    click.echo(json.dumps(payload, ensure_ascii=False))


@click.command("render")
@click.option("--key", default=None, help="Output key to print in text format (default: prompt).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "shell", "json"]),
    default="text",
    show_default=True,
    help="text prints one output; shell prints quoted assignments; json prints everything.",
)
@click.option("--last-branch", default="", help="Branch from the previous render.")
@click.option("--last-position", default="", help="Position from the previous render.")
@click.pass_obj
def render_cmd(
    ctx: GitPromptContext,
    key: str | None,
    output_format: str,
    last_branch: str,
    last_position: str,
) -> None:
    """Render the configured prompt outputs for the current directory."""
    if output_format == "text":
        selected = key if key is not None else DEFAULT_OUTPUT_KEY
        if selected not in ctx.config.outputs:
            click.echo(f"Error: Unknown output key: {selected}", err=True)
            raise SystemExit(1)

    result = compute_prompt(ctx.git, ctx.cwd, ctx.config)
    previous = PromptCache(branch=last_branch, position=last_position)
    changed = result.cache.changed_from(previous)

    if output_format == "shell":
        _emit_shell(result, changed)
    elif output_format == "json":
        _emit_json(result, changed)
    else:
        click.echo(result.outputs[selected])
