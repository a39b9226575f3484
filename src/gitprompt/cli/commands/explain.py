"""Explain command implementation - shows how each field was formatted."""

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitprompt.core.context import GitPromptContext
from gitprompt.status.engine import compute_prompt
from gitprompt.status.models.status_data import FIELD_NAMES


@click.command("explain")
@click.pass_obj
def explain_cmd(ctx: GitPromptContext) -> None:
    """Show every field's template and formatted value, then every output."""
    result = compute_prompt(ctx.git, ctx.cwd, ctx.config)
    if not result.in_repo:
        click.echo("Not inside a git repository", err=True)
        raise SystemExit(1)

    # Text() keeps repository-controlled values from being read as rich markup
    fields = Table(show_header=True, header_style="bold")
    fields.add_column("field", style="cyan", no_wrap=True)
    fields.add_column("template", no_wrap=True)
    fields.add_column("formatted", no_wrap=True)
    for name in FIELD_NAMES:
        template = ctx.config.template(name)
        formatted = result.formatted.get(name, "")
        template_cell = Text(template) if template else Text("(disabled)", style="dim")
        fields.add_row(name, template_cell, Text(formatted))

    outputs = Table(show_header=True, header_style="bold")
    outputs.add_column("output", style="cyan", no_wrap=True)
    outputs.add_column("rendered", no_wrap=True)
    for key, value in result.outputs.items():
        outputs.add_row(key, Text(value))

    console = Console()
    console.print(fields)
    console.print(outputs)
