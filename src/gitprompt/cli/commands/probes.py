"""Probes command implementation - prints raw tagged probe lines (debugging aid)."""

import click

from gitprompt.core.context import GitPromptContext
from gitprompt.core.repo_discovery import NoRepoSentinel
from gitprompt.status.engine import run_probes
from gitprompt.status.models.probe_results import encode_probe_line


@click.command("probes")
@click.pass_obj
def probes_cmd(ctx: GitPromptContext) -> None:
    """Run the planned probes and print one `<tag>:<payload>` line per probe."""
    probe_run = run_probes(ctx.git, ctx.cwd, ctx.config)
    if isinstance(probe_run, NoRepoSentinel):
        click.echo(probe_run.message, err=True)
        raise SystemExit(1)

    for result in probe_run.results:
        click.echo(encode_probe_line(result))
