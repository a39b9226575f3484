import logging
import sys
from pathlib import Path

import click

from gitprompt.cli.commands.config import config_group
from gitprompt.cli.commands.explain import explain_cmd
from gitprompt.cli.commands.probes import probes_cmd
from gitprompt.cli.commands.render import render_cmd
from gitprompt.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitprompt")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.config/gitprompt/config.toml.",
)
@click.option("--debug", is_flag=True, help="Log probe planning and failures to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    """Render git repository state for shell prompts."""
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(config_path=config_path)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None


cli.add_command(render_cmd)
cli.add_command(probes_cmd)
cli.add_command(explain_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `gitprompt` console script."""
    cli()
