import click

from gitprompt.cli.config import config_to_toml, save_config
from gitprompt.cli.config_schema import PromptConfig
from gitprompt.core.context import GitPromptContext


@click.group("config")
def config_group() -> None:
    """Manage gitprompt configuration."""


@config_group.command("path")
@click.pass_obj
def config_path_cmd(ctx: GitPromptContext) -> None:
    """Print the config file location."""
    click.echo(str(ctx.config_path))


@config_group.command("show")
@click.pass_obj
def config_show_cmd(ctx: GitPromptContext) -> None:
    """Print the effective configuration as TOML."""
    click.echo(config_to_toml(ctx.config), nl=False)


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
def config_init_cmd(ctx: GitPromptContext, force: bool) -> None:
    """Write a config file populated with the default templates."""
    if ctx.config_path.exists() and not force:
        click.echo(
            f"Config already exists at {ctx.config_path} (use --force to overwrite)", err=True
        )
        raise SystemExit(1)

    path = save_config(PromptConfig(), ctx.config_path)
    click.echo(f"Wrote {path}", err=True)
