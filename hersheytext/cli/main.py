"""Root command group."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from hersheytext import __version__
from hersheytext.cli.commands import fonts, render
from hersheytext.config import Config
from hersheytext.exceptions import ConfigError
from hersheytext.log import setup_logging

console = Console(stderr=True)


@click.group()
@click.version_option(__version__, prog_name="hersheytext")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (overrides the config)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Render text with Hershey and SVG stroke fonts."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    log_level = (log_level or config.log_level).upper()
    setup_logging(log_level, console=console)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = log_level


cli.add_command(render)
cli.add_command(fonts)


if __name__ == "__main__":
    cli()
