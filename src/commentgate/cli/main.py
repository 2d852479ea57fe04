"""commentgate CLI."""

from pathlib import Path

import click

from commentgate import __version__
from commentgate.cli.check import check_command
from commentgate.cli.languages import languages_command
from commentgate.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="commentgate")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of .commentgate/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """commentgate - flags new comments and docstrings in agent edits."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(check_command, name="check")
cli.add_command(languages_command, name="languages")


if __name__ == "__main__":
    cli()
