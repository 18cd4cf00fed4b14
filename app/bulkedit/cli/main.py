"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from bulkedit import __version__
from bulkedit.cli.commands import config, remove, rename
from bulkedit.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="bulkedit",
    help="Rename and remove files in bulk from your text editor.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bulkedit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    stealth: Annotated[
        bool,
        typer.Option(
            "--stealth",
            help="Keep temporary files out of the config and cache directories.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to an alternative config file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """bulkedit - Rename and remove files in bulk from your text editor.

    File names are listed in a temporary file and opened in your editor.
    Delete lines to remove files, or edit them to rename files.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["stealth"] = stealth
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="remove")(remove.remove)
app.command(name="rename")(rename.rename)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
