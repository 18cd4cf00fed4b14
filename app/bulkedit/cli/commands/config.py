"""Configuration commands.

Provides commands to show, create and locate the bulkedit
configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from bulkedit.cli.types import fail, require_config
from bulkedit.core.config import BulkEditConfig, ConfigError, save_config
from bulkedit.core.paths import get_config_path
from bulkedit.utils.formatting import console, print_info, print_success, print_warning

app = typer.Typer(
    help="Show and manage the configuration file.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Get the config file path in effect (--config or the default)."""
    path: Path | None = ctx.ensure_object(dict).get("config_path")
    return path or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = require_config(ctx)
    path = _config_path(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="info")
    table.add_column("Value")
    table.add_column("Description", style="muted")

    fields = BulkEditConfig.model_fields
    for key, value in config.model_dump().items():
        shown = "[muted]unset[/]" if value is None else escape(str(value))
        table.add_row(key, shown, fields[key].description or "")
    table.add_row(
        "[dim]scratch_dir[/]",
        escape(str(config.scratch_dir)),
        "Where temporary files are created",
    )

    console.print(table)
    if not path.exists():
        print_info(f"No config file at {path}, showing defaults.")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_warning(f"Config file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(BulkEditConfig(), path)
    except ConfigError as e:
        fail(e)

    print_success(f"Config written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the path of the config file."""
    typer.echo(str(_config_path(ctx)))
