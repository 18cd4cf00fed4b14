"""Shared helpers for CLI commands.

This module provides the configuration loading and error exit helpers
used across multiple CLI command modules.
"""

from typing import NoReturn

import typer

from bulkedit.core.config import BulkEditConfig, ConfigError, load_config
from bulkedit.core.errors import BulkEditError
from bulkedit.utils.formatting import print_error


def require_config(ctx: typer.Context) -> BulkEditConfig:
    """Load the configuration or exit with a helpful error message.

    Global options stored on the context (--config, --stealth) are
    applied on top of the file.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        The effective configuration.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.ensure_object(dict)
    try:
        config = load_config(obj.get("config_path"))
    except ConfigError as e:
        fail(e)

    if obj.get("stealth"):
        config = config.model_copy(update={"stealth_mode": True})
    return config


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether --quiet was given."""
    return bool(ctx.ensure_object(dict).get("quiet", False))


def fail(error: BulkEditError) -> NoReturn:
    """Print an error and exit with its status.

    Args:
        error: The error that aborted the operation.

    Raises:
        typer.Exit: Always, with the error's exit code.
    """
    print_error(str(error))
    raise typer.Exit(code=int(error.exit_code)) from error
