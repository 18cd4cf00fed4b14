"""CLI package for bulkedit.

This package contains the Typer application and all subcommands.
"""

from bulkedit.cli.main import app

__all__ = ["app"]
