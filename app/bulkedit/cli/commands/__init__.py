"""CLI commands for bulkedit.

This package contains all subcommand implementations.
"""

from bulkedit.cli.commands import config, remove, rename

__all__ = ["config", "remove", "rename"]
