"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bulkedit.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def printable(text: str) -> str:
    """Make a file name safe to write to a strict UTF-8 stream.

    Names read from the filesystem keep undecodable bytes as lone
    surrogates; those are shown as backslash escapes (e.g. "\\xff").
    """
    return os.fsencode(text).decode("utf-8", "backslashreplace")


class PrintableFilter(logging.Filter):
    """Render log messages with undecodable file names escaped."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = printable(record.getMessage())
        record.args = None
        return True


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=err_console, show_path=verbose)
    handler.addFilter(PrintableFilter())
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(printable(message))}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(printable(message))}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(printable(message))}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(printable(message))}[/]")
