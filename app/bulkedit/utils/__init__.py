"""Utility modules for bulkedit.

This module exports commonly used utility functions.
"""

from bulkedit.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from bulkedit.utils.shell import command_exists, run_interactive

__all__ = [
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_interactive",
]
