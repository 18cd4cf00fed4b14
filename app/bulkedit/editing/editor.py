"""Editor session for temporary manifests.

Opens a manifest in either an explicitly requested application or the
user's default handler, and blocks until that program exits.
"""

import logging
import os
import shlex
import sys
from pathlib import Path

from bulkedit.core.errors import EditorError
from bulkedit.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)

# Environment variables consulted for the default handler, in order.
EDITOR_ENV_VARS: tuple[str, ...] = ("VISUAL", "EDITOR")


def _platform_opener() -> list[str]:
    """Get the platform's "open with associated application" command.

    macOS `open` needs -W to wait for the application and -t to pick
    the default text editor.
    """
    if sys.platform == "darwin":
        return ["open", "-W", "-t"]
    return ["xdg-open"]


def resolve_opener(configured: str | None = None) -> list[str]:
    """Resolve the command used when no application was requested.

    Priority:
    1. The configured opener command
    2. $VISUAL
    3. $EDITOR
    4. The platform opener (xdg-open, or open -W -t on macOS)

    Command strings are split shell-style, so values like "code -w"
    work.

    Args:
        configured: Opener command from the configuration file.

    Returns:
        Command and leading arguments; the manifest path is appended.

    Raises:
        EditorError: If no usable opener is found.
    """
    candidates: list[str] = []
    if configured:
        candidates.append(configured)
    for var in EDITOR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    for candidate in candidates:
        try:
            command = shlex.split(candidate)
        except ValueError as e:
            logger.warning("Ignoring unparsable editor command %r: %s", candidate, e)
            continue
        if command:
            return command

    command = _platform_opener()
    if not command_exists(command[0]):
        msg = "No editor found: set $EDITOR or the 'opener' configuration option"
        raise EditorError(msg)
    return command


def open_in_editor(
    path: Path,
    application: str | None = None,
    *,
    opener: str | None = None,
) -> None:
    """Open a file for editing and wait until the editor exits.

    Args:
        path: File to open.
        application: Program to open the file with. If None, the default
            handler is used (see resolve_opener()).
        opener: Configured default handler command.

    Raises:
        EditorError: If the editor cannot be launched or exits with a
            non-zero status.
    """
    command = [application] if application else resolve_opener(opener)
    args = [*command, str(path)]

    logger.debug("Opening %s with %s", path, command)
    try:
        returncode = run_interactive(args)
    except OSError as e:
        msg = f"Cannot launch '{command[0]}': {e.strerror or e}"
        raise EditorError(msg) from e

    if returncode != 0:
        msg = f"'{command[0]}' exited with status {returncode} while editing '{path}'"
        raise EditorError(msg)
