"""Argument resolution for bulk remove and bulk rename.

Decides once, before any temporary file exists, what a bulk operation
works on and which application edits the manifest.
"""

import errno
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from bulkedit.core.errors import InvalidApplicationError, InvalidTargetError
from bulkedit.models.target import RemoveRequest, Target
from bulkedit.utils.shell import command_exists

logger = logging.getLogger(__name__)


def resolve_remove_request(
    first: str | None = None,
    second: str | None = None,
) -> RemoveRequest:
    """Resolve the optional ``[target] [application]`` arguments.

    Precedence for the first argument:
    - missing: the ambient working listing, default application.
    - an existing directory: that directory.
    - an executable found in PATH: the editor application, and the
      ambient working listing as target.
    - anything else: InvalidTargetError.

    The second argument, when given, must be an executable.

    Args:
        first: Target directory or application name.
        second: Application name.

    Returns:
        The resolved RemoveRequest.

    Raises:
        InvalidTargetError: If the first argument is neither a directory
            nor an application.
        InvalidApplicationError: If the second argument is not an
            executable in PATH.
    """
    if not first:
        return RemoveRequest(target=Target.ambient())

    exists = os.path.lexists(first)
    if not Path(first).is_dir():
        if command_exists(first):
            logger.debug("'%s' is an application, using the working directory", first)
            return RemoveRequest(target=Target.ambient(), application=first)
        code = errno.ENOTDIR if exists else errno.ENOENT
        msg = f"'{first}': {os.strerror(code)}"
        raise InvalidTargetError(msg)

    # Drop one trailing separator ("dir/" -> "dir"), but keep "/" and "./"
    if len(first) > 2 and first.endswith(os.sep):
        first = first[:-1]
    target = Target.directory(first)

    if not second:
        return RemoveRequest(target=target)

    if not command_exists(second):
        msg = f"'{second}': {os.strerror(errno.ENOENT)}"
        raise InvalidApplicationError(msg)

    return RemoveRequest(target=target, application=second)


@dataclass(slots=True)
class RenameInput:
    """Paths accepted for a bulk rename.

    Attributes:
        paths: Valid paths, in argument order.
        skipped: (path, reason) for every argument that was rejected.
    """

    paths: list[str] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)


def prepare_rename_paths(args: Sequence[str]) -> RenameInput:
    """Validate the paths given to bulk rename.

    Arguments starting with "./" or "../" are made absolute. Every
    argument must exist (symlinks are not followed) and may appear only
    once; missing and repeated ones are reported and skipped, not fatal. The caller reports skipped
    arguments before deciding whether anything is left to rename.

    Args:
        args: Paths from the command line.

    Returns:
        RenameInput with accepted and skipped paths.
    """
    result = RenameInput()
    seen: set[str] = set()

    for arg in args:
        if "\n" in arg:
            result.skipped.append((arg, "File name contains a newline"))
            continue

        path = arg
        if path.startswith(("./", "../")):
            path = os.path.abspath(path)

        try:
            os.lstat(path)
        except OSError as e:
            reason = e.strerror or str(e)
            logger.debug("Skipping '%s': %s", arg, reason)
            result.skipped.append((arg, reason))
            continue

        key = os.path.abspath(path)
        if key in seen:
            result.skipped.append((arg, "Duplicate argument"))
            continue
        seen.add(key)

        result.paths.append(path)

    return result
