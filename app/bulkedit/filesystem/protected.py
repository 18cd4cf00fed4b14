"""Protected filesystem paths that bulk removal must never delete.

A bulk removal list is derived from the lines missing in an edited
manifest. These patterns stop a stray edit from taking out the root
directory, the home directory itself, key material, or bulkedit's own
configuration.
"""

import fnmatch
import os
from pathlib import Path

from bulkedit.core.paths import get_config_dir

# Protected filesystem path patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    "/",
    "~",
    "~/.ssh",
    "~/.gnupg",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/proc",
    "/root",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
]


def is_protected_path(path: str) -> bool:
    """Check if a filesystem path is protected and must not be removed.

    The path is normalized lexically before matching, so "/etc/" and
    "/usr/../etc" are both recognized. The bulkedit config directory is
    always protected, wherever XDG_CONFIG_HOME points.

    Args:
        path: Absolute filesystem path to check.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    normalized = os.path.normpath(path)
    home = str(Path.home())

    if normalized == os.path.normpath(str(get_config_dir())):
        return True

    for pattern in PROTECTED_PATH_PATTERNS:
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatch(normalized, expanded):
            return True

    return False
