"""XDG-compliant path management for bulkedit.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and scratch storage.

XDG defaults:
- Config: ~/.config/bulkedit/
- Cache: ~/.cache/bulkedit/
- Scratch (temporary manifests): ~/.cache/bulkedit/tmp/
"""

import os
import tempfile
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "bulkedit"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/bulkedit/ (or XDG_CONFIG_HOME/bulkedit/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Returns:
        Path to ~/.cache/bulkedit/ (or XDG_CACHE_HOME/bulkedit/).
    """
    return _get_xdg_dir("XDG_CACHE_HOME", ".cache")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/bulkedit/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_tmp_dir() -> Path:
    """Get the default scratch directory for temporary manifests.

    Returns:
        Path to ~/.cache/bulkedit/tmp/.
    """
    return get_cache_dir() / "tmp"


def get_stealth_tmp_dir() -> Path:
    """Get the scratch directory used in stealth mode.

    Stealth mode must leave nothing behind in the user's config or cache
    directories. The per-user runtime directory (a private tmpfs on most
    systems) is used when available, the system temp directory otherwise.

    Returns:
        Path to XDG_RUNTIME_DIR, or the system temporary directory.
    """
    runtime = os.environ.get("XDG_RUNTIME_DIR")
    if runtime and Path(runtime).is_dir():
        return Path(runtime)
    return Path(tempfile.gettempdir())


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True, mode=0o700)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_tmp_dir(path: Path) -> Path:
    """Create a scratch directory if it doesn't exist.

    Args:
        path: Scratch directory to create.

    Returns:
        The scratch directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(path, "temporary")


def abbreviate_home(path: str) -> str:
    """Replace a leading home directory with ``~`` for display.

    Args:
        path: Path string to abbreviate.

    Returns:
        The abbreviated path, or the input unchanged if it is not under home.
    """
    home = str(Path.home())
    if path == home:
        return "~"
    if home != "/" and path.startswith(home + os.sep):
        return "~" + path[len(home) :]
    return path
