"""User configuration for bulkedit.

This module provides the configuration model and I/O functions for
bulk operations: where temporary manifests are written, which program
opens them, and how the working directory listing behaves.

Configuration is stored in ~/.config/bulkedit/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bulkedit.core.errors import BulkEditError, ExitCode
from bulkedit.core.paths import get_config_path, get_default_tmp_dir, get_stealth_tmp_dir

logger = logging.getLogger(__name__)


class BulkEditConfig(BaseModel):
    """Configuration for bulk rename and bulk remove.

    Attributes:
        tmp_dir: Scratch directory for temporary manifests (None = XDG cache).
        stealth_mode: Keep temporary manifests out of config/cache directories.
        opener: Command used to open manifests when no application is given.
        auto_refresh: Re-list the working directory after it was modified.
        show_hidden: Include dot-entries in the working directory listing.
    """

    model_config = ConfigDict(extra="forbid")

    tmp_dir: Annotated[
        Path | None,
        Field(description="Scratch directory for temporary manifests"),
    ] = None
    stealth_mode: Annotated[
        bool,
        Field(description="Leave no trace in config/cache directories"),
    ] = False
    opener: Annotated[
        str | None,
        Field(description="Command used to open manifests (None = $VISUAL/$EDITOR)"),
    ] = None
    auto_refresh: Annotated[
        bool,
        Field(description="Refresh the working directory listing after changes"),
    ] = True
    show_hidden: Annotated[
        bool,
        Field(description="List hidden entries of the working directory"),
    ] = False

    @property
    def scratch_dir(self) -> Path:
        """Get the directory temporary manifests are created in.

        Returns:
            The stealth location in stealth mode, the configured tmp_dir
            otherwise, falling back to the XDG cache scratch directory.
        """
        if self.stealth_mode:
            return get_stealth_tmp_dir()
        if self.tmp_dir is not None:
            return self.tmp_dir.expanduser()
        return get_default_tmp_dir()


class ConfigError(BulkEditError):
    """Base exception for configuration errors."""

    exit_code = ExitCode.CONFIG


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> BulkEditConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated BulkEditConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or its content is invalid.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return BulkEditConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return BulkEditConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: BulkEditConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The BulkEditConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: BulkEditConfig) -> dict[str, object]:
    """Convert BulkEditConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        config: The BulkEditConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "stealth_mode": config.stealth_mode,
        "auto_refresh": config.auto_refresh,
        "show_hidden": config.show_hidden,
    }

    if config.tmp_dir is not None:
        result["tmp_dir"] = str(config.tmp_dir)

    if config.opener is not None:
        result["opener"] = config.opener

    return result
