"""Uninstall configuration and settings.

This module provides the configuration model and I/O functions for the
user's uninstall preferences: forced escalation, excluded paths, probe
concurrency and the verification delay.

Configuration is stored in ~/.config/zapctl/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from zapctl.core.errors import ConfigError, ConfigParseError
from zapctl.core.paths import get_config_path

logger = logging.getLogger(__name__)


class UninstallConfig(BaseModel):
    """User preferences for uninstalling applications.

    Attributes:
        always_elevate: Skip the unprivileged attempt and always ask for
            administrator privileges.
        excluded_paths: Path prefixes that must never be removed
            (``~`` expands to the home directory).
        probe_workers: Maximum concurrent existence/size probes (1-32).
        verify_delay_seconds: Pause before verifying the bundle is gone (0-10).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    always_elevate: Annotated[
        bool,
        Field(description="Always use administrator privileges"),
    ] = False
    excluded_paths: Annotated[
        tuple[str, ...],
        Field(description="Path prefixes never to remove"),
    ] = ()
    probe_workers: Annotated[
        int,
        Field(ge=1, le=32, description="Concurrent probes (1-32)"),
    ] = 8
    verify_delay_seconds: Annotated[
        float,
        Field(ge=0.0, le=10.0, description="Settle delay before verification (0-10s)"),
    ] = 1.0

    @field_validator("excluded_paths")
    @classmethod
    def validate_excluded_paths(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that exclusions are absolute or home-relative prefixes."""
        cleaned: list[str] = []
        for prefix in v:
            value = prefix.strip()
            if not (value.startswith("/") or value == "~" or value.startswith("~/")):
                msg = f"Excluded path must be absolute or start with '~/': {prefix!r}"
                raise ValueError(msg)
            if value not in cleaned:
                cleaned.append(value)
        return tuple(cleaned)


def load_config(path: Path | None = None) -> UninstallConfig:
    """Load uninstall configuration from a TOML file.

    A missing file yields the default configuration.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated UninstallConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return UninstallConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return UninstallConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: UninstallConfig, path: Path | None = None) -> Path:
    """Save uninstall configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The UninstallConfig object to save.
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


def _config_to_dict(config: UninstallConfig) -> dict[str, object]:
    """Convert UninstallConfig to a dictionary for TOML serialization.

    Only includes values that differ from the defaults to keep the file clean.
    """
    defaults = UninstallConfig()
    result: dict[str, object] = {"always_elevate": config.always_elevate}

    if config.excluded_paths:
        result["excluded_paths"] = list(config.excluded_paths)

    if config.probe_workers != defaults.probe_workers:
        result["probe_workers"] = config.probe_workers

    if config.verify_delay_seconds != defaults.verify_delay_seconds:
        result["verify_delay_seconds"] = config.verify_delay_seconds

    return result
