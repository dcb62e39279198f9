"""Runtime settings for goswitch.

Settings are resolved once at startup from built-in defaults, the optional
``<root>/config.yaml`` file and environment variables (highest precedence),
then passed explicitly to every component.

Example config.yaml:

    download_host: https://go.dev/dl-mirror
    timeout: 60
    lock_timeout: 120
    bin_dir: ~/go/bin
    goroot: ~/.local/go
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from goswitch.core.directory import (
    BIN_DIRNAME,
    CONFIG_FILENAME,
    CURRENT_FILENAME,
    GOROOT_LINKNAME,
    KNOWN_VERSIONS_FILENAME,
    LOCK_FILENAME,
    TMP_DIRNAME,
    VERSIONS_DIRNAME,
    get_default_root,
)
from goswitch.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_HOST = "https://dl.google.com"
DEFAULT_TIMEOUT = 30
DEFAULT_LOCK_TIMEOUT = 60

ENV_ROOT = "GOSWITCH_ROOT"
ENV_BIN = "GOSWITCH_BIN"
ENV_GOROOT = "GOSWITCH_GOROOT"
ENV_DOWNLOAD_HOST = "GOSWITCH_DOWNLOAD_HOST"

_CONFIG_KEYS = {"download_host", "timeout", "lock_timeout", "bin_dir", "goroot"}


@dataclass(frozen=True)
class Settings:
    """
    Resolved goswitch configuration.

    Attributes:
        root: Container for all goswitch state
        bin_dir: Directory created for the user's GOBIN
        goroot: Path of the current toolchain symlink
        download_host: Scheme and host serving /go/<archive>
        timeout: HTTP timeout in seconds
        lock_timeout: Seconds to wait for the root lock
    """

    root: Path
    bin_dir: Path
    goroot: Path
    download_host: str = DEFAULT_DOWNLOAD_HOST
    timeout: int = DEFAULT_TIMEOUT
    lock_timeout: int = DEFAULT_LOCK_TIMEOUT

    @property
    def versions_dir(self) -> Path:
        return self.root / VERSIONS_DIRNAME

    @property
    def tmp_dir(self) -> Path:
        return self.root / TMP_DIRNAME

    @property
    def current_file(self) -> Path:
        return self.root / CURRENT_FILENAME

    @property
    def known_versions_file(self) -> Path:
        return self.root / KNOWN_VERSIONS_FILENAME

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILENAME

    @property
    def lock_file(self) -> Path:
        return self.root / LOCK_FILENAME

    @classmethod
    def for_root(cls, root: Path, **overrides) -> "Settings":
        """Build settings with every path defaulted under ``root``."""
        root = Path(root)
        values = {
            "bin_dir": root / BIN_DIRNAME,
            "goroot": root / GOROOT_LINKNAME,
        }
        values.update(overrides)
        return cls(root=root, **values)


def _expand(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value))).absolute()


def load_config_file(config_file: Path) -> Dict[str, Any]:
    """
    Load and validate the YAML configuration file.

    Args:
        config_file: Path to config.yaml

    Returns:
        Configuration dictionary (empty if the file doesn't exist)

    Raises:
        ConfigError: If the YAML is invalid or contains unknown keys
    """
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}")

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    unknown = sorted(set(data) - _CONFIG_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
        )

    for key in ("timeout", "lock_timeout"):
        if key in data and (not isinstance(data[key], int) or data[key] <= 0):
            raise ConfigError(f"'{key}' must be a positive integer")

    return data


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve Settings from defaults, config.yaml and the environment.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved Settings

    Raises:
        ConfigError: If config.yaml is invalid
    """
    if environ is None:
        environ = os.environ

    root = _expand(environ[ENV_ROOT]) if environ.get(ENV_ROOT) else get_default_root()
    config = load_config_file(root / CONFIG_FILENAME)

    bin_dir = root / BIN_DIRNAME
    goroot = root / GOROOT_LINKNAME
    download_host = config.get("download_host", DEFAULT_DOWNLOAD_HOST)

    if config.get("bin_dir"):
        bin_dir = _expand(str(config["bin_dir"]))
    if config.get("goroot"):
        goroot = _expand(str(config["goroot"]))

    if environ.get(ENV_BIN):
        bin_dir = _expand(environ[ENV_BIN])
    if environ.get(ENV_GOROOT):
        goroot = _expand(environ[ENV_GOROOT])
    if environ.get(ENV_DOWNLOAD_HOST):
        download_host = environ[ENV_DOWNLOAD_HOST]

    settings = Settings(
        root=root,
        bin_dir=bin_dir,
        goroot=goroot,
        download_host=str(download_host).rstrip("/"),
        timeout=config.get("timeout", DEFAULT_TIMEOUT),
        lock_timeout=config.get("lock_timeout", DEFAULT_LOCK_TIMEOUT),
    )
    logger.debug(f"Resolved settings: {settings}")
    return settings


__all__ = [
    "Settings",
    "load_settings",
    "load_config_file",
    "DEFAULT_DOWNLOAD_HOST",
    "DEFAULT_TIMEOUT",
    "DEFAULT_LOCK_TIMEOUT",
    "ENV_ROOT",
    "ENV_BIN",
    "ENV_GOROOT",
    "ENV_DOWNLOAD_HOST",
]
