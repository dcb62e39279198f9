"""Configuration module for goswitch.

Resolves root, bin and current-toolchain paths plus download options from
environment variables and the optional config.yaml.
"""

from goswitch.config.settings import (
    Settings,
    load_settings,
    load_config_file,
)

__all__ = [
    "Settings",
    "load_settings",
    "load_config_file",
]
