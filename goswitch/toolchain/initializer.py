"""
Root directory initialization.

Creates the layout under the root, an empty current-version record and a
seeded known-versions file. Running it again changes nothing that already
exists.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from goswitch.core.directory import ensure_directory, ensure_root_structure

logger = logging.getLogger(__name__)

# Written to known-versions on first init; the user may edit it afterwards.
SEED_VERSIONS = (
    "1.22.0",
    "1.21.6",
    "1.20.13",
    "1.19.13",
    "1.18.10",
    "1.17.13",
    "1.16.15",
    "1.15.15",
    "1.14.15",
    "1.13.15",
)


@dataclass
class InitResult:
    """What init created and what the user must add to their shell profile."""

    created: List[str] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)


def shell_exports(settings) -> List[str]:
    """
    Export statements pointing a shell at the current toolchain.

    Example:
        >>> shell_exports(Settings.for_root(Path("/home/me/.goswitch")))[0]
        'export GOROOT="/home/me/.goswitch/go"'
    """
    return [
        f'export GOROOT="{settings.goroot}"',
        f'export GOBIN="{settings.bin_dir}"',
        'export PATH="$GOROOT/bin:$GOBIN:$PATH"',
    ]


def initialize(settings) -> InitResult:
    """
    Create the goswitch root layout.

    Args:
        settings: Resolved Settings

    Returns:
        InitResult listing created paths and the shell exports

    Raises:
        DirectoryCreationError: If a directory cannot be created
    """
    result = InitResult()

    for path in (settings.versions_dir, settings.bin_dir):
        if not path.is_dir():
            result.created.append(str(path))

    ensure_root_structure(settings)
    ensure_directory(settings.goroot.parent, "current toolchain parent directory")

    if not settings.current_file.exists():
        settings.current_file.touch()
        result.created.append(str(settings.current_file))

    if not settings.known_versions_file.exists():
        settings.known_versions_file.write_text(
            "\n".join(SEED_VERSIONS) + "\n", encoding="utf-8"
        )
        result.created.append(str(settings.known_versions_file))

    for path in result.created:
        logger.debug(f"Created {path}")

    result.exports = shell_exports(settings)
    return result


__all__ = [
    "SEED_VERSIONS",
    "InitResult",
    "initialize",
    "shell_exports",
]
