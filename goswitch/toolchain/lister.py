"""
Known version listing.

Each entry of the known-versions file is reported, in file order, as the
current version, installed, or not installed. The file is display-only: it
is neither sorted nor deduplicated, and versions installed but missing from
it are not shown.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from goswitch.core.platform import PlatformInfo, detect_platform
from goswitch.toolchain.linking import read_current_version
from goswitch.toolchain.naming import ReleaseArchive

logger = logging.getLogger(__name__)


class InstallState(Enum):
    """Status marker for a known version."""

    CURRENT = "current"
    INSTALLED = "installed"
    NOT_INSTALLED = "not installed"


@dataclass
class VersionStatus:
    """One line of 'goswitch list' output."""

    version: str
    state: InstallState

    def format(self) -> str:
        marker = "*" if self.state is InstallState.CURRENT else " "
        return f"{marker} {self.version} ({self.state.value})"


def read_known_versions(settings) -> List[str]:
    """
    Read the known-versions file.

    Returns:
        Version strings in file order (blank lines skipped), or an empty
        list if the file does not exist
    """
    path = settings.known_versions_file
    if not path.exists():
        logger.debug(f"Known versions file not found: {path}")
        return []

    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def list_versions(
    settings, platform: Optional[PlatformInfo] = None
) -> List[VersionStatus]:
    """
    Report the status of every known version.

    Args:
        settings: Resolved Settings
        platform: Platform used to locate cache paths (auto-detected if None)

    Returns:
        VersionStatus per known version, in file order
    """
    platform = platform or detect_platform()
    current = read_current_version(settings)

    statuses = []
    for version in read_known_versions(settings):
        if current and version == current:
            state = InstallState.CURRENT
        elif ReleaseArchive.for_version(version, platform, settings).is_installed():
            state = InstallState.INSTALLED
        else:
            state = InstallState.NOT_INSTALLED
        statuses.append(VersionStatus(version, state))

    return statuses


__all__ = [
    "InstallState",
    "VersionStatus",
    "read_known_versions",
    "list_versions",
]
