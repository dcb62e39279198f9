"""
goswitch/toolchain/linking.py

Current toolchain selection.

The active version is stored twice: as the symlink at the configured
current-toolchain path and as the version string in the ``current`` record.
Both are updated by one call to ``CurrentLinker.link``:

1. the new record is written to a temporary file beside ``current``
2. the symlink is swapped atomically to the new cache path
3. the temporary record is renamed over ``current``

An interruption before step 2 leaves the previous selection untouched.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from goswitch.core.exceptions import VersionNotInstalledError
from goswitch.core.filesystem import replace_symlink, write_temp_sibling
from goswitch.core.platform import PlatformInfo, detect_platform
from goswitch.toolchain.naming import ReleaseArchive

logger = logging.getLogger(__name__)


def read_current_version(settings) -> str:
    """
    Read the current version record.

    Returns:
        The recorded version, or '' if none is selected
    """
    try:
        return settings.current_file.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return ""


class CurrentLinker:
    """Manages the current toolchain symlink and its version record."""

    def __init__(self, settings, platform: Optional[PlatformInfo] = None):
        """
        Initialize linker.

        Args:
            settings: Resolved Settings
            platform: PlatformInfo instance (auto-detected if None)
        """
        self.settings = settings
        self.platform = platform or detect_platform()

    def link(self, version: str) -> Path:
        """
        Make ``version`` the current toolchain.

        Args:
            version: An installed version string

        Returns:
            Path of the selected cache directory

        Raises:
            VersionNotInstalledError: If the version has not been downloaded;
                neither the symlink nor the record is touched
            LinkError: If the symlink cannot be replaced
        """
        archive = ReleaseArchive.for_version(version, self.platform, self.settings)
        if not archive.is_installed():
            raise VersionNotInstalledError(version)

        record = self.settings.current_file
        temp_record = write_temp_sibling(record, version + "\n")
        try:
            replace_symlink(self.settings.goroot, archive.cache_path.absolute())
            temp_record.replace(record)
        except Exception:
            temp_record.unlink(missing_ok=True)
            raise

        logger.info(
            f"Now using Go {version} ({self.settings.goroot} -> {archive.cache_path})"
        )
        return archive.cache_path

    def current_version(self) -> str:
        return read_current_version(self.settings)

    def resolve_current(self) -> Optional[Path]:
        """
        Resolve the current toolchain symlink.

        Returns:
            Absolute target path, or None if no symlink exists
        """
        goroot = self.settings.goroot
        if not goroot.is_symlink():
            return None

        target = Path(os.readlink(goroot))
        if not target.is_absolute():
            target = goroot.parent / target
        return target


__all__ = [
    "CurrentLinker",
    "read_current_version",
]
