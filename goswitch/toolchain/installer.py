"""
Release download and extraction.

Ensures a version's cache directory exists under ``versions/``:

1. Return immediately if the cache path already exists
2. Remove any stale compressed archive left in the working directory
3. Download the .tar.gz
4. Decompress it to .tar
5. Extract into a staging directory
6. Move the extracted root into the cache path
7. Remove the temporary archives

Nothing is verified against a checksum and a failed step is not retried.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from goswitch.core.directory import ensure_directory
from goswitch.core.download import DownloadProgress, download_file
from goswitch.core.exceptions import ArchiveExtractionError
from goswitch.core.filesystem import (
    decompress_gzip,
    extract_tar,
    remove_path,
    safe_rmtree,
)
from goswitch.core.platform import PlatformInfo, detect_platform
from goswitch.toolchain.naming import ReleaseArchive

logger = logging.getLogger(__name__)

STAGING_DIRNAME = "extract"


@dataclass
class InstallResult:
    """Result of an install operation."""

    version: str
    """Requested version string"""

    cache_path: Path
    """Path to the extracted release"""

    was_cached: bool
    """Whether the release was already present (no download performed)"""

    download_time: float = 0.0
    """Seconds spent downloading"""

    extraction_time: float = 0.0
    """Seconds spent decompressing and extracting"""


class ReleaseInstaller:
    """
    Downloads and unpacks Go releases into the versions directory.

    Example:
        >>> installer = ReleaseInstaller(settings)
        >>> result = installer.install("1.16")
        >>> print(f"Installed at: {result.cache_path}")
    """

    def __init__(
        self,
        settings,
        platform: Optional[PlatformInfo] = None,
        session=None,
    ):
        """
        Initialize installer.

        Args:
            settings: Resolved Settings
            platform: Target platform (auto-detected if None)
            session: Optional requests session used for downloads
        """
        self.settings = settings
        self.platform = platform or detect_platform()
        self.session = session

    def archive_for(self, version: str) -> ReleaseArchive:
        return ReleaseArchive.for_version(version, self.platform, self.settings)

    def is_installed(self, version: str) -> bool:
        return self.archive_for(version).is_installed()

    def install(
        self,
        version: str,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ) -> InstallResult:
        """
        Ensure ``version`` is extracted into its cache path.

        Args:
            version: Go version string (e.g. '1.16', '1.21.5')
            progress_callback: Optional download progress callback

        Returns:
            InstallResult

        Raises:
            DownloadError: If the archive cannot be fetched
            DecompressionError: If the archive is not valid gzip data
            ArchiveExtractionError: If the tar archive cannot be unpacked
        """
        archive = self.archive_for(version)

        if archive.is_installed():
            logger.info(f"Go {version} already present at {archive.cache_path}")
            return InstallResult(
                version=version, cache_path=archive.cache_path, was_cached=True
            )

        work_dir = self.settings.tmp_dir
        ensure_directory(work_dir, "working directory")
        ensure_directory(self.settings.versions_dir, "versions directory")

        compressed_path = work_dir / archive.compressed_name
        tar_path = work_dir / archive.tar_name
        staging_dir = work_dir / STAGING_DIRNAME

        if remove_path(compressed_path):
            logger.debug(f"Removed stale archive: {compressed_path}")

        download_start = time.time()
        download_file(
            url=archive.url,
            destination=compressed_path,
            progress_callback=progress_callback,
            timeout=self.settings.timeout,
            session=self.session,
        )
        download_time = time.time() - download_start

        extraction_start = time.time()
        try:
            logger.info(f"Decompressing {archive.compressed_name}")
            decompress_gzip(compressed_path, tar_path)

            logger.info(f"Extracting {archive.tar_name}")
            remove_path(staging_dir)
            extract_tar(tar_path, staging_dir)

            extracted_root = self._find_extracted_root(staging_dir)
            extracted_root.rename(archive.cache_path)
            logger.info(f"Installed Go {version} to {archive.cache_path}")
        finally:
            compressed_path.unlink(missing_ok=True)
            remove_path(tar_path)
            if staging_dir.exists():
                safe_rmtree(staging_dir)

        return InstallResult(
            version=version,
            cache_path=archive.cache_path,
            was_cached=False,
            download_time=download_time,
            extraction_time=time.time() - extraction_start,
        )

    def _find_extracted_root(self, staging_dir: Path) -> Path:
        """
        Locate the distribution root inside the staging directory.

        Go archives unpack to a single 'go/' directory; any archive with a
        single top-level directory is treated the same way.
        """
        items = list(staging_dir.iterdir())

        if len(items) == 1 and items[0].is_dir():
            return items[0]

        raise ArchiveExtractionError(
            f"Expected a single top-level directory in the archive, found "
            f"{len(items)} entries"
        )


def install_version(
    version: str,
    settings,
    platform: Optional[PlatformInfo] = None,
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
) -> InstallResult:
    """
    Convenience function to install one version.

    Example:
        >>> result = install_version("1.16", settings)
        >>> result.was_cached
        False
    """
    return ReleaseInstaller(settings, platform).install(version, progress_callback)


__all__ = [
    "InstallResult",
    "ReleaseInstaller",
    "install_version",
]
