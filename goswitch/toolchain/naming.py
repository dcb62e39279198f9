"""
Release archive naming.

Pure string/path composition for a Go release: the versioned directory name,
the archive filenames, the local cache path and the download URL. Version
strings are not validated; a malformed version produces a URL that fails to
download.
"""

from dataclasses import dataclass
from pathlib import Path

from goswitch.core.platform import PlatformInfo

TAR_SUFFIX = ".tar"
GZIP_SUFFIX = ".gz"
DOWNLOAD_PATH = "/go/"


def versioned_filename(version: str, platform: PlatformInfo) -> str:
    """
    Name of a release for one platform.

    Example:
        >>> versioned_filename("1.16", PlatformInfo("linux", "amd64"))
        'go1.16.linux-amd64'
    """
    return f"go{version}.{platform.os}-{platform.arch}"


def tar_filename(version: str, platform: PlatformInfo) -> str:
    return versioned_filename(version, platform) + TAR_SUFFIX


def compressed_filename(version: str, platform: PlatformInfo) -> str:
    return tar_filename(version, platform) + GZIP_SUFFIX


def cache_path(version: str, platform: PlatformInfo, versions_dir: Path) -> Path:
    return Path(versions_dir) / versioned_filename(version, platform)


def download_url(version: str, platform: PlatformInfo, host: str) -> str:
    """
    Remote location of the compressed release archive.

    Example:
        >>> download_url("1.16", PlatformInfo("darwin", "arm64"), "https://dl.google.com")
        'https://dl.google.com/go/go1.16.darwin-arm64.tar.gz'
    """
    return host.rstrip("/") + DOWNLOAD_PATH + compressed_filename(version, platform)


@dataclass(frozen=True)
class ReleaseArchive:
    """Every name and location derived from one version on one platform."""

    version: str
    platform: PlatformInfo
    filename: str
    tar_name: str
    compressed_name: str
    cache_path: Path
    url: str

    @classmethod
    def for_version(
        cls, version: str, platform: PlatformInfo, settings
    ) -> "ReleaseArchive":
        return cls(
            version=version,
            platform=platform,
            filename=versioned_filename(version, platform),
            tar_name=tar_filename(version, platform),
            compressed_name=compressed_filename(version, platform),
            cache_path=cache_path(version, platform, settings.versions_dir),
            url=download_url(version, platform, settings.download_host),
        )

    def is_installed(self) -> bool:
        return self.cache_path.exists()


__all__ = [
    "ReleaseArchive",
    "versioned_filename",
    "tar_filename",
    "compressed_filename",
    "cache_path",
    "download_url",
]
