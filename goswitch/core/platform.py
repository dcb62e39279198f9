"""
Platform detection for goswitch.

Maps the running OS and CPU to the names used in Go release archive
filenames (e.g. 'linux-amd64', 'darwin-arm64').

Usage:
    from goswitch.core.platform import detect_platform

    platform_info = detect_platform()
    print(f"Platform string: {platform_info.platform_string()}")
"""

import functools
import platform
from dataclasses import dataclass

from goswitch.core.exceptions import UnsupportedPlatformError

# platform.system().lower() -> Go GOOS
_OS_NAMES = {
    "linux": "linux",
    "darwin": "darwin",
}

# platform.machine().lower() -> Go GOARCH as used in release filenames
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "armv6l",
    "armv7l": "armv6l",
    "arm": "armv6l",
}

_SUPPORTED = {
    "linux": ("amd64", "arm64", "386", "armv6l"),
    "darwin": ("amd64", "arm64"),
}


@dataclass(frozen=True)
class PlatformInfo:
    """
    Normalized platform pair.

    Attributes:
        os: Go operating system name ('linux', 'darwin')
        arch: Go architecture name ('amd64', 'arm64', '386', 'armv6l')
    """

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get the platform suffix used in release filenames.

        Example:
            >>> PlatformInfo("linux", "amd64").platform_string()
            'linux-amd64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


def normalize_platform(system: str, machine: str) -> PlatformInfo:
    """
    Normalize raw OS/CPU identifiers into a supported PlatformInfo.

    Args:
        system: OS identifier as reported by platform.system()
        machine: CPU identifier as reported by platform.machine()

    Returns:
        PlatformInfo for the pair

    Raises:
        UnsupportedPlatformError: If either value is unrecognized, or the
            combination has no published release
    """
    os_name = _OS_NAMES.get(system.lower())
    arch = _ARCH_NAMES.get(machine.lower())

    if os_name is None or arch is None or arch not in _SUPPORTED[os_name]:
        raise UnsupportedPlatformError(system.lower(), machine.lower())

    return PlatformInfo(os=os_name, arch=arch)


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect the current platform.

    This function is cached - it only runs detection once per process.

    Raises:
        UnsupportedPlatformError: If the host is not supported
    """
    return normalize_platform(platform.system(), platform.machine())


def get_supported_platforms() -> list[str]:
    """
    Get list of all supported platform strings.

    Example:
        >>> get_supported_platforms()[:2]
        ['linux-amd64', 'linux-arm64']
    """
    return [
        f"{os_name}-{arch}" for os_name, archs in _SUPPORTED.items() for arch in archs
    ]


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "normalize_platform",
    "detect_platform",
    "get_supported_platforms",
    "clear_platform_cache",
]
