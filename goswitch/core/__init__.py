"""
Core functionality for goswitch.

This package contains the foundational modules that other components depend on.
"""

from .directory import (
    get_default_root,
    ensure_root_structure,
    verify_directory_writable,
    DirectoryCreationError,
)

from .locking import root_lock

from .platform import (
    PlatformInfo,
    detect_platform,
    normalize_platform,
    get_supported_platforms,
    clear_platform_cache,
)

from .capabilities import (
    CapabilityStatus,
    check_capabilities,
    require_capabilities,
)

from .exceptions import (
    GoswitchError,
    UsageError,
    EnvironmentCheckError,
    UnsupportedPlatformError,
    MissingDependencyError,
    ConfigError,
    StateError,
    VersionNotInstalledError,
    LockTimeoutError,
    InstallError,
    DownloadError,
    FilesystemError,
    DecompressionError,
    ArchiveExtractionError,
    InsecureArchiveError,
    LinkError,
)

__all__ = [
    "get_default_root",
    "ensure_root_structure",
    "verify_directory_writable",
    "DirectoryCreationError",
    "root_lock",
    "PlatformInfo",
    "detect_platform",
    "normalize_platform",
    "get_supported_platforms",
    "clear_platform_cache",
    "CapabilityStatus",
    "check_capabilities",
    "require_capabilities",
    "GoswitchError",
    "UsageError",
    "EnvironmentCheckError",
    "UnsupportedPlatformError",
    "MissingDependencyError",
    "ConfigError",
    "StateError",
    "VersionNotInstalledError",
    "LockTimeoutError",
    "InstallError",
    "DownloadError",
    "FilesystemError",
    "DecompressionError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "LinkError",
]
