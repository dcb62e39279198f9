"""
Centralized exception hierarchy for goswitch.

Every error the CLI reports to the user derives from GoswitchError so the
dispatcher can print a single prefixed message and exit non-zero.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GoswitchError(Exception):
    """Base exception for all goswitch errors."""

    pass


# ============================================================================
# Usage Exceptions
# ============================================================================


class UsageError(GoswitchError):
    """Missing or invalid command-line arguments, or unknown command."""

    pass


# ============================================================================
# Environment Exceptions
# ============================================================================


class EnvironmentCheckError(GoswitchError):
    """Base exception for problems with the host environment."""

    pass


class UnsupportedPlatformError(EnvironmentCheckError):
    """Raised when the host OS or CPU architecture has no Go release."""

    def __init__(self, os_name: str, arch: str):
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"unsupported os/arch: {os_name}/{arch}")


class MissingDependencyError(EnvironmentCheckError):
    """Raised when one or more required tools are unavailable."""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(
            "missing required dependencies: " + ", ".join(self.missing)
        )


class ConfigError(EnvironmentCheckError):
    """Configuration file parsing or validation error."""

    pass


# ============================================================================
# State Exceptions
# ============================================================================


class StateError(GoswitchError):
    """Base exception for cache/pointer state errors."""

    pass


class VersionNotInstalledError(StateError):
    """Raised when linking a version that was never downloaded."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"version {version} needs to be downloaded first")


class LockTimeoutError(StateError):
    """Raised when the root lock cannot be acquired within timeout."""

    pass


# ============================================================================
# I/O Exceptions
# ============================================================================


class InstallError(GoswitchError):
    """Base exception for download and unpack failures."""

    pass


class DownloadError(InstallError):
    """Exception raised when download fails."""

    pass


class FilesystemError(GoswitchError):
    """Base exception for filesystem operations."""

    pass


class DecompressionError(FilesystemError, InstallError):
    """Failed to decompress a gzip archive."""

    pass


class ArchiveExtractionError(FilesystemError, InstallError):
    """Failed to extract a tar archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


class LinkError(FilesystemError):
    """Failed to create or replace the current toolchain symlink."""

    pass
