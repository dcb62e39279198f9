"""
Directory structure management for goswitch.

Directory Structure:
    Root (~/.goswitch/ unless GOSWITCH_ROOT is set):
        - versions/       : One extracted Go release per subdirectory
        - bin/            : Created for the user's GOBIN, unused by goswitch
        - tmp/            : Working directory for archives and extraction
        - current         : Version string of the active toolchain
        - known-versions  : Newline-delimited list of versions shown by 'list'
        - config.yaml     : Optional user configuration
        - .lock           : Lock file for mutating commands

    Current toolchain path (<root>/go unless GOSWITCH_GOROOT is set):
        symlink to one entry of versions/
"""

from pathlib import Path

from goswitch.core.exceptions import FilesystemError

DEFAULT_ROOT_NAME = ".goswitch"

VERSIONS_DIRNAME = "versions"
BIN_DIRNAME = "bin"
TMP_DIRNAME = "tmp"
CURRENT_FILENAME = "current"
KNOWN_VERSIONS_FILENAME = "known-versions"
CONFIG_FILENAME = "config.yaml"
LOCK_FILENAME = ".lock"
GOROOT_LINKNAME = "go"


class DirectoryCreationError(FilesystemError):
    """Raised when directory creation fails."""

    pass


def get_default_root() -> Path:
    """
    Get the default root directory.

    Returns:
        Path: ~/.goswitch
    """
    return (Path.home() / DEFAULT_ROOT_NAME).absolute()


def verify_directory_writable(path: Path) -> bool:
    """
    Verify that a directory exists and is writable.

    Args:
        path: Directory path to verify.

    Returns:
        bool: True if directory exists and is writable, False otherwise.
    """
    if not path.is_dir():
        return False

    try:
        test_file = path / ".write_test"
        test_file.touch()
        test_file.unlink()
        return True
    except OSError:
        return False


def ensure_directory(path: Path, description: str = "directory") -> bool:
    """
    Create a directory if it doesn't exist.

    Args:
        path: Directory path
        description: Description for error messages

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        DirectoryCreationError: If the directory cannot be created
    """
    if path.is_dir():
        return False

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(f"Failed to create {description} at {path}: {e}")
    return True


def ensure_root_structure(settings) -> Path:
    """
    Create the root directory layout if it doesn't exist.

    Creates the root, versions/, bin/ and tmp/ directories. Files are left
    to the initializer.

    Args:
        settings: Resolved Settings

    Returns:
        Path: The root directory.

    Raises:
        DirectoryCreationError: If directory creation fails or the root
            is not writable.
    """
    ensure_directory(settings.root, "root directory")

    if not verify_directory_writable(settings.root):
        raise DirectoryCreationError(
            f"Root directory at {settings.root} is not writable. "
            "Please check directory permissions."
        )

    ensure_directory(settings.versions_dir, "versions directory")
    ensure_directory(settings.bin_dir, "bin directory")
    ensure_directory(settings.tmp_dir, "working directory")

    return settings.root


__all__ = [
    "DEFAULT_ROOT_NAME",
    "VERSIONS_DIRNAME",
    "BIN_DIRNAME",
    "TMP_DIRNAME",
    "CURRENT_FILENAME",
    "KNOWN_VERSIONS_FILENAME",
    "CONFIG_FILENAME",
    "LOCK_FILENAME",
    "GOROOT_LINKNAME",
    "DirectoryCreationError",
    "get_default_root",
    "verify_directory_writable",
    "ensure_directory",
    "ensure_root_structure",
]
