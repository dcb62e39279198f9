"""
File system utilities for goswitch.

This module provides the file operations the installer and linker build on:
- gzip decompression and tar extraction (with path traversal checks)
- Atomic writes and atomic symlink replacement
- Safe deletion of files, symlinks and directory trees
"""

import gzip
import os
import shutil
import sys
import tarfile
import tempfile
import zlib
from pathlib import Path
from typing import Union

from goswitch.core.exceptions import (
    ArchiveExtractionError,
    DecompressionError,
    FilesystemError,
    InsecureArchiveError,
    LinkError,
)

CHUNK_SIZE = 1024 * 1024


# ============================================================================
# Path Utilities
# ============================================================================


def is_relative_to(path: Path, parent: Path) -> bool:
    """Check whether ``path`` is ``parent`` or lies below it."""
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


# ============================================================================
# Archive Handling
# ============================================================================


def decompress_gzip(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Decompress a .gz file.

    Args:
        source: Path to the gzip file
        destination: Path of the decompressed output (overwritten)

    Returns:
        Path to the decompressed file

    Raises:
        DecompressionError: If the source is missing or not valid gzip data
    """
    source = Path(source)
    destination = Path(destination)

    if not source.exists():
        raise DecompressionError(f"Archive not found: {source}")

    destination.unlink(missing_ok=True)
    try:
        with gzip.open(source, "rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst, CHUNK_SIZE)
    except (OSError, EOFError, zlib.error) as e:
        destination.unlink(missing_ok=True)
        raise DecompressionError(f"Failed to decompress {source}: {e}")

    return destination


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "Extraction has been blocked."
        )


def extract_tar(archive_path: Union[str, Path], destination: Union[str, Path]) -> None:
    """
    Extract an uncompressed tar archive.

    Args:
        archive_path: Path to the .tar file
        destination: Directory to extract to (created if needed)

    Raises:
        InsecureArchiveError: If the archive contains escaping paths
        ArchiveExtractionError: If extraction fails
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)

    try:
        with tarfile.open(archive_path, "r:") as tar:
            for member in tar.getmembers():
                _validate_archive_path(member.name, destination)

            # Validated above for interpreters without extraction filters
            if sys.version_info >= (3, 12):
                tar.extractall(destination, filter="data")
            else:
                tar.extractall(destination)
    except InsecureArchiveError:
        raise
    except (tarfile.TarError, OSError) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}")


# ============================================================================
# Safe File Operations
# ============================================================================


def write_temp_sibling(
    file_path: Union[str, Path], content: str, encoding: str = "utf-8"
) -> Path:
    """
    Write ``content`` to a new temp file in the same directory as ``file_path``.

    The caller renames the returned path into place.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        with open(temp_fd, "w", encoding=encoding) as f:
            f.write(content)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise

    return temp_path


def replace_symlink(link_path: Union[str, Path], target: Union[str, Path]) -> None:
    """
    Point ``link_path`` at ``target``, replacing whatever is there.

    An existing symlink or file is swapped out with a single rename, so
    readers see either the old or the new target. A real directory in the
    way is removed first.

    Raises:
        LinkError: If the link cannot be created
    """
    link_path = Path(link_path)
    target = Path(target)

    if link_path.is_dir() and not link_path.is_symlink():
        safe_rmtree(link_path)

    link_path.parent.mkdir(parents=True, exist_ok=True)
    temp_link = link_path.parent / f".{link_path.name}.{os.getpid()}.tmp"

    try:
        temp_link.unlink(missing_ok=True)
        os.symlink(target, temp_link, target_is_directory=True)
        os.replace(temp_link, link_path)
    except OSError as e:
        if temp_link.is_symlink():
            temp_link.unlink()
        raise LinkError(f"Failed to link {link_path} -> {target}: {e}")


def remove_path(path: Union[str, Path]) -> bool:
    """
    Remove a file, symlink or directory tree.

    Returns:
        True if something was removed
    """
    path = Path(path)
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        safe_rmtree(path)
        return True
    return False


def safe_rmtree(path: Union[str, Path]) -> None:
    """
    Remove a directory tree.

    Raises:
        FilesystemError: If deletion fails or the path is not a directory
    """
    path = Path(path)

    if not path.exists():
        return

    if not path.is_dir() or path.is_symlink():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}")


__all__ = [
    "is_relative_to",
    "decompress_gzip",
    "extract_tar",
    "write_temp_sibling",
    "replace_symlink",
    "remove_path",
    "safe_rmtree",
]
