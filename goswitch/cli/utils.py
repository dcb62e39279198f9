"""
Shared utilities for CLI commands.

Provides common output helpers used across commands so errors and progress
are reported consistently.
"""

import logging
import sys
from typing import Callable, Optional

from goswitch.core.download import DownloadProgress

logger = logging.getLogger(__name__)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def print_warning(message: str):
    """Print warning message to stderr."""
    print(f"WARNING: {message}", file=sys.stderr)


def make_progress_printer(
    quiet: bool = False, stream=None
) -> Optional[Callable[[DownloadProgress], None]]:
    """
    Build a download progress callback that redraws a single line.

    Args:
        quiet: Return None so nothing is printed
        stream: Output stream (default: stderr)

    Returns:
        Progress callback, or None when quiet or not attached to a terminal
    """
    stream = stream or sys.stderr
    if quiet or not stream.isatty():
        return None

    def on_progress(progress: DownloadProgress):
        end = "\n" if progress.percentage >= 100 else ""
        print(f"\r  {progress}", end=end, file=stream, flush=True)

    return on_progress


__all__ = [
    "print_error",
    "print_warning",
    "make_progress_printer",
]
