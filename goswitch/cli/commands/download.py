"""
Download command implementation.

Downloads and extracts one Go version into the versions directory.
"""

import logging

from goswitch.cli.utils import make_progress_printer
from goswitch.core.locking import root_lock
from goswitch.toolchain.installer import ReleaseInstaller

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the download command.

    Args:
        args: Parsed command-line arguments with version, settings and platform

    Returns:
        Exit code (0 for success)
    """
    installer = ReleaseInstaller(args.settings, args.platform)

    with root_lock(args.settings):
        result = installer.install(
            args.version, progress_callback=make_progress_printer(args.quiet)
        )

    if not result.was_cached:
        logger.info(
            f"Downloaded Go {result.version} in {result.download_time:.1f}s, "
            f"extracted in {result.extraction_time:.1f}s"
        )
    return 0
