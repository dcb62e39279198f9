"""
Use command implementation.

Downloads a Go version if it is not cached yet, then makes it current.
"""

import logging

from goswitch.cli.utils import make_progress_printer
from goswitch.core.locking import root_lock
from goswitch.toolchain.installer import ReleaseInstaller
from goswitch.toolchain.linking import CurrentLinker

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the use command.

    Args:
        args: Parsed command-line arguments with version, settings and platform

    Returns:
        Exit code (0 for success)
    """
    installer = ReleaseInstaller(args.settings, args.platform)
    linker = CurrentLinker(args.settings, args.platform)

    with root_lock(args.settings):
        installer.install(
            args.version, progress_callback=make_progress_printer(args.quiet)
        )
        linker.link(args.version)

    return 0
