"""
List command implementation.

Prints every known version with its current/installed/not installed marker.
"""

import logging

from goswitch.cli.utils import print_warning
from goswitch.toolchain.lister import list_versions

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments with settings and platform attached

    Returns:
        Exit code (0 for success)
    """
    settings = args.settings

    if not settings.known_versions_file.exists():
        print_warning(
            f"{settings.known_versions_file} not found. Run 'goswitch init' first."
        )
        return 0

    for status in list_versions(settings, args.platform):
        print(status.format())

    return 0
