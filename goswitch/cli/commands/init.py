"""
Init command implementation.

Creates the goswitch root layout and prints the shell exports the user must
add to their profile.
"""

import logging

from goswitch.toolchain.initializer import initialize

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the init command.

    Args:
        args: Parsed command-line arguments with settings attached

    Returns:
        Exit code (0 for success)
    """
    settings = args.settings
    result = initialize(settings)

    if result.created:
        for path in result.created:
            logger.info(f"Created {path}")
    else:
        logger.info(f"goswitch already initialized at {settings.root}")

    print("Add the following to your shell profile:")
    print()
    for line in result.exports:
        print(f"  {line}")

    return 0
