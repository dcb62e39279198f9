"""
goswitch CLI argument parser.

This module implements the command-line interface for goswitch using argparse.

Usage: goswitch [-v|-q] <help|init|list|download VERSION|use VERSION>
"""

import argparse
import logging
import sys
from typing import List, Optional

from goswitch.cli.utils import print_error
from goswitch.config import load_settings
from goswitch.core.capabilities import require_capabilities
from goswitch.core.exceptions import (
    EnvironmentCheckError,
    GoswitchError,
    UnsupportedPlatformError,
    UsageError,
)
from goswitch.core.platform import detect_platform, get_supported_platforms

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("goswitch")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

HELP_COMMAND = "help"
HELP_FLAGS = ("-h", "-help", "--help")

# Command module mapping
COMMAND_MAP = {
    "init": "goswitch.cli.commands.init",
    "list": "goswitch.cli.commands.listing",
    "download": "goswitch.cli.commands.download",
    "use": "goswitch.cli.commands.use",
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors instead of exiting with 2."""

    def error(self, message):
        raise UsageError(message)


class CLI:
    """goswitch command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = _ArgumentParser(
            prog="goswitch",
            description="goswitch - download, cache and switch Go toolchains",
            epilog=(
                "Environment:\n"
                "  GOSWITCH_ROOT    root directory (default: ~/.goswitch)\n"
                "  GOSWITCH_BIN     bin directory (default: $GOSWITCH_ROOT/bin)\n"
                "  GOSWITCH_GOROOT  current toolchain symlink "
                "(default: $GOSWITCH_ROOT/go)"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"goswitch {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        subparsers.add_parser("help", help="Show this help", add_help=False)
        subparsers.add_parser(
            "init",
            help="Create the goswitch directories and known-versions list",
            add_help=False,
        )
        subparsers.add_parser(
            "list",
            help="List known versions and whether they are installed",
            add_help=False,
        )

        download_parser = subparsers.add_parser(
            "download",
            help="Download and extract a Go version",
            add_help=False,
        )
        download_parser.add_argument("version", help="Go version (e.g. 1.16)")

        use_parser = subparsers.add_parser(
            "use",
            help="Download a Go version if needed and make it current",
            add_help=False,
        )
        use_parser.add_argument("version", help="Go version (e.g. 1.16)")

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        A help flag anywhere, or 'help' in the command position, selects
        the help command. Later arguments are left alone, so a version may be
        literally named 'help'.

        Raises:
            UsageError: If arguments are missing or the command is unknown
        """
        if args is None:
            args = sys.argv[1:]
        options = [arg for arg in args if arg.startswith("-")]
        positionals = [arg for arg in args if not arg.startswith("-")]

        wants_help = any(arg in HELP_FLAGS for arg in options) or (
            positionals and positionals[0] == HELP_COMMAND
        )
        if wants_help:
            args = [arg for arg in options if arg not in HELP_FLAGS] + [HELP_COMMAND]
        return self.parser.parse_args(args)

    def print_help(self, file=None):
        self.parser.print_help(file)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            parsed_args = self.parse_args(args)
        except UsageError as e:
            print_error(str(e))
            self.print_help(sys.stderr)
            return 1

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.print_help()
            return 1

        if parsed_args.command == "help":
            self.print_help()
            return 0

        try:
            self._prepare_environment(parsed_args)
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except UnsupportedPlatformError as e:
            print_error(
                f"environment check failed: {e}",
                f"Supported platforms: {', '.join(get_supported_platforms())}",
            )
            return 1
        except EnvironmentCheckError as e:
            print_error(f"environment check failed: {e}")
            return 1
        except GoswitchError as e:
            print_error(str(e))
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _prepare_environment(self, args):
        """
        Resolve settings and validate the host once, before any command runs.

        Raises:
            ConfigError: If config.yaml is invalid
            UnsupportedPlatformError: If the OS/arch has no Go release
            MissingDependencyError: If a required tool is unavailable
        """
        args.settings = load_settings()
        args.platform = detect_platform()
        require_capabilities()
        logger.debug(f"Platform: {args.platform}, root: {args.settings.root}")

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        module_name = COMMAND_MAP.get(args.command)
        if not module_name:
            raise UsageError(f"Unknown command: {args.command}")

        import importlib

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
