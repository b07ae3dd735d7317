"""
Main CLI entry point for the shellfav favorites manager.
"""

import argparse
import sys

from colorama import init

from shellfav.commands.add import AddCommand
from shellfav.commands.info import version_string
from shellfav.config import (
    COMMANDS, DEFAULT_COMMAND, FALLBACK_COMMAND, HELP_FLAGS, VERSION_FLAGS, configure_logging
)

EPILOG = """\
Any other arguments are matched against your favorites. If the whole line is
exactly equal to a saved favorite, fav runs it through your shell:
  fav add git status -sb
  fav git status -sb

Environment:
  SHELLFAV_HOME   directory holding favorites.txt (default: ~/Dropbox/shellfav)
  SHELLFAV_FILE   full path of the favorites file (overrides SHELLFAV_HOME)
  SHELLFAV_DEBUG  set to 1 for debug logging
"""


def get_all_commands():
    """
    Get all registered commands.

    Returns:
        dict: Dictionary mapping command names to command classes
    """
    return COMMANDS.copy()


def setup_parsers(subparsers):
    """
    Set up command parsers for all registered commands.

    Args:
        subparsers: Subparsers object from the main parser
    """
    for command_name, command_class in get_all_commands().items():
        command = command_class()
        command.setup_parser(subparsers)


class FavArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors, like every other fav failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    """Build the top-level argument parser with every registered subcommand."""
    parser = FavArgumentParser(
        prog="fav",
        description="fav - save, list and replay your favorite shell commands",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=version_string()
    )

    # Initialize subparsers for commands
    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        metavar="<command>",
    )

    # Set up parsers for all registered commands
    setup_parsers(subparsers)

    return parser


def dispatch(argv, store=None):
    """
    Route an argument vector to a command and run it.

    Args:
        argv (list[str]): Arguments without the program name
        store (FavoritesStore, optional): Store to use instead of the configured one

    Returns:
        int: Exit code
    """
    if not argv:
        argv = [DEFAULT_COMMAND]

    first = argv[0]
    if first in HELP_FLAGS:
        argv = ["help"]
    elif first in VERSION_FLAGS:
        argv = ["version"]

    if argv[0] not in COMMANDS:
        command = FALLBACK_COMMAND(store)
        return command.execute(FALLBACK_COMMAND.namespace_for(argv))

    # The words after "add" are saved verbatim, so argparse never sees them
    if argv[0] == AddCommand.name and not (len(argv) > 1 and argv[1] in HELP_FLAGS):
        return AddCommand(store).execute(AddCommand.namespace_for(argv[1:]))

    parser = build_parser()
    args = parser.parse_args(argv)

    # Get the command class
    command_class = COMMANDS[args.command]

    # Create and execute the command
    command = command_class(store)
    return command.execute(args)


def main(argv=None):
    """Main CLI entry point."""
    # Initialize colorama for cross-platform color support
    init()
    configure_logging()

    if argv is None:
        argv = sys.argv[1:]
    return dispatch(list(argv))


if __name__ == "__main__":
    sys.exit(main())
