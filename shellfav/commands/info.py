"""
Help and version commands for shellfav.
"""

from shellfav import __version__
from shellfav.commands.base import Command
from shellfav.registry import register_command


def version_string():
    return f"shellfav {__version__}"


@register_command
class HelpCommand(Command):
    """Command to print usage."""

    name = 'help'
    description = 'Show usage information'

    def execute(self, args):
        # Imported here: cli imports the command modules at load time
        from shellfav.cli import build_parser

        build_parser().print_help()
        return 0


@register_command
class VersionCommand(Command):
    """Command to print the installed version."""

    name = 'version'
    description = 'Show the version'

    def execute(self, args):
        print(version_string())
        return 0
