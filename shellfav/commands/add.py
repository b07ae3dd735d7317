"""
AddCommand implementation for shellfav.
Handles saving a new favorite from the command line.
"""

import argparse

from shellfav.commands.base import Command
from shellfav.errors import ShellFavError
from shellfav.registry import register_command


@register_command
class AddCommand(Command):
    """Command to save a command line as a favorite."""

    name = 'add'
    description = 'Save a command as a favorite'

    @classmethod
    def register_arguments(cls, parser):
        """Register command-specific arguments."""
        parser.epilog = (
            "Everything after 'add' is saved exactly as typed, e.g.\n"
            "  fav add git log --oneline -n 20\n"
            "Quote the command to keep pipes and redirections out of your current shell:\n"
            "  fav add 'ps aux | grep python'"
        )
        parser.add_argument(
            'words',
            metavar='command',
            nargs=argparse.REMAINDER,
            help='The command line to save'
        )

    @staticmethod
    def namespace_for(words):
        """Build the parsed arguments for a raw word list, dropping one leading "--"."""
        words = list(words)
        if words[:1] == ["--"]:
            words = words[1:]
        return argparse.Namespace(command=AddCommand.name, words=words)

    def execute(self, args):
        """Execute add command."""
        text = " ".join(args.words)
        try:
            entry = self.store.add(text)
        except ShellFavError as e:
            return self.print_error(e)

        self.print_success(f"Added favorite #{entry.index}: {entry.text}")
        return 0
