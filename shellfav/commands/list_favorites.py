"""
ListCommand implementation for shellfav.
Handles displaying saved favorites with their indices.
"""

from colorama import Fore, Style
from tabulate import tabulate

from shellfav.commands.base import Command
from shellfav.errors import ShellFavError
from shellfav.registry import register_command


@register_command
class ListCommand(Command):
    """Command to list saved favorites."""

    name = 'list'
    description = 'List saved favorites'

    HEADER_COLOR = Fore.CYAN + Style.BRIGHT

    @classmethod
    def register_arguments(cls, parser):
        """Register command-specific arguments."""
        parser.add_argument(
            "--plain",
            action="store_true",
            help="Print one favorite per line without indices or colors (used by shell completion)"
        )

    def execute(self, args):
        """Execute list command."""
        try:
            favorites = self.store.list()
        except ShellFavError as e:
            return self.print_error(e)

        if getattr(args, "plain", False):
            for entry in favorites:
                print(entry.text)
            return 0

        if not favorites:
            print("No favorites saved yet.")
            print("Add one with: fav add <command>")
            return 0

        rows = [[entry.index, entry.text] for entry in favorites]
        headers = [f"{self.HEADER_COLOR}#{Style.RESET_ALL}", f"{self.HEADER_COLOR}Command{Style.RESET_ALL}"]
        print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
        print(f"\nTotal: {len(favorites)} favorite{'s' if len(favorites) != 1 else ''}")
        return 0
