"""
Remove command for deleting favorites by index.
"""

from shellfav.commands.base import Command
from shellfav.errors import ShellFavError
from shellfav.registry import register_command


@register_command
class RemoveCommand(Command):
    """Command to delete a favorite by its index."""

    name = "remove"
    description = "Remove a favorite by its index"

    @classmethod
    def register_arguments(cls, parser):
        """Configure argument parser for the remove command."""
        parser.epilog = "Indices shift down after a removal; run 'fav list' to see the current ones."
        # Kept as a string so bad input gets our own error instead of argparse's
        parser.add_argument(
            "index",
            type=str,
            help="Index of the favorite as shown by 'fav list'",
        )

    def execute(self, args):
        """Execute the remove command with the given arguments."""
        try:
            removed = self.store.remove(args.index)
        except ShellFavError as e:
            return self.print_error(e)

        self.print_success(f"Removed favorite #{removed.index}: {removed.text}")
        return 0
