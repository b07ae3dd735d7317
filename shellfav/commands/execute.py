"""
Fallback command that replays a saved favorite.

Not registered as a subcommand: the CLI uses it for any argument line that
is not a known command.
"""

import argparse

from colorama import Fore, Style

from shellfav.commands.base import Command
from shellfav.errors import ShellFavError, UnknownCommandError
from shellfav.runner import run_favorite


class ExecuteFavoriteCommand(Command):
    """Run a favorite whose text equals the typed arguments exactly."""

    name = 'execute'
    description = 'Run a saved favorite typed verbatim'

    def __init__(self, store=None, runner=run_favorite):
        super().__init__(store)
        self.runner = runner

    @staticmethod
    def namespace_for(words):
        return argparse.Namespace(command=None, words=list(words))

    def execute(self, args):
        text = " ".join(args.words)
        try:
            entry = self.store.find(text)
            if entry is None:
                raise UnknownCommandError(f"Unknown command: '{text}'")
        except ShellFavError as e:
            return self.print_error(e)

        print(f"{Fore.CYAN}Running: {entry.text}{Style.RESET_ALL}", flush=True)
        return self.runner(entry)
