"""
Command base class for shellfav.
Defines the interface that all commands should implement.
"""

import argparse
from abc import ABC, abstractmethod

from colorama import Fore, Style

from shellfav.storage import FavoritesStore, StoreConfig


class Command(ABC):
    """
    Abstract base class for all CLI commands.
    All command implementations should inherit from this class.
    """

    # The name of the command used in CLI, overridden in each command class
    name = None

    # A short description of what the command does
    description = None

    def __init__(self, store=None):
        """
        Initialize the command.

        Args:
            store (FavoritesStore, optional): Store to operate on. Built from
                the environment on first use when omitted.
        """
        self._store = store

    @property
    def store(self):
        if self._store is None:
            self._store = FavoritesStore(StoreConfig.from_env())
        return self._store

    @classmethod
    def register_arguments(cls, parser):
        """
        Register command-specific arguments.
        Commands without arguments do not need to override this.

        Args:
            parser (argparse.ArgumentParser): The argument parser to add arguments to
        """

    @abstractmethod
    def execute(self, args):
        """
        Execute the command with the provided arguments.
        This should be overridden in each command class.

        Args:
            args (argparse.Namespace): Parsed command-line arguments

        Returns:
            int: Exit code (0 for success, non-zero for errors)
        """

    def setup_parser(self, subparsers):
        """
        Set up the command's argument parser.

        Args:
            subparsers: Subparsers object from the main parser

        Returns:
            argparse.ArgumentParser: The command's parser
        """
        parser = subparsers.add_parser(
            self.name,
            description=self.description,
            help=self.description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Let the command subclass register its specific arguments
        self.register_arguments(parser)

        return parser

    def print_success(self, message):
        print(f"{Fore.GREEN}{message}{Style.RESET_ALL}")

    def print_error(self, error):
        """
        Print a ShellFavError with its remediation hint.

        Returns:
            int: Exit code 1, so callers can `return self.print_error(e)`
        """
        print(f"{Fore.RED}Error: {error.message}{Style.RESET_ALL}")
        if error.hint:
            print(f"{Fore.YELLOW}Tip: {error.hint}{Style.RESET_ALL}")
        return 1
