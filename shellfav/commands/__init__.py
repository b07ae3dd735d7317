"""
Command modules for shellfav.
Importing this package registers every subcommand.
"""
from shellfav.commands.add import AddCommand
from shellfav.commands.list_favorites import ListCommand
from shellfav.commands.remove import RemoveCommand
from shellfav.commands.setup import SetupCommand
from shellfav.commands.info import HelpCommand, VersionCommand
from shellfav.commands.execute import ExecuteFavoriteCommand
