# shellfav/config.py
"""Command registry and application configuration for shellfav."""

import logging
import os

from shellfav.registry import COMMANDS
# Import all command modules to trigger decorator registration
from shellfav.commands import ExecuteFavoriteCommand

DEBUG_ENV = "SHELLFAV_DEBUG"

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")

# Subcommand used when fav is run without arguments
DEFAULT_COMMAND = "list"

FALLBACK_COMMAND = ExecuteFavoriteCommand


def configure_logging(environ=None):
    """Send log records to stderr; DEBUG when SHELLFAV_DEBUG is set."""
    if environ is None:
        environ = os.environ
    debug = environ.get(DEBUG_ENV, "").strip() not in ("", "0")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
