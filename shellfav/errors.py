"""
Error types for shellfav.

Every error is terminal for the current invocation: commands print the
message and the hint, then exit with status 1.
"""


class ShellFavError(Exception):
    """Base class for all user-facing shellfav errors."""

    hint = None

    def __init__(self, message, hint=None):
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint


class EmptyInputError(ShellFavError):
    hint = "Pass the command to save, e.g. 'fav add git status'."


class InvalidInputError(ShellFavError):
    hint = "Favorites are stored one per line; save multi-line commands as a script instead."


class InvalidIndexError(ShellFavError):
    hint = "Use the number shown by 'fav list'."


class OutOfRangeError(ShellFavError):
    hint = "Run 'fav list' to see the available indices."


class StorageError(ShellFavError):
    """Raised when the favorites file or an rc file cannot be created, read or written."""

    hint = "Check the permissions of the path, or point SHELLFAV_FILE somewhere writable."


class UnknownCommandError(ShellFavError):
    hint = "Run 'fav help' for usage or 'fav list' to see your saved favorites."


class UnsupportedShellError(ShellFavError):
    hint = "Pass one of the supported shells explicitly with 'fav setup --shell <name>'."
