"""
Favorite model for shellfav.
Defines the FavoriteEntry class stored one per line in the favorites file.
"""

from ..errors import EmptyInputError, InvalidInputError


class FavoriteEntry:
    """
    A single saved command line.

    The text is kept exactly as typed: no quoting, escaping or trimming is
    applied before it is written to disk.
    """

    def __init__(self, text, index=None):
        """
        Initialize a favorite.

        Args:
            text (str): The raw command, including its arguments
            index (int, optional): 1-based position in the favorites file

        Raises:
            EmptyInputError: If the text is blank after trimming
            InvalidInputError: If the text spans more than one line
        """
        self.text = text
        self.index = index

    def __repr__(self):
        return f"FavoriteEntry(text={self.text!r}, index={self.index!r})"

    def __eq__(self, other):
        if not isinstance(other, FavoriteEntry):
            return NotImplemented
        return self.text == other.text and self.index == other.index

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, value):
        if value is None or not value.strip():
            raise EmptyInputError("Cannot save an empty command")
        if "\n" in value:
            raise InvalidInputError("Command must fit on a single line")
        self._text = value

    def matches(self, candidate):
        """Exact, byte-for-byte comparison against a typed command line."""
        return self._text == candidate

    def to_line(self):
        """
        Convert the favorite to its on-disk representation.

        Returns:
            str: The text followed by a newline
        """
        return self._text + "\n"

    @classmethod
    def from_line(cls, line, index=None):
        """
        Create a FavoriteEntry from a line read from the favorites file.

        Args:
            line (str): A non-blank line, with or without its newline
            index (int, optional): 1-based position among non-blank lines

        Returns:
            FavoriteEntry: A new entry
        """
        return cls(line.rstrip("\n"), index=index)
