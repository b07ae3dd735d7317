"""
Favorites store for shellfav.
Provides file management and the add/list/remove operations.
"""

import logging

from ..errors import StorageError
from ..models.favorite import FavoriteEntry
from ..utils.validators import check_index_range, parse_index

logger = logging.getLogger(__name__)


class FavoritesStore:
    """
    Line-oriented favorites file.

    Each non-blank line is one favorite. Blank lines are skipped both when
    numbering entries and when range-checking an index, so the index shown by
    list() is always the one remove() accepts.
    """

    def __init__(self, config):
        """
        Initialize the store.

        Args:
            config (StoreConfig): Location and encoding of the favorites file
        """
        self.config = config

    @property
    def path(self):
        return self.config.favorites_path

    def ensure_initialized(self):
        """
        Create the favorites directory and file if they do not exist yet.

        Returns:
            Path: The favorites file path

        Raises:
            StorageError: If the directory or file cannot be created
        """
        path = self.path
        try:
            if not path.parent.exists():
                logger.debug("Creating favorites directory %s", path.parent)
                path.parent.mkdir(parents=True, exist_ok=True)
            if not path.exists():
                logger.debug("Creating favorites file %s", path)
                path.touch()
        except OSError as exc:
            raise StorageError(f"Could not create favorites file {path}: {exc.strerror or exc}") from exc
        return path

    def _read_lines(self):
        path = self.ensure_initialized()
        try:
            with open(path, "r", encoding=self.config.encoding, newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Could not read favorites file {path}: {getattr(exc, 'strerror', None) or exc}") from exc
        # Only "\n" ends a line; a bare "\r" inside a line is part of the text
        return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]

    def _write_entries(self, entries):
        path = self.path
        try:
            with open(path, "w", encoding=self.config.encoding, newline="") as handle:
                handle.writelines(entry.to_line() for entry in entries)
        except OSError as exc:
            raise StorageError(f"Could not write favorites file {path}: {exc.strerror or exc}") from exc

    def _ends_without_newline(self, path):
        with open(path, "rb") as handle:
            handle.seek(0, 2)
            if handle.tell() == 0:
                return False
            handle.seek(-1, 2)
            return handle.read(1) != b"\n"

    def list(self):
        """
        Get all favorites in file order.

        Returns:
            list[FavoriteEntry]: Entries numbered from 1, blank lines skipped

        Raises:
            StorageError: If the file exists but cannot be read
        """
        entries = []
        for line in self._read_lines():
            if not line.strip():
                continue
            entries.append(FavoriteEntry.from_line(line, index=len(entries) + 1))
        return entries

    def count(self):
        """Number of indexed favorites."""
        return len(self.list())

    def add(self, command):
        """
        Append a command to the favorites file.

        Args:
            command (str): The command line to save, stored verbatim

        Returns:
            FavoriteEntry: The stored entry with its new index

        Raises:
            EmptyInputError: If the command is blank
            InvalidInputError: If the command spans several lines
            StorageError: If the file cannot be written
        """
        entry = FavoriteEntry(command)
        path = self.ensure_initialized()

        try:
            needs_newline = self._ends_without_newline(path)
            with open(path, "a", encoding=self.config.encoding, newline="") as handle:
                if needs_newline:
                    handle.write("\n")
                handle.write(entry.to_line())
        except OSError as exc:
            raise StorageError(f"Could not write favorites file {path}: {exc.strerror or exc}") from exc

        entry.index = self.count()
        logger.debug("Added favorite #%d: %r", entry.index, entry.text)
        return entry

    def remove(self, index):
        """
        Delete the favorite at a 1-based index.

        Later entries shift down by one. The file is rewritten with the
        remaining entries only.

        Args:
            index (int or str): Index as shown by list()

        Returns:
            FavoriteEntry: The removed entry, with its original index

        Raises:
            InvalidIndexError: If the index is not an integer
            OutOfRangeError: If the index is < 1 or past the last entry
            StorageError: If the file cannot be read or rewritten
        """
        position = parse_index(index)
        entries = self.list()
        check_index_range(position, len(entries))

        removed = entries.pop(position - 1)
        self._write_entries(entries)
        logger.debug("Removed favorite #%d: %r", removed.index, removed.text)
        return removed

    def find(self, text):
        """
        Find the first favorite whose text equals the given command line exactly.

        Returns:
            FavoriteEntry or None
        """
        for entry in self.list():
            if entry.matches(text):
                return entry
        return None
