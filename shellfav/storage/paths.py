"""
Location of the favorites file for shellfav.
Resolves the base directory and file path from the environment.
"""

import os
from pathlib import Path

HOME_ENV = "SHELLFAV_HOME"
FILE_ENV = "SHELLFAV_FILE"

# Synced storage, so favorites follow the user between machines
DEFAULT_BASE_DIR = Path("~") / "Dropbox" / "shellfav"
DEFAULT_FILE_NAME = "favorites.txt"


class StoreConfig:
    """Where a FavoritesStore keeps its data."""

    def __init__(self, favorites_path, encoding="utf-8"):
        self.favorites_path = Path(favorites_path).expanduser()
        self.encoding = encoding

    def __repr__(self):
        return f"StoreConfig(favorites_path={str(self.favorites_path)!r})"

    @property
    def base_dir(self):
        return self.favorites_path.parent

    @classmethod
    def from_env(cls, environ=None):
        """
        Build the configuration from environment variables.

        SHELLFAV_FILE wins over SHELLFAV_HOME; both fall back to the default
        location under the user's synced-storage directory.

        Args:
            environ (dict, optional): Environment mapping, defaults to os.environ

        Returns:
            StoreConfig: The resolved configuration
        """
        if environ is None:
            environ = os.environ

        file_override = environ.get(FILE_ENV, "").strip()
        if file_override:
            return cls(file_override)

        base_dir = environ.get(HOME_ENV, "").strip() or DEFAULT_BASE_DIR
        return cls(Path(base_dir).expanduser() / DEFAULT_FILE_NAME)
