from .paths import StoreConfig
from .store import FavoritesStore

__all__ = ["FavoritesStore", "StoreConfig"]
