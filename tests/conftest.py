"""Shared fixtures for the shellfav test-suite."""

from __future__ import annotations

import pytest

from shellfav.storage import FavoritesStore, StoreConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point every environment-driven path at the test's temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("SHELLFAV_FILE", str(tmp_path / "data" / "favorites.txt"))
    for variable in ("SHELLFAV_HOME", "SHELLFAV_DEBUG", "ZDOTDIR", "XDG_CONFIG_HOME",
                     "FISH_VERSION", "ZSH_VERSION", "BASH_VERSION"):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setenv("SHELL", "/bin/bash")
    return home


@pytest.fixture
def favorites_path(tmp_path):
    return tmp_path / "data" / "favorites.txt"


@pytest.fixture
def store(favorites_path) -> FavoritesStore:
    return FavoritesStore(StoreConfig(favorites_path))
