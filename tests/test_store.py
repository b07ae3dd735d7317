"""Tests for the favorites file: add, list and remove with index semantics."""

from __future__ import annotations

import pytest

from shellfav.errors import (
    EmptyInputError,
    InvalidIndexError,
    InvalidInputError,
    OutOfRangeError,
    StorageError,
)
from shellfav.storage import FavoritesStore, StoreConfig


def _texts(store):
    return [entry.text for entry in store.list()]


class TestInitialization:
    """The file and its directory are created lazily."""

    def test_list_creates_missing_directory_and_file(self, store, favorites_path) -> None:
        assert not favorites_path.parent.exists()

        assert store.list() == []
        assert favorites_path.is_file()
        assert favorites_path.read_text(encoding="utf-8") == ""

    def test_ensure_initialized_keeps_existing_content(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_text("ls -la\n", encoding="utf-8")

        store.ensure_initialized()

        assert favorites_path.read_text(encoding="utf-8") == "ls -la\n"

    def test_unwritable_location_raises_storage_error(self, tmp_path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        store = FavoritesStore(StoreConfig(blocker / "favorites.txt"))

        with pytest.raises(StorageError) as excinfo:
            store.add("echo hi")

        assert isinstance(excinfo.value.__cause__, OSError)

    def test_unreadable_content_raises_storage_error(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_bytes(b"\xff\xfe\xfa\n")

        with pytest.raises(StorageError):
            store.list()


class TestAdd:
    """Appending favorites."""

    def test_added_command_is_listed_last(self, store) -> None:
        store.add("git status")
        entry = store.add("docker ps -a")

        entries = store.list()
        assert entries[-1].text == "docker ps -a"
        assert entries[-1].index == 2
        assert entry.index == 2

    def test_text_is_stored_verbatim(self, store, favorites_path) -> None:
        command = "  grep -rn \"TODO\" . | sort  > out.txt  "
        store.add(command)

        assert favorites_path.read_text(encoding="utf-8") == command + "\n"
        assert _texts(store) == [command]

    def test_duplicates_are_allowed(self, store) -> None:
        store.add("make test")
        store.add("make test")

        assert _texts(store) == ["make test", "make test"]

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_input_is_rejected_and_file_unchanged(self, store, favorites_path, blank) -> None:
        store.add("uptime")
        before = favorites_path.read_text(encoding="utf-8")

        with pytest.raises(EmptyInputError):
            store.add(blank)

        assert favorites_path.read_text(encoding="utf-8") == before

    def test_multiline_input_is_rejected(self, store) -> None:
        with pytest.raises(InvalidInputError):
            store.add("echo one\necho two")

        assert store.list() == []

    def test_appends_after_file_without_trailing_newline(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_text("htop", encoding="utf-8")

        store.add("df -h")

        assert favorites_path.read_text(encoding="utf-8") == "htop\ndf -h\n"
        assert _texts(store) == ["htop", "df -h"]

    def test_non_ascii_text_round_trips(self, store) -> None:
        store.add("echo 'héllo wörld ✓'")

        assert _texts(store) == ["echo 'héllo wörld ✓'"]


class TestList:
    """Numbering of entries."""

    def test_blank_lines_are_skipped_for_numbering(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_text("one\n\n   \ntwo\n\nthree\n", encoding="utf-8")

        entries = store.list()

        assert [(e.index, e.text) for e in entries] == [(1, "one"), (2, "two"), (3, "three")]

    def test_windows_line_endings_are_tolerated(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_bytes(b"ls\r\npwd\r\n")

        assert _texts(store) == ["ls", "pwd"]

    def test_bare_carriage_return_stays_inside_its_line(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_bytes(b"first\nprintf 'a\rb'\nlast\n")

        assert _texts(store) == ["first", "printf 'a\rb'", "last"]

        store.remove(1)

        assert favorites_path.read_bytes() == b"printf 'a\rb'\nlast\n"
        assert _texts(store) == ["printf 'a\rb'", "last"]

    def test_count_matches_list(self, store) -> None:
        for command in ("a", "b", "c"):
            store.add(command)

        assert store.count() == 3


class TestRemove:
    """Removing by positional index."""

    @pytest.fixture
    def filled(self, store):
        for command in ("first", "second", "third", "fourth"):
            store.add(command)
        return store

    def test_remove_returns_original_text_and_shifts_indices(self, filled) -> None:
        removed = filled.remove(2)

        assert removed.text == "second"
        assert removed.index == 2
        entries = filled.list()
        assert len(entries) == 3
        assert [(e.index, e.text) for e in entries] == [(1, "first"), (2, "third"), (3, "fourth")]

    def test_remove_accepts_string_index(self, filled) -> None:
        assert filled.remove("4").text == "fourth"
        assert _texts(filled) == ["first", "second", "third"]

    def test_remove_last_remaining_entry(self, store) -> None:
        store.add("only")

        assert store.remove(1).text == "only"
        assert store.list() == []

    @pytest.mark.parametrize("index", [0, -1, 5, "0", "99"])
    def test_out_of_range(self, filled, index) -> None:
        with pytest.raises(OutOfRangeError):
            filled.remove(index)

        assert len(filled.list()) == 4

    @pytest.mark.parametrize("index", ["abc", "1.5", "", "two", True])
    def test_invalid_index(self, filled, index) -> None:
        with pytest.raises(InvalidIndexError):
            filled.remove(index)

    def test_remove_from_empty_store(self, store) -> None:
        with pytest.raises(OutOfRangeError):
            store.remove(1)

    def test_range_check_ignores_blank_lines(self, store, favorites_path) -> None:
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_text("one\n\n\ntwo\n", encoding="utf-8")

        with pytest.raises(OutOfRangeError):
            store.remove(3)

        assert store.remove(2).text == "two"
        assert favorites_path.read_text(encoding="utf-8") == "one\n"


class TestFind:
    """Exact-match lookup used to replay favorites."""

    def test_exact_match_only(self, store) -> None:
        store.add("echo hi")

        assert store.find("echo hi").text == "echo hi"
        assert store.find("echo  hi") is None
        assert store.find("echo") is None
        assert store.find("ECHO HI") is None

    def test_first_duplicate_wins(self, store) -> None:
        store.add("ls")
        store.add("ls")

        assert store.find("ls").index == 1
