"""Unit tests for reading a single directory level."""

import contextlib
import os
from pathlib import Path

import pytest

from dirwalker.entry_tree import directory_reader
from dirwalker.entry_tree.directory_reader import find_entry, read_entries
from dirwalker.exceptions import ErrorKind, WalkIOError
from dirwalker.filter_rules.directory_rules import SkipDirectoryRules
from dirwalker.filter_rules.dotted_rules import DottedPathRules
from dirwalker.types import EntryKind


class FakeEntry:
    """Stand-in for os.DirEntry whose type queries can fail."""

    def __init__(self, directory, name, is_dir=False, error=None):
        self.name = name
        self.path = os.path.join(directory, name)
        self._is_dir = is_dir
        self._error = error

    def is_symlink(self):
        if self._error:
            raise self._error
        return False

    def is_dir(self, follow_symlinks=True):
        return self._is_dir

    def is_file(self, follow_symlinks=True):
        return not self._is_dir


def test_directories_first_then_files_sorted(tmp_path):
    for name in ["b.txt", "a.txt", "_c.txt"]:
        (tmp_path / name).touch()
    for name in ["zdir", "Bdir", "adir"]:
        (tmp_path / name).mkdir()

    names = [e.name for e in read_entries(tmp_path)]

    # Byte order: uppercase before underscore before lowercase
    assert names == ["Bdir", "adir", "zdir", "_c.txt", "a.txt", "b.txt"]


def test_records_are_joined_to_the_directory(fx):
    entries = read_entries(fx)
    assert [e.path for e in entries] == [fx / ".git", fx / "a", fx / "b.txt"]
    assert [e.kind for e in entries] == [EntryKind.DIRECTORY, EntryKind.DIRECTORY, EntryKind.FILE]


def test_symlinks_are_omitted(fx, has_symlinks):
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")
    (fx / "file_link").symlink_to(fx / "b.txt")
    names = [e.name for e in read_entries(fx)]
    assert "link" not in names
    assert "file_link" not in names


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
def test_special_files_are_omitted(tmp_path):
    os.mkfifo(tmp_path / "pipe")
    (tmp_path / "regular").touch()
    assert [e.name for e in read_entries(tmp_path)] == ["regular"]


def test_rules_are_applied(fx):
    assert [e.name for e in read_entries(fx, DottedPathRules())] == ["a", "b.txt"]
    assert [e.name for e in read_entries(fx, SkipDirectoryRules([fx / "a"]))] == [".git", "b.txt"]


def test_empty_directory(tmp_path):
    assert read_entries(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(WalkIOError) as excinfo:
        read_entries(missing)
    assert excinfo.value.kind is ErrorKind.IO_ERROR
    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_child_errors_are_swallowed(monkeypatch, tmp_path):
    entries = [
        FakeEntry(str(tmp_path), "good.txt"),
        FakeEntry(str(tmp_path), "vanished.txt", error=FileNotFoundError(2, "gone")),
        FakeEntry(str(tmp_path), "dir", is_dir=True),
    ]

    @contextlib.contextmanager
    def fake_scandir(path):
        yield iter(entries)

    monkeypatch.setattr(directory_reader.os, "scandir", fake_scandir)

    assert [e.name for e in read_entries(tmp_path)] == ["dir", "good.txt"]


def test_iteration_error_closes_handle_and_raises(monkeypatch, tmp_path):
    closed = []

    def failing():
        yield FakeEntry(str(tmp_path), "first.txt")
        raise PermissionError(13, "Permission denied")

    @contextlib.contextmanager
    def fake_scandir(path):
        try:
            yield failing()
        finally:
            closed.append(path)

    monkeypatch.setattr(directory_reader.os, "scandir", fake_scandir)

    with pytest.raises(WalkIOError):
        read_entries(tmp_path)
    assert closed == [tmp_path]


def test_find_entry(fx):
    entry = find_entry(fx, fx / "b.txt")
    assert entry is not None
    assert entry.name == "b.txt"
    assert entry.kind is EntryKind.FILE
    assert find_entry(fx, fx / "nope") is None


def test_find_entry_missing_parent(tmp_path):
    with pytest.raises(WalkIOError):
        find_entry(tmp_path / "missing", tmp_path / "missing" / "x")


def test_find_entry_ignores_symlinks(fx, has_symlinks):
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")
    assert find_entry(fx, fx / "link") is None


def test_returned_paths_are_path_objects(fx):
    assert all(isinstance(e.path, Path) for e in read_entries(fx))
