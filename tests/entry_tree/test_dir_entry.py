import os
from pathlib import Path

import pytest

from dirwalker.entry_tree.dir_entry import DirEntry
from dirwalker.types import EntryKind


def scan(directory):
    with os.scandir(directory) as it:
        return {child.name: child for child in it}


def test_kinds(fx):
    children = scan(fx)
    git = DirEntry.from_scandir(children[".git"])
    txt = DirEntry.from_scandir(children["b.txt"])

    assert git == DirEntry(fx / ".git", ".git", EntryKind.DIRECTORY)
    assert git.is_dir and not git.is_file
    assert txt.kind is EntryKind.FILE
    assert txt.is_file and not txt.is_dir


def test_symlink_yields_none(fx, has_symlinks):
    if not has_symlinks:
        pytest.skip("Symlink creation not supported on this platform/environment")
    assert DirEntry.from_scandir(scan(fx)["link"]) is None


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
def test_fifo_is_other(tmp_path):
    os.mkfifo(tmp_path / "pipe")
    assert DirEntry.from_scandir(scan(tmp_path)["pipe"]).kind is EntryKind.OTHER


def test_sort_key_is_bytes():
    entry = DirEntry(Path("/p/b"), "b", EntryKind.FILE)
    assert entry.sort_key() == os.fsencode(Path("/p/b"))
