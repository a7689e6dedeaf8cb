"""Unit tests for the EntryNode result tree."""

from pathlib import Path

from dirwalker.entry_tree.dir_entry import DirEntry
from dirwalker.entry_tree.entry_node import EntryNode, FlatItem
from dirwalker.types import EntryKind


def d(path):
    return DirEntry(Path(path), Path(path).name, EntryKind.DIRECTORY)


def f(path):
    return DirEntry(Path(path), Path(path).name, EntryKind.FILE)


def sample_tree():
    """/r/{src/{lib.rs, util/{lib.rs}}, docs/, lib.rs, z.txt} built by hand."""
    return EntryNode(
        d("/r"),
        [
            EntryNode(
                d("/r/src"),
                [
                    EntryNode(d("/r/src/util"), [EntryNode(f("/r/src/util/lib.rs"), [], 2)], 1),
                    EntryNode(f("/r/src/lib.rs"), [], 1),
                ],
                0,
            ),
            EntryNode(d("/r/docs"), [], 0),
            EntryNode(f("/r/lib.rs"), [], 0),
            EntryNode(f("/r/z.txt"), [], 0),
        ],
        0,
    )


def test_inspection_fields():
    tree = sample_tree()
    assert tree.path == Path("/r")
    assert tree.name == "r"
    assert tree.is_dir and not tree.is_file
    assert [c.name for c in tree.children] == ["src", "docs", "lib.rs", "z.txt"]
    assert tree.children[0].children[0].depth == 1


def test_synthetic_top_fields():
    top = EntryNode(None, [EntryNode(f("/x"), [], 0)], 0)
    assert top.path is None
    assert top.name is None
    assert not top.is_dir and not top.is_file


def test_flat_view_is_preorder():
    flat = [(item.path.as_posix(), item.depth) for item in sample_tree()]
    assert flat == [
        ("/r", 0),
        ("/r/src", 0),
        ("/r/src/util", 1),
        ("/r/src/util/lib.rs", 2),
        ("/r/src/lib.rs", 1),
        ("/r/docs", 0),
        ("/r/lib.rs", 0),
        ("/r/z.txt", 0),
    ]


def test_flat_view_items():
    items = list(EntryNode(f("/only"), [], 0))
    assert items == [FlatItem(f("/only"), 0)]


def test_flat_view_skips_synthetic_top():
    top = EntryNode(None, [EntryNode(d("/a"), [EntryNode(f("/a/b"), [], 1)], 0), EntryNode(f("/c"), [], 0)], 0)
    assert [item.path.as_posix() for item in top] == ["/a", "/a/b", "/c"]


def test_flat_view_does_not_recurse():
    depth = 5000
    node = EntryNode(f(f"/deep/{depth}"), [], depth)
    for level in range(depth - 1, -1, -1):
        node = EntryNode(d(f"/deep/{level}"), [node], level)
    items = list(node)
    assert len(items) == depth + 1
    assert items[-1].depth == depth


def test_flat_view_can_be_repeated():
    tree = sample_tree()
    assert list(tree) == list(tree)


def test_find_returns_first_in_preorder():
    found = sample_tree().find("lib.rs")
    assert found is not None
    assert found.path == Path("/r/src/util/lib.rs")
    assert found.depth == 2


def test_find_matches_first_flat_item():
    tree = sample_tree()
    first = next(item for item in tree if item.entry.name == "lib.rs")
    assert tree.find("lib.rs").entry == first.entry


def test_find_returns_subtree():
    found = sample_tree().find("src")
    assert [c.name for c in found.children] == ["util", "lib.rs"]


def test_find_root_and_missing():
    tree = sample_tree()
    assert tree.find("r") is tree
    assert tree.find("missing") is None
    assert tree.find("") is None


def test_find_skips_synthetic_top():
    top = EntryNode(None, [EntryNode(f("/x"), [], 0)], 0)
    assert top.find("x").path == Path("/x")


def test_counts():
    tree = sample_tree()
    assert tree.entry_count() == 8
    assert tree.file_count() == 4
    assert tree.directory_count() == 3


def test_equality_is_structural():
    assert sample_tree() == sample_tree()
    other = sample_tree()
    other.children.pop()
    assert sample_tree() != other
