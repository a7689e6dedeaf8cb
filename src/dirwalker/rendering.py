"""Text and JSON representations of a walk result.

The tree representation mirrors the output of the Unix ``tree`` command and is
drawn with rich. The dict/JSON export keeps the stored child order, so two
peers that walked the same filesystem state produce identical documents.
"""

import io
import json
from typing import Any, Dict, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from dirwalker.entry_tree.entry_node import EntryNode

ROOT_LABEL = "/"


def _label(node: EntryNode, top_label: Optional[str] = None) -> str:
    if node.entry is None:
        # Synthetic top of a directory walk
        name = top_label or ROOT_LABEL
        return name if name.endswith("/") else name + "/"
    name = node.name or ""
    if node.is_dir and not name.endswith("/"):
        name += "/"
    return name


def to_rich_tree(node: EntryNode, top_label: Optional[str] = None) -> Tree:
    """Mirror a walk result into a rich Tree, preserving the child order.

    Labels are plain Text, so names containing square brackets are never read
    as console markup. Directories carry a trailing slash. A top node without a
    record is labelled ``top_label``, usually the walked directory's name.
    """
    top = Tree(Text(_label(node, top_label)))
    stack: List[Tuple[EntryNode, Tree]] = [(node, top)]
    while stack:
        current, branch = stack.pop()
        for child in current.children:
            stack.append((child, branch.add(Text(_label(child)))))
    return top


def stream_tree_representation(node: EntryNode, top_label: Optional[str] = None) -> Iterator[str]:
    """Generate a tree representation of a walk result one line at a time.

    Yields:
        Lines of the representation, without trailing newlines.

    Example:
        >>> tree = Walker("src").walk()  # doctest: +SKIP
        >>> for line in stream_tree_representation(tree, "src"):  # doctest: +SKIP
        ...     print(line)
        src/
        └── dirwalker/
            ├── __init__.py
            └── walker.py
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=10_000,
        color_system=None,
        no_color=True,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(to_rich_tree(node, top_label))
    for line in buffer.getvalue().splitlines():
        yield line.rstrip()


def get_tree_representation(node: EntryNode, top_label: Optional[str] = None) -> str:
    """Get the complete tree representation as a single string."""
    return "\n".join(stream_tree_representation(node, top_label))


def to_dict(node: EntryNode) -> Dict[str, Any]:
    """Convert a walk result into nested dictionaries.

    Every node becomes ``{"name", "path", "kind", "depth", "children"}``. The
    synthetic top node, which has no record, has None for name, path and kind.
    """

    def convert(current: EntryNode) -> Dict[str, Any]:
        entry = current.entry
        return {
            "name": entry.name if entry is not None else None,
            "path": str(entry.path) if entry is not None else None,
            "kind": entry.kind.value if entry is not None else None,
            "depth": current.depth,
            "children": [],
        }

    top = convert(node)
    stack = [(node, top)]
    while stack:
        current, data = stack.pop()
        for child in current.children:
            child_data = convert(child)
            data["children"].append(child_data)
            stack.append((child, child_data))
    return top


def to_json(node: EntryNode, indent: Optional[int] = None) -> str:
    """Serialize a walk result to JSON.

    Args:
        node: Root of the walk result.
        indent: Indentation passed to json.dumps; None for the compact form.
    """
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)
