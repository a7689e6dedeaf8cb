"""Reading a single directory level into ordered entry records."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dirwalker.entry_tree.dir_entry import DirEntry
from dirwalker.exceptions import WalkIOError
from dirwalker.filter_rules.base_rules import BaseFilterRules
from dirwalker.types import EntryKind, PathType

logger = logging.getLogger(__name__)


def read_entries(directory: PathType, rules: Optional[BaseFilterRules] = None) -> List[DirEntry]:
    """Return the admitted immediate children of a directory, directories first.

    The directory is scanned once. Symbolic links, entries that are neither a
    directory nor a regular file, and entries rejected by ``rules`` are dropped.
    The remaining directories and files are each sorted by the byte
    representation of their path and concatenated, directories first.

    Args:
        directory: Directory to read. Paths of the returned records are built by
            joining it with each child's name, so pass a canonical path to get
            canonical records.
        rules: Optional filter applied to every child.

    Returns:
        Ordered list of entry records.

    Raises:
        WalkIOError: If the directory cannot be opened or enumerated.

    Example:
        >>> entries = read_entries("/etc")  # doctest: +SKIP
        >>> [e.name for e in entries][:2]  # doctest: +SKIP
        ['alternatives', 'apt']
    """
    directories: List[DirEntry] = []
    files: List[DirEntry] = []

    try:
        with os.scandir(directory) as it:
            for child in it:
                try:
                    record = DirEntry.from_scandir(child)
                except OSError as e:
                    # One unreadable child must not hide its siblings
                    logger.debug("Skipping %s: %s", child.path, e)
                    continue

                if record is None:
                    logger.debug("Skipping symbolic link %s", child.path)
                    continue
                if record.kind is EntryKind.OTHER:
                    continue
                if rules is not None and rules.exclude(record.path, record.is_dir):
                    continue

                if record.is_dir:
                    directories.append(record)
                else:
                    files.append(record)
    except OSError as e:
        raise WalkIOError(directory, e) from e

    directories.sort(key=DirEntry.sort_key)
    files.sort(key=DirEntry.sort_key)
    return directories + files


def find_entry(parent: PathType, target: PathType) -> Optional[DirEntry]:
    """Locate the record for ``target`` by scanning its parent directory.

    Symbolic links are never returned, matching read_entries().

    Args:
        parent: Directory expected to contain ``target``.
        target: Absolute path of the wanted entry.

    Returns:
        The matching record, or None if the listing does not contain it.

    Raises:
        WalkIOError: If the parent cannot be opened or enumerated.
    """
    wanted = Path(target)
    try:
        with os.scandir(parent) as it:
            for child in it:
                if Path(child.path) != wanted:
                    continue
                try:
                    return DirEntry.from_scandir(child)
                except OSError as e:
                    raise WalkIOError(child.path, e) from e
    except OSError as e:
        raise WalkIOError(parent, e) from e
    return None
