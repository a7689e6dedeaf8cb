"""Entry record for one directory entry observed by the reader."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dirwalker.types import EntryKind


@dataclass(frozen=True)
class DirEntry:
    """A filesystem-provided record for one directory entry.

    Records are only created from ``os.DirEntry`` objects returned by
    ``os.scandir``, so every record in a walk result corresponds to a real
    directory listing.

    Attributes:
        path: Absolute path of the entry.
        name: Final path component.
        kind: Directory, regular file or other.
    """

    path: Path
    name: str
    kind: EntryKind

    @classmethod
    def from_scandir(cls, entry: "os.DirEntry[str]") -> Optional["DirEntry"]:
        """Build a record from a scandir entry, without following symlinks.

        Returns None for symbolic links. Raises OSError if the entry's type can't
        be determined; callers decide whether that is fatal.
        """
        if entry.is_symlink():
            return None
        if entry.is_dir(follow_symlinks=False):
            kind = EntryKind.DIRECTORY
        elif entry.is_file(follow_symlinks=False):
            kind = EntryKind.FILE
        else:
            kind = EntryKind.OTHER
        return cls(Path(entry.path), entry.name, kind)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def sort_key(self) -> bytes:
        """Host byte ordering of the entry's path."""
        return os.fsencode(self.path)
