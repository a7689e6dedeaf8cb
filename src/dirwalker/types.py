from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Enumeration of directory entry kinds observed while reading a directory.

    Only DIRECTORY and FILE entries are admitted into a walk result; OTHER covers
    sockets, devices, FIFOs and anything else the reader drops.

    Attributes:
        DIRECTORY: Directory
        FILE: Regular file
        OTHER: Any other kind of entry
    """

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"
