from enum import Enum
from typing import Optional

from dirwalker.types import PathType


class ErrorKind(str, Enum):
    """Category of a failed walk.

    Values:
        IO_ERROR: An underlying filesystem call failed
        INVALID_INPUT: The root exists but cannot be represented by a directory entry
    """

    IO_ERROR = "io_error"
    INVALID_INPUT = "invalid_input"


class WalkError(Exception):
    """
    Base class for every error that aborts a directory walk.

    A walk either returns a complete tree or raises a subclass of this exception;
    no partial tree is ever returned alongside an error.

    Attributes:
        kind (ErrorKind): Category of the failure.
        path (Optional[str]): The path the failure relates to, when known.

    Example:
        >>> error = WalkError("walk failed", path="/tmp/x")
        >>> error.path
        '/tmp/x'
    """

    kind = ErrorKind.IO_ERROR

    def __init__(self, message: str, path: Optional[PathType] = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)


class WalkIOError(WalkError):
    """
    Exception raised when a filesystem call fails during configuration or traversal.

    This covers canonicalizing the root or a skipped directory and opening or
    enumerating any directory visited by the walk. The original OSError is kept
    as the exception's __cause__.

    Example:
        >>> error = WalkIOError("/missing", FileNotFoundError(2, "No such file or directory"))
        >>> error.kind.value
        'io_error'
        >>> str(error)
        'I/O error on /missing: [Errno 2] No such file or directory'
    """

    kind = ErrorKind.IO_ERROR

    def __init__(self, path: PathType, error: OSError) -> None:
        """
        Initialize the exception from the path and the underlying OSError.

        Args:
            path (PathType): Path of the failed filesystem call.
            error (OSError): The error raised by the filesystem call.
        """
        self.errno = error.errno
        super().__init__(f"I/O error on {path}: {error}", path=path)


class InvalidInputError(WalkError, ValueError):
    """
    Exception raised when the root cannot be represented by a directory entry.

    This happens when the root is missing from its parent's listing, or when the
    root is neither a directory nor a regular file.

    Example:
        >>> error = InvalidInputError("/dev/null", "not a directory or regular file")
        >>> str(error)
        'Invalid walk root /dev/null: not a directory or regular file'
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, path: PathType, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid walk root {path}: {reason}", path=path)
