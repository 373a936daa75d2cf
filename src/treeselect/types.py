from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(str, Enum):
    """Enumeration of entry kinds in a directory listing.

    The values match the strings used by JSON listings, so ``NodeKind("file")``
    and ``NodeKind("directory")`` convert raw listing data directly.

    Attributes:
        FILE: Anything that is not traversed into (regular files, unfollowed symlinks).
        DIRECTORY: A directory with its own listing.
    """

    FILE = "file"
    DIRECTORY = "directory"
