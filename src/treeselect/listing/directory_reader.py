"""Reading a real directory into a listing.

This is the filesystem side of the listing contract: it walks a directory once
and materializes every entry before anything is built from it. Entries come back
in whatever order the operating system reports them; ordering is the tree
builder's job.

Symbolic Link Behavior:
    By default symlinks are listed as files and never traversed. With
    ``follow_symlinks`` the targets of directory links are read as directories,
    and a link that leads back into a directory already being read is listed as
    an empty directory instead of being followed again.

Permission Handling:
    With PermissionAction.IGNORE an unreadable directory is listed with no
    children, and an entry whose type cannot be determined (a directory that
    can be listed but not searched) is listed as a file. With
    PermissionAction.RAISE the PermissionError propagates.
"""

import logging
import os
from pathlib import Path
from typing import List, Set

from treeselect.listing.file_identifier import FileIdentifier
from treeselect.listing.listing_entry import ListingEntry
from treeselect.listing.permission_action import PermissionAction
from treeselect.types import NodeKind, PathType

logger = logging.getLogger(__name__)


def read_directory(
    path: PathType,
    permission_action: PermissionAction = PermissionAction.IGNORE,
    follow_symlinks: bool = False,
) -> List[ListingEntry]:
    """Read the full listing below a directory.

    Args:
        path: The directory to read. Can be any path-like object.
        permission_action: How to handle directories that cannot be read.
        follow_symlinks: Whether to traverse symlinks to directories.

    Returns:
        The unordered top-level entries, each directory carrying its own listing.

    Raises:
        FileNotFoundError: If the path doesn't exist.
        NotADirectoryError: If the path isn't a directory.
        PermissionError: If access is denied and permission_action is RAISE.

    Example:
        >>> entries = read_directory("src")  # doctest: +SKIP
        >>> sorted(entry.name for entry in entries)  # doctest: +SKIP
        ['treeselect']
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"Root path does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    # Identities of the directories on the current branch, for loop detection
    active: Set[FileIdentifier] = set()
    root_id = FileIdentifier.of(root)
    if root_id is not None:
        active.add(root_id)

    return _read_entries(root, active, permission_action, follow_symlinks)


def _read_entries(
    directory: Path,
    active: Set[FileIdentifier],
    permission_action: PermissionAction,
    follow_symlinks: bool,
) -> List[ListingEntry]:
    try:
        names = os.listdir(directory)
    except PermissionError as e:
        if permission_action == PermissionAction.RAISE:
            raise PermissionError(f"Access denied to {directory}: {e}") from e
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []

    entries: List[ListingEntry] = []
    for name in names:
        child = directory / name
        try:
            is_dir = child.is_dir() and (follow_symlinks or not child.is_symlink())
        except OSError as e:
            # Listable but not searchable: the entry exists, its type is unknown
            if permission_action == PermissionAction.RAISE and isinstance(e, PermissionError):
                raise PermissionError(f"Access denied to {child}: {e}") from e
            logger.debug("Cannot inspect %s, listing it as a file: %s", child, e)
            is_dir = False

        if not is_dir:
            entries.append(ListingEntry(name, NodeKind.FILE))
            continue

        file_id = FileIdentifier.of(child)
        if file_id is not None and file_id in active:
            logger.warning("Symlink loop detected at %s; not following it", child)
            entries.append(ListingEntry(name, NodeKind.DIRECTORY, []))
            continue

        if file_id is not None:
            active.add(file_id)
        try:
            children = _read_entries(child, active, permission_action, follow_symlinks)
        finally:
            if file_id is not None:
                active.discard(file_id)
        entries.append(ListingEntry(name, NodeKind.DIRECTORY, children))

    return entries
