"""Conversion of a directory listing into selection tree nodes."""

from typing import Iterable, List, Set, Tuple

from treeselect.exceptions import MalformedListingError
from treeselect.listing.listing_entry import ListingEntry
from treeselect.selection_tree.selection_node import SelectionNode, make_node
from treeselect.types import NodeKind


def sort_key(node: SelectionNode) -> Tuple[bool, str, str]:
    """Sort key placing directories before files, then ordering by name.

    Names compare case-insensitively first. Names differing only in case put
    lowercase first, so ``a.txt`` sorts before ``A.txt``.
    """
    return (not node.is_dir, node.name.casefold(), node.name.swapcase())


def build_tree(listing: Iterable[ListingEntry]) -> Tuple[SelectionNode, ...]:
    """Build detached, sorted selection nodes from a directory listing.

    Every node starts out checked. Directories are built from the bottom up and
    each level is sorted with :func:`sort_key`. This is pure data shaping; the
    listing must already be fully materialized.

    Args:
        listing: Entries exposing ``name``, ``kind`` and, for directories,
            ``children``. ``kind`` may be a NodeKind or its string value.

    Returns:
        The top-level nodes of the new tree, in sorted order.

    Raises:
        MalformedListingError: If any entry violates the listing contract.

    Example:
        >>> from treeselect.listing.listing_entry import ListingEntry
        >>> nodes = build_tree([
        ...     ListingEntry("README.md", "file"),
        ...     ListingEntry("src", "directory", [ListingEntry("b.py", "file"), ListingEntry("a.py", "file")]),
        ... ])
        >>> [node.name for node in nodes]
        ['src', 'README.md']
        >>> [child.name for child in nodes[0].children]
        ['a.py', 'b.py']
    """
    return tuple(_build_level(listing, ""))


def _build_level(listing: Iterable[ListingEntry], parent_path: str) -> List[SelectionNode]:
    nodes: List[SelectionNode] = []
    seen: Set[str] = set()

    for entry in listing:
        name = entry.name
        entry_path = f"{parent_path}{name}"

        if not isinstance(name, str) or not name or "/" in name:
            raise MalformedListingError(f"invalid entry name {name!r}", parent_path.rstrip("/"))
        if name in seen:
            raise MalformedListingError("duplicate entry name", entry_path)
        seen.add(name)

        try:
            kind = NodeKind(entry.kind)
        except ValueError:
            raise MalformedListingError(f"unknown kind {entry.kind!r}", entry_path) from None

        node = make_node(name, kind)
        if kind is NodeKind.DIRECTORY:
            if entry.children is None:
                raise MalformedListingError("directory entry has no children listing", entry_path)
            node.children = _build_level(entry.children, f"{entry_path}/")
        elif entry.children:
            raise MalformedListingError("file entry has children", entry_path)

        nodes.append(node)

    nodes.sort(key=sort_key)
    return nodes
