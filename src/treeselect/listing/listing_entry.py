"""Listing entries and loading of JSON listings."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from treeselect.exceptions import MalformedListingError
from treeselect.types import NodeKind, PathType


@dataclass
class ListingEntry:
    """One entry of a directory listing.

    Attributes:
        name: Base name of the entry.
        kind: FILE or DIRECTORY (the plain strings ``"file"`` and ``"directory"``
            are accepted as well).
        children: The directory's own listing. Required for directories, absent
            for files.
    """

    name: str
    kind: Union[NodeKind, str]
    children: Optional[List["ListingEntry"]] = None

    @classmethod
    def from_mapping(cls, data: Any) -> "ListingEntry":
        """Build an entry, recursively, from a JSON-style mapping.

        The mapping needs ``name`` and ``kind`` keys and, for directories, a
        ``children`` list of further mappings. Structural problems are left to the
        tree builder except for those that prevent building the entry at all.

        Raises:
            MalformedListingError: If ``data`` is not a mapping, lacks a key, or
                has a non-list ``children`` value.

        Example:
            >>> entry = ListingEntry.from_mapping(
            ...     {"name": "src", "kind": "directory", "children": [{"name": "a.py", "kind": "file"}]}
            ... )
            >>> entry.children[0].name
            'a.py'
        """
        if not isinstance(data, Mapping):
            raise MalformedListingError(f"expected an object, got {type(data).__name__}")
        try:
            name = data["name"]
            kind = data["kind"]
        except KeyError as e:
            raise MalformedListingError(f"missing key {e.args[0]!r}", str(data.get("name", ""))) from None

        raw_children = data.get("children")
        children = None
        if raw_children is not None:
            if not isinstance(raw_children, list):
                raise MalformedListingError("children must be a list", str(name))
            children = [cls.from_mapping(child) for child in raw_children]

        return cls(name, kind, children)


def load_listing(path: PathType) -> List[ListingEntry]:
    """Load a listing from a JSON file holding a list of entry objects.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedListingError: If the file is not UTF-8 encoded JSON or not a list of entries.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedListingError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise MalformedListingError(f"expected a list of entries in {path}")
    return [ListingEntry.from_mapping(item) for item in data]
