"""Directory listings consumed by the tree builder.

A listing is a nested sequence of entries, each reporting a name and a kind.
Listings come either from the filesystem (:func:`read_directory`) or from a JSON
document (:func:`load_listing`).
"""

from .directory_reader import read_directory
from .listing_entry import ListingEntry, load_listing
from .permission_action import PermissionAction

__all__ = ["ListingEntry", "PermissionAction", "load_listing", "read_directory"]
