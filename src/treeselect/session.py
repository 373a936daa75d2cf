"""Selection session owning the canonical selection tree.

A :class:`SelectionSession` is the single owner of the mutable selection tree
built from the last directory pick. Every mutation (toggling a node, bulk
selection, changing the exclusion patterns) goes through its methods, and
:meth:`SelectionSession.render` recomputes the output from scratch each time.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from anytree import Resolver, ResolverError

from treeselect.exceptions import NodeNotFoundError
from treeselect.exclusion_rules.base_rules import BaseExclusionRules
from treeselect.listing.directory_reader import read_directory
from treeselect.listing.listing_entry import ListingEntry
from treeselect.listing.permission_action import PermissionAction
from treeselect.selection_tree import propagation
from treeselect.selection_tree.selection_node import DirectoryNode, SelectionNode
from treeselect.selection_tree.tree_builder import build_tree
from treeselect.selection_tree.tree_filter import filter_tree, parse_patterns
from treeselect.selection_tree.tree_renderer import render_tree
from treeselect.types import PathType

logger = logging.getLogger(__name__)

_resolver = Resolver("name")


class SelectionSession:
    """Owner of the canonical selection tree and the current exclusion input.

    The picked directory is held as a container node whose children are the
    top-level entries. The container itself is never toggled, filtered or rendered
    as an entry; only its name appears, as the first line of the output.

    Loading a new tree replaces the previous one only once the new tree has been
    completely built, so a failed or interrupted load leaves the session as it was.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Extra rules applied to
            relative paths in addition to the name patterns.

    Example:
        >>> session = SelectionSession()
        >>> session.load_listing("root", [
        ...     ListingEntry("src", "directory", [ListingEntry("a.ts", "file"), ListingEntry("b.ts", "file")]),
        ...     ListingEntry("README.md", "file"),
        ... ])
        >>> session.exclusion_text = "*.ts"
        >>> print(session.render(), end="")
        root/
        ├── src/
        └── README.md
    """

    def __init__(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self.exclusion_rules = exclusion_rules
        self._root: Optional[DirectoryNode] = None
        self._exclusion_text = ""
        self._patterns: List[str] = []

    @property
    def is_loaded(self) -> bool:
        return self._root is not None

    @property
    def root_name(self) -> Optional[str]:
        return self._root.name if self._root is not None else None

    @property
    def entries(self) -> Tuple[SelectionNode, ...]:
        """Top-level nodes of the canonical tree (empty before anything is loaded)."""
        return self._root.children if self._root is not None else ()

    def load_listing(self, root_name: str, listing: Iterable[ListingEntry]) -> None:
        """Replace the canonical tree with one built from ``listing``.

        Raises:
            MalformedListingError: If the listing is malformed. The previous tree
                is kept in that case.
        """
        nodes = build_tree(listing)
        self._root = DirectoryNode(root_name, children=nodes)
        logger.info("Loaded %d top-level entries under %s/", len(nodes), root_name)

    def open_directory(
        self,
        path: PathType,
        permission_action: PermissionAction = PermissionAction.IGNORE,
        follow_symlinks: bool = False,
    ) -> None:
        """Read a directory from disk and make it the canonical tree.

        The whole directory is read before the current tree is touched; errors and
        interruptions during the read propagate and leave the session unchanged.

        Raises:
            FileNotFoundError: If the path doesn't exist.
            NotADirectoryError: If the path isn't a directory.
            PermissionError: If access is denied and permission_action is RAISE.
        """
        root_path = Path(path)
        listing = read_directory(root_path, permission_action, follow_symlinks)
        resolved = root_path.resolve()
        # The filesystem root has no name of its own
        self.load_listing(resolved.name or str(resolved).rstrip("/\\"), listing)

    def find(self, path: str) -> SelectionNode:
        """Return the node at a slash-separated path relative to the tree root.

        Raises:
            NodeNotFoundError: If nothing is loaded or no entry has that path.
        """
        relative = path.strip("/")
        if self._root is None or not relative:
            raise NodeNotFoundError(path)
        try:
            node: SelectionNode = _resolver.get(self._root, relative)
        except ResolverError:
            raise NodeNotFoundError(path) from None
        # ".." components may resolve back to the container, which is not an entry
        if node is self._root:
            raise NodeNotFoundError(path)
        return node

    def set_checked(self, target: Union[SelectionNode, str], value: bool) -> None:
        """Check or uncheck a node, cascading into directories.

        Args:
            target: The node itself or its slash-separated relative path.
            value: The new checked state.
        """
        node = self.find(target) if isinstance(target, str) else target
        propagation.set_checked(node, value)

    def select_all(self) -> None:
        propagation.select_all(self.entries)

    def deselect_all(self) -> None:
        propagation.deselect_all(self.entries)

    def folders_only(self) -> None:
        propagation.folders_only(self.entries)

    @property
    def exclusion_text(self) -> str:
        """The raw comma-separated exclusion input."""
        return self._exclusion_text

    @exclusion_text.setter
    def exclusion_text(self, text: str) -> None:
        self._exclusion_text = text
        self._patterns = parse_patterns(text)

    @property
    def patterns(self) -> List[str]:
        """The name patterns parsed from the exclusion input."""
        return list(self._patterns)

    def filtered_entries(self) -> List[SelectionNode]:
        """Return a filtered copy of the tree; the canonical tree is left untouched."""
        return filter_tree(self.entries, self._patterns, self.exclusion_rules)

    def render(self) -> str:
        """Render the current selection, or an empty string if nothing is loaded."""
        if self._root is None:
            return ""
        return render_tree(self._root.name, self.filtered_entries())
