"""Node types for entries in the selection tree."""

from typing import Any, Iterable, Optional

from anytree import Node, TreeError

from treeselect.types import NodeKind


class SelectionNode(Node):  # type: ignore
    """Base node for a file or directory in the selection tree.

    Extends anytree.Node with the entry kind and a ``checked`` flag recording
    whether the entry is part of the current selection. Concrete trees are made of
    the two variants :class:`FileNode` and :class:`DirectoryNode`; the kind is a
    class attribute, so a node can never change variant after creation.

    Attributes:
        name (str): The base name of the entry, unique among its siblings.
        kind (NodeKind): FILE or DIRECTORY, fixed by the subclass.
        checked (bool): Whether the entry is selected. Defaults to True.
        children (tuple[SelectionNode]): Child nodes (always empty for files).

    Example:
        >>> src = DirectoryNode("src")
        >>> main = FileNode("main.py", parent=src)
        >>> src.is_dir, main.is_dir
        (True, False)
        >>> main.checked
        True
    """

    kind: NodeKind

    def __init__(
        self,
        name: str,
        parent: Optional["SelectionNode"] = None,
        children: Optional[Iterable["SelectionNode"]] = None,
        checked: bool = True,
        **kwargs: Any,
    ) -> None:
        self.checked = checked
        super().__init__(name, parent, children, **kwargs)

    @property
    def is_dir(self) -> bool:
        """True if this node is a directory."""
        return self.kind is NodeKind.DIRECTORY

    @property
    def display_name(self) -> str:
        """The name as shown in rendered output: directories get a trailing slash."""
        return f"{self.name}/" if self.is_dir else self.name

    def _pre_attach(self, parent: "SelectionNode") -> None:
        # Files are leaves
        if not getattr(parent, "is_dir", False):
            raise TreeError(f"Cannot attach {self.name!r} under file {parent.name!r}")


class FileNode(SelectionNode):
    """A file entry. File nodes never have children."""

    kind = NodeKind.FILE


class DirectoryNode(SelectionNode):
    """A directory entry whose children are the directory's listing."""

    kind = NodeKind.DIRECTORY


def make_node(name: str, kind: NodeKind, checked: bool = True) -> SelectionNode:
    """Create a detached node of the variant matching ``kind``."""
    if kind is NodeKind.DIRECTORY:
        return DirectoryNode(name, checked=checked)
    return FileNode(name, checked=checked)
