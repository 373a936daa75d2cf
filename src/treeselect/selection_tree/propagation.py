"""Selection propagation over the selection tree.

``set_checked`` is the only operation that cascades from a directory to its
descendants; the bulk operations are expressed in terms of it, except
``folders_only`` which touches files alone. Every operation is idempotent.
"""

from typing import Iterable

from anytree import PreOrderIter

from treeselect.selection_tree.selection_node import SelectionNode


def set_checked(node: SelectionNode, value: bool) -> None:
    """Set the checked state of a node and, for directories, of every descendant.

    Prior individual states of the descendants are overwritten.

    Example:
        >>> from treeselect.selection_tree.selection_node import DirectoryNode, FileNode
        >>> src = DirectoryNode("src")
        >>> main = FileNode("main.py", parent=src)
        >>> set_checked(src, False)
        >>> main.checked
        False
    """
    for descendant in PreOrderIter(node):
        descendant.checked = value


def select_all(nodes: Iterable[SelectionNode]) -> None:
    """Check every node in the given top-level sequence and all their descendants."""
    for node in nodes:
        set_checked(node, True)


def deselect_all(nodes: Iterable[SelectionNode]) -> None:
    """Uncheck every node in the given top-level sequence and all their descendants."""
    for node in nodes:
        set_checked(node, False)


def folders_only(nodes: Iterable[SelectionNode]) -> None:
    """Uncheck every file in the tree, leaving each directory's own state alone.

    Directories are descended into whether or not they are checked, so files under
    a deselected folder are unchecked too. This is a one-shot mutation; there is
    no mode to leave and nothing to restore later.
    """
    for node in nodes:
        for descendant in PreOrderIter(node, filter_=lambda n: not n.is_dir):
            descendant.checked = False
