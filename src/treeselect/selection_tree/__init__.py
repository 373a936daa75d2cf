"""Selection tree model with cascading selection, filtering and rendering.

This package holds the canonical in-memory selection tree and the pure functions
that operate on it: building from a listing, propagating checked state, pruning
into a filtered copy, and serializing the result as a text tree.
"""

from .propagation import deselect_all, folders_only, select_all, set_checked
from .selection_node import DirectoryNode, FileNode, SelectionNode
from .tree_builder import build_tree
from .tree_filter import clone_tree, filter_tree, parse_patterns
from .tree_renderer import render_tree, serialize, stream_tree_lines

__all__ = [
    "DirectoryNode",
    "FileNode",
    "SelectionNode",
    "build_tree",
    "clone_tree",
    "deselect_all",
    "filter_tree",
    "folders_only",
    "parse_patterns",
    "render_tree",
    "select_all",
    "serialize",
    "set_checked",
    "stream_tree_lines",
]
