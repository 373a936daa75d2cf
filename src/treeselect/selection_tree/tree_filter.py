"""Pruning of the selection tree into a filtered, independent copy.

The canonical tree is never modified here. :func:`filter_tree` clones it first
and prunes the clone, so recomputing the output with different patterns never
loses checkbox state.
"""

from typing import Iterable, List, Optional, Sequence

from treeselect.exclusion_rules.base_rules import BaseExclusionRules
from treeselect.exclusion_rules.composite_rules import CompositeExclusionRules
from treeselect.exclusion_rules.name_rules import NamePatternExclusionRules
from treeselect.selection_tree.selection_node import SelectionNode


def parse_patterns(text: str) -> List[str]:
    """Split a comma-separated pattern string into trimmed, non-empty patterns.

    Example:
        >>> parse_patterns(" *.log, node_modules ,, dist")
        ['*.log', 'node_modules', 'dist']
        >>> parse_patterns("")
        []
    """
    return [pattern.strip() for pattern in text.split(",") if pattern.strip()]


def clone_tree(nodes: Iterable[SelectionNode]) -> List[SelectionNode]:
    """Create a deep copy of the given nodes that shares nothing with the originals.

    The copies are detached: their top-level nodes have no parent even if the
    originals hang under a session container.
    """
    return [_clone_node(node) for node in nodes]


def _clone_node(node: SelectionNode, parent: Optional[SelectionNode] = None) -> SelectionNode:
    copy = type(node)(node.name, parent=parent, checked=node.checked)
    for child in node.children:
        _clone_node(child, copy)
    return copy


def filter_tree(
    nodes: Sequence[SelectionNode],
    patterns: Sequence[str] = (),
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> List[SelectionNode]:
    """Return a pruned copy of the tree holding only selected, non-excluded nodes.

    A node is dropped, together with its whole subtree, when it is unchecked, when
    its name matches one of ``patterns`` (see :class:`NamePatternExclusionRules`),
    or when ``exclusion_rules`` excludes its relative path. A checked child never
    brings back an excluded parent. Directories whose children were all dropped
    are kept as empty directories.

    Args:
        nodes: Top-level nodes of the canonical tree. They are not modified.
        patterns: Glob-style name patterns; invalid ones are logged and skipped.
        exclusion_rules: Additional rules matched against the slash-separated path
            relative to the tree root, with a trailing slash for directories.

    Returns:
        Top-level nodes of the filtered copy.

    Example:
        >>> from treeselect.selection_tree.selection_node import DirectoryNode, FileNode
        >>> src = DirectoryNode("src", children=[FileNode("app.log")])
        >>> [(node.name, len(node.children)) for node in filter_tree([src], ["*.log"])]
        [('src', 0)]
        >>> len(src.children)
        1
    """
    rules: List[BaseExclusionRules] = []
    if patterns:
        rules.append(NamePatternExclusionRules(patterns))
    if exclusion_rules is not None:
        rules.append(exclusion_rules)
    combined = CompositeExclusionRules(rules) if rules else None

    return _prune(clone_tree(nodes), combined, "")


def _prune(
    nodes: Sequence[SelectionNode], rules: Optional[BaseExclusionRules], parent_path: str
) -> List[SelectionNode]:
    kept: List[SelectionNode] = []
    for node in nodes:
        path = f"{parent_path}{node.display_name}"
        if not node.checked or (rules is not None and rules.exclude(path)):
            continue
        if node.is_dir:
            node.children = _prune(node.children, rules, path)
        kept.append(node)
    return kept
