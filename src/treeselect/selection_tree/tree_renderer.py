"""Rendering of selection trees as box-drawing text."""

from typing import Iterator, Sequence

from treeselect.selection_tree.selection_node import SelectionNode


def stream_tree_lines(nodes: Sequence[SelectionNode], prefix: str = "") -> Iterator[str]:
    """Generate the tree representation of ``nodes`` one line at a time.

    Lines are produced depth-first in document order, without trailing newlines.
    Every line is the prefix, a connector (``└── `` for the last sibling,
    ``├── `` otherwise) and the node's display name. Children of a directory are
    indented with ``"    "`` below a last sibling and ``"│   "`` elsewhere.

    Args:
        nodes: The sibling sequence to render.
        prefix: Indentation inherited from enclosing levels.

    Yields:
        Lines of the tree representation.

    Example:
        >>> from treeselect.selection_tree.selection_node import DirectoryNode, FileNode
        >>> src = DirectoryNode("src", children=[FileNode("main.py")])
        >>> for line in stream_tree_lines([src, FileNode("setup.py")]):
        ...     print(line)
        ├── src/
        │   └── main.py
        └── setup.py
    """
    for i, node in enumerate(nodes):
        is_last = i == len(nodes) - 1
        connector = "└── " if is_last else "├── "
        yield f"{prefix}{connector}{node.display_name}"

        if node.is_dir and node.children:
            yield from stream_tree_lines(node.children, prefix + ("    " if is_last else "│   "))


def serialize(nodes: Sequence[SelectionNode], prefix: str = "") -> str:
    """Render ``nodes`` as text, one newline-terminated line per node."""
    return "".join(f"{line}\n" for line in stream_tree_lines(nodes, prefix))


def render_tree(root_name: str, nodes: Sequence[SelectionNode]) -> str:
    """Render a complete tree headed by the root directory's name.

    Example:
        >>> from treeselect.selection_tree.selection_node import FileNode
        >>> render_tree("project", [FileNode("README.md")])
        'project/\\n└── README.md\\n'
        >>> render_tree("empty", [])
        'empty/\\n'
    """
    return f"{root_name}/\n{serialize(nodes)}"
