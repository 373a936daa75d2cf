"""Unit tests for the selection node variants."""

import pytest
from anytree import TreeError

from treeselect.selection_tree.selection_node import DirectoryNode, FileNode, make_node
from treeselect.types import NodeKind


def test_node_defaults():
    file_node = FileNode("main.py")
    assert file_node.name == "main.py"
    assert file_node.kind is NodeKind.FILE
    assert not file_node.is_dir
    assert file_node.checked
    assert file_node.children == ()

    dir_node = DirectoryNode("src", checked=False)
    assert dir_node.kind is NodeKind.DIRECTORY
    assert dir_node.is_dir
    assert not dir_node.checked


def test_display_name():
    assert DirectoryNode("src").display_name == "src/"
    assert FileNode("README.md").display_name == "README.md"


def test_directory_accepts_children():
    src = DirectoryNode("src")
    main = FileNode("main.py", parent=src)
    utils = DirectoryNode("utils", parent=src)

    assert src.children == (main, utils)
    assert main.parent is src


def test_file_rejects_children():
    readme = FileNode("README.md")
    with pytest.raises(TreeError):
        FileNode("nested.txt", parent=readme)
    with pytest.raises(TreeError):
        readme.children = [FileNode("other.txt")]
    assert readme.children == ()


def test_make_node_picks_variant():
    assert isinstance(make_node("src", NodeKind.DIRECTORY), DirectoryNode)
    assert isinstance(make_node("a.txt", NodeKind.FILE), FileNode)
    assert not make_node("a.txt", NodeKind.FILE, checked=False).checked
