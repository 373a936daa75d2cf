"""Unit tests for filtering the selection tree."""

import logging

from anytree import PreOrderIter

from treeselect.exclusion_rules import name_rules
from treeselect.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treeselect.selection_tree.propagation import set_checked
from treeselect.selection_tree.selection_node import DirectoryNode, FileNode
from treeselect.selection_tree.tree_builder import build_tree
from treeselect.selection_tree.tree_filter import clone_tree, filter_tree, parse_patterns


def shape(nodes):
    """Nested (name, children) structure for easy comparison."""
    return [(node.display_name, shape(node.children)) for node in nodes]


def test_parse_patterns():
    assert parse_patterns("*.log, dist ,,  ") == ["*.log", "dist"]
    assert parse_patterns("") == []
    assert parse_patterns("   ") == []
    assert parse_patterns("single") == ["single"]


def test_clone_is_independent(sample_nodes):
    copies = clone_tree(sample_nodes)
    assert shape(copies) == shape(sample_nodes)
    assert all(copy is not original for copy, original in zip(copies, sample_nodes))

    copies[0].children[0].checked = False
    copies[0].children = []
    assert sample_nodes[0].children[0].checked
    assert len(sample_nodes[0].children) == 2


def test_clone_detaches_from_parent():
    container = DirectoryNode("root")
    src = DirectoryNode("src", parent=container)
    FileNode("a.py", parent=src)
    (copy,) = clone_tree([src])
    assert copy.parent is None
    assert type(copy.children[0]) is FileNode


def test_filter_without_patterns_keeps_checked_nodes(sample_nodes):
    assert shape(filter_tree(sample_nodes)) == [("src/", [("a.ts", []), ("b.ts", [])]), ("README.md", [])]


def test_filter_drops_unchecked_nodes(sample_nodes):
    set_checked(sample_nodes[1], False)
    assert shape(filter_tree(sample_nodes, [])) == [("src/", [("a.ts", []), ("b.ts", [])])]


def test_filter_drops_whole_subtree_of_excluded_directory(sample_nodes):
    src = sample_nodes[0]
    set_checked(src, False)
    set_checked(src.children[0], True)
    assert shape(filter_tree(sample_nodes)) == [("README.md", [])]


def test_filter_keeps_empty_directories(sample_nodes):
    assert shape(filter_tree(sample_nodes, ["*.ts"])) == [("src/", []), ("README.md", [])]


def test_filter_directory_whose_only_child_is_excluded():
    docs = DirectoryNode("docs", children=[FileNode("notes.tmp")])
    assert shape(filter_tree([docs], ["tmp"])) == [("docs/", [])]


def test_filter_substring_match():
    nodes = [FileNode("myfoo.txt"), FileNode("bar.txt")]
    assert shape(filter_tree(nodes, ["foo"])) == [("bar.txt", [])]


def test_filter_pattern_matches_directory_names(nested_listing):
    nodes = build_tree(nested_listing)
    result = filter_tree(nodes, ["util"])
    src = next(node for node in result if node.name == "src")
    assert shape(src.children) == [("main.py", [])]


def test_filter_leaves_canonical_tree_untouched(nested_listing):
    nodes = build_tree(nested_listing)
    set_checked(nodes[0], False)
    before = [(n.name, n.checked, len(n.children)) for root in nodes for n in PreOrderIter(root)]

    filter_tree(nodes, ["*.py", "*.log"])

    after = [(n.name, n.checked, len(n.children)) for root in nodes for n in PreOrderIter(root)]
    assert after == before


def test_filter_is_repeatable(nested_listing):
    nodes = build_tree(nested_listing)
    first = shape(filter_tree(nodes, ["*.log"]))
    assert shape(filter_tree(nodes, [])) != first
    assert shape(filter_tree(nodes, ["*.log"])) == first


def test_filter_bracket_pattern_excludes_nothing(sample_nodes):
    assert shape(filter_tree(sample_nodes, ["["])) == shape(filter_tree(sample_nodes))


def test_filter_skips_pattern_that_fails_to_compile(sample_nodes, monkeypatch, caplog):
    # Without translation "[" is an unterminated character set
    monkeypatch.setattr(name_rules, "translate_pattern", lambda pattern: pattern)

    with caplog.at_level(logging.WARNING, logger="treeselect.exclusion_rules.name_rules"):
        result = filter_tree(sample_nodes, ["[", "a.ts"])

    assert shape(result) == [("src/", [("b.ts", [])]), ("README.md", [])]
    assert "Ignoring invalid exclusion pattern '['" in caplog.text


def test_filter_with_gitignore_rules(nested_listing):
    nodes = build_tree(nested_listing)
    rules = GitIgnoreExclusionRules()
    rules.add_rule("/docs/")
    rules.add_rule("src/utils/*.log")

    result = filter_tree(nodes, exclusion_rules=rules)

    assert [node.name for node in result] == ["empty", "src", "app.log", "setup.py"]
    utils = result[1].children[0]
    assert shape(utils.children) == [("helpers.py", [])]


def test_filter_combines_patterns_and_rules(nested_listing):
    nodes = build_tree(nested_listing)
    rules = GitIgnoreExclusionRules()
    rules.add_rule("empty/")

    result = filter_tree(nodes, ["*.log", "*.md"], rules)

    assert shape(result) == [
        ("docs/", []),
        ("src/", [("utils/", [("helpers.py", [])]), ("main.py", [])]),
        ("setup.py", []),
    ]
