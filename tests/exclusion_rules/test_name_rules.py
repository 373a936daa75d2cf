"""Unit tests for wildcard name pattern exclusion rules."""

import logging

import pytest

from treeselect.exclusion_rules import name_rules
from treeselect.exclusion_rules.name_rules import NamePatternExclusionRules, translate_pattern


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("*.log", r".*\.log"),
        ("foo", "foo"),
        ("a+b", r"a\+b"),
        ("*", ".*"),
        ("[", r"\["),
    ],
)
def test_translate_pattern(pattern, expected):
    assert translate_pattern(pattern) == expected


@pytest.mark.parametrize(
    "pattern, name, excluded",
    [
        ("*.log", "debug.log", True),
        ("*.log", "debug.txt", False),
        ("foo", "myfoo.txt", True),
        ("foo", "bar.txt", False),
        ("node_modules", "node_modules", True),
        ("test*py", "test_utils.py", True),
        ("a.b", "axb", False),
        ("(x)", "file(x).txt", True),
        ("[", "plain.txt", False),
        ("[", "a[1].txt", True),
    ],
)
def test_exclude_matches_anywhere_in_name(pattern, name, excluded):
    rules = NamePatternExclusionRules([pattern])
    assert rules.exclude(name) is excluded


def test_exclude_ignores_parent_components():
    rules = NamePatternExclusionRules(["build"])
    assert not rules.exclude("build/output.txt")
    assert rules.exclude("src/build/")
    assert rules.exclude("build")


def test_blank_patterns_are_ignored():
    rules = NamePatternExclusionRules(["", "   "])
    assert not rules.has_rules()
    assert rules.patterns == []
    assert not rules.exclude("anything")


def test_patterns_are_trimmed():
    rules = NamePatternExclusionRules([" *.tmp "])
    assert rules.patterns == ["*.tmp"]
    assert rules.exclude("cache.tmp")


def test_invalid_pattern_is_logged_and_skipped(monkeypatch, caplog):
    monkeypatch.setattr(name_rules, "translate_pattern", lambda pattern: pattern)

    with caplog.at_level(logging.WARNING, logger="treeselect.exclusion_rules.name_rules"):
        rules = NamePatternExclusionRules(["(unclosed", "ok"])

    assert rules.invalid_patterns == ["(unclosed"]
    assert rules.patterns == ["ok"]
    assert not rules.exclude("(unclosed")
    assert rules.exclude("ok.txt")
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_add_rule_extends_patterns():
    rules = NamePatternExclusionRules()
    rules.add_rule("*.pyc")
    rules.add_rule("dist")
    assert rules.patterns == ["*.pyc", "dist"]
    assert rules.has_rules()
