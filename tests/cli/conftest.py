"""Fixtures shared by the CLI tests."""

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def no_signal_handlers():
    """Keep the test process's own signal handlers in place."""
    with patch("treeselect.cli.main.setup_signal_handling"):
        yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root logger configuration done by main()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path):
    base = tmp_path / "project"
    (base / "src" / "utils").mkdir(parents=True)
    (base / "src" / "main.py").write_text("def main(): pass\n")
    (base / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (base / "docs").mkdir()
    (base / "docs" / "index.md").write_text("# Docs\n")
    (base / "server.log").write_text("DEBUG\n")
    (base / "README.md").write_text("# Project\n")
    return base
