"""Test configuration and fixtures for treeselect."""

import pytest

from treeselect.listing.listing_entry import ListingEntry
from treeselect.selection_tree.tree_builder import build_tree


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_listing():
    """Listing for root/ with src/{a.ts,b.ts} and README.md, deliberately unordered."""
    return [
        ListingEntry("README.md", "file"),
        ListingEntry("src", "directory", [ListingEntry("b.ts", "file"), ListingEntry("a.ts", "file")]),
    ]


@pytest.fixture
def sample_nodes(sample_listing):
    return build_tree(sample_listing)


@pytest.fixture
def nested_listing():
    """A deeper listing with empty and nested directories."""
    return [
        ListingEntry(
            "src",
            "directory",
            [
                ListingEntry("main.py", "file"),
                ListingEntry(
                    "utils",
                    "directory",
                    [ListingEntry("helpers.py", "file"), ListingEntry("debug.log", "file")],
                ),
            ],
        ),
        ListingEntry("docs", "directory", [ListingEntry("index.md", "file")]),
        ListingEntry("empty", "directory", []),
        ListingEntry("setup.py", "file"),
        ListingEntry("app.log", "file"),
    ]
