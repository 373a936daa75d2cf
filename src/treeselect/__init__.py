"""Interactive directory selection rendered as a text tree.

This package builds a selection tree from a directory listing, lets callers
toggle entries and exclude them by pattern, and renders the remaining
selection as a box-drawing tree suitable for documentation or LLM prompts.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treeselect")
except PackageNotFoundError:
    __version__ = "unknown"
