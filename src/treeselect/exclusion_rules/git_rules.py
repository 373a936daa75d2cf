"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from treeselect.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax on relative paths.

    Unlike name patterns, these rules see the full path of an entry relative to
    the tree root, so anchored patterns (``/docs``), directory-only patterns
    (``build/``), ``**`` and negations (``!keep.log``) behave as they do in Git.
    Matching is delegated to the pathspec library.

    Rules from files and individual rules accumulate in the order they are added,
    with later rules overriding earlier ones where Git would.

    Attributes:
        spec (GitIgnoreSpec): Compiled matcher for all rules added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.pyc")
        >>> rules.add_rule("!keep.pyc")
        >>> rules.exclude("pkg/cache.pyc")
        True
        >>> rules.exclude("pkg/keep.pyc")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given files, if any.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. ``"*.pyc"`` or ``"node_modules/"``."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self._lines)
