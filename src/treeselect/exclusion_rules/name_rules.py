"""Exclusion rules matching glob-style wildcards anywhere in an entry's name."""

import logging
import re
from typing import List, Optional, Sequence

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


def translate_pattern(pattern: str) -> str:
    """Translate a wildcard pattern into a regular expression.

    Every character is matched literally except ``*``, which matches any run of
    characters.

    Example:
        >>> translate_pattern("*.log")
        '.*\\\\.log'
    """
    return re.escape(pattern).replace(r"\*", ".*")


class NamePatternExclusionRules(BaseExclusionRules):
    """Exclusion rules matching wildcard patterns against entry names.

    Patterns are matched against the final path component only, never against the
    full path, and the match is a search rather than a full match: a pattern
    excludes an entry if it occurs anywhere in the name. ``foo`` therefore
    excludes ``myfoo.txt``, and ``*.ts`` excludes both ``app.ts`` and
    ``app.tsx``.

    A pattern whose translation fails to compile is logged and skipped; it never
    raises and never excludes anything.

    Attributes:
        invalid_patterns (List[str]): Patterns that were rejected.

    Example:
        >>> rules = NamePatternExclusionRules(["*.log", "tmp"])
        >>> rules.exclude("logs/debug.log")
        True
        >>> rules.exclude("src/tmpfile.py")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None) -> None:
        self._compiled: List["re.Pattern[str]"] = []
        self._patterns: List[str] = []
        self.invalid_patterns: List[str] = []

        for pattern in patterns or ():
            self.add_rule(pattern)

    @property
    def patterns(self) -> List[str]:
        """The accepted patterns, in the order they were added."""
        return list(self._patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single wildcard pattern. Blank patterns are ignored."""
        rule = rule.strip()
        if not rule:
            return

        try:
            compiled = re.compile(translate_pattern(rule))
        except re.error as e:
            logger.warning("Ignoring invalid exclusion pattern %r: %s", rule, e)
            self.invalid_patterns.append(rule)
            return

        self._patterns.append(rule)
        self._compiled.append(compiled)

    def has_rules(self) -> bool:
        return bool(self._compiled)

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return any(pattern.search(name) for pattern in self._compiled)
