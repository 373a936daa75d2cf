from abc import ABC, abstractmethod
from typing import Sequence, Union

from treeselect.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Rules decide, for a path relative to the root of the selection tree, whether
    the entry should be hidden from the rendered output. Paths always use forward
    slashes, and directory paths carry a trailing slash so that rules can tell
    ``build/`` the directory from ``build`` the file. Whether a rule looks at the
    whole path or only at the final name is up to the implementation.

    File loading and individual rule addition are optional capabilities.

    Example:
        >>> from treeselect.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> rules = NamePatternExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            path (str): Slash-separated path relative to the tree root, ending in
                a slash for directories.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """Return True if the object holds any rules that could exclude something."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
