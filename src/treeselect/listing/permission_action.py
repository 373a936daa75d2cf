"""Permission action enum for handling permission errors while reading directories."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read.

    Values:
        IGNORE: Keep the directory as an empty entry and continue (default behavior)
        RAISE: Raise a PermissionError immediately when access is denied
    """

    IGNORE = "ignore"
    RAISE = "raise"
