"""Device and inode identity used to detect symlink loops."""

from pathlib import Path
from typing import NamedTuple, Optional


class FileIdentifier(NamedTuple):
    """Identity of a directory on disk, independent of the path used to reach it.

    Two paths leading to the same directory (for example through a symlink) share
    the same device ID and inode number.
    """

    device_id: int
    inode_number: int

    @classmethod
    def of(cls, path: Path) -> Optional["FileIdentifier"]:
        """Return the identity of ``path``, following symlinks, or None if it can't be stat'ed."""
        try:
            stat_info = path.stat()
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
