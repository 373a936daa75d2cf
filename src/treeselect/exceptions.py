class MalformedListingError(ValueError):
    """
    Exception raised when a directory listing violates its structural contract.

    Listings come from an external collaborator (the filesystem reader or a JSON
    file). A directory entry without children, an unknown kind, a file entry that
    carries children, an empty or slash-containing name, or duplicate sibling
    names all indicate a broken collaborator and are rejected before any part of
    the selection tree is replaced.

    Attributes:
        entry_path (str): Slash-separated path of the offending entry, relative to
            the listing root. Empty when the problem is with the listing itself.

    Example:
        >>> error = MalformedListingError("directory has no children", "src/lib")
        >>> str(error)
        'Malformed listing entry src/lib: directory has no children'
    """

    def __init__(self, message: str, entry_path: str = "") -> None:
        self.entry_path = entry_path
        if entry_path:
            message = f"Malformed listing entry {entry_path}: {message}"
        super().__init__(message)


class NodeNotFoundError(LookupError):
    """
    Exception raised when a selection path does not name any node in the tree.

    Example:
        >>> error = NodeNotFoundError("docs/missing.md")
        >>> str(error)
        'No entry named docs/missing.md in the selection tree'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No entry named {path} in the selection tree")
