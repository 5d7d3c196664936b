"""
Domain-level exceptions raised by the location store.
"""


class DomainError(Exception):
    """Base class for location store rule violations."""
    pass


class InvalidIdentifierError(DomainError):
    """Raised when an identifier does not match the identifier character class."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Invalid identifier '{identifier}': only letters, digits and '_' are allowed"
        )


class IdentifierExistsError(DomainError):
    """Raised when adding an identifier that is already bookmarked."""

    def __init__(self, identifier: str, path: str):
        self.identifier = identifier
        self.path = path
        super().__init__(f"Identifier '{identifier}' already exists ({path})")


class PathExistsError(DomainError):
    """Raised when adding a path that is already bookmarked under another identifier."""

    def __init__(self, path: str, identifier: str):
        self.path = path
        self.identifier = identifier
        super().__init__(f"Path '{path}' already exists under identifier '{identifier}'")


class EntryNotFoundError(DomainError):
    """Raised when an identifier is not present in the store."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Identifier '{identifier}' not found")
