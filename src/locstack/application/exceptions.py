"""
Application-level exceptions.

These are the fatal outcomes of an operation: the call is aborted and the
interface layer reports the error with a non-zero exit status. Recoverable
outcomes are returned as ``OperationResult`` values instead.
"""


class ApplicationError(Exception):
    """Base exception for fatal application errors."""
    pass


class ValidationError(ApplicationError):
    """Raised when an argument is malformed (identifier, snapshot name)."""
    pass


class UsageError(ApplicationError):
    """Raised when an operation is called with an invalid combination of arguments."""
    pass


class PathResolutionError(ApplicationError):
    """Raised when a path cannot be resolved to an absolute location."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Cannot resolve path '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExternalServiceError(ApplicationError):
    """Raised when an external collaborator (shell, storage) fails."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service} error: {message}")


class SnapshotError(ApplicationError):
    """Raised when a snapshot exists but cannot be read."""
    pass
