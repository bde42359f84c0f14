"""
Custom exceptions for the application.
"""

from enum import Enum
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemErrorKind(Enum):
    """Closed set of failures a file system capability may report.

    Values are the Unix phrases echoed back to the user.
    """

    NOT_FOUND = "No such file or directory"
    ALREADY_EXISTS = "File exists"
    IS_A_DIRECTORY = "Is a directory"
    NOT_A_DIRECTORY = "Not a directory"
    NOT_EMPTY = "Directory not empty"
    PERMISSION_DENIED = "Permission denied"
    INVALID_ARGUMENT = "Invalid argument"
    UNKNOWN = "Unknown error"


class FileSystemError(BaseAppError):
    """Exception raised by file system adapters.

    The ``kind`` tag classifies the failure; callers branch on it instead of
    inspecting the message text.
    """

    def __init__(
        self,
        kind: FileSystemErrorKind,
        path: str = "",
        detail: Optional[str] = None,
    ):
        self.kind = kind
        self.path = path
        self.detail = detail or kind.value
        super().__init__(self.detail)

    @property
    def is_not_found(self) -> bool:
        return self.kind is FileSystemErrorKind.NOT_FOUND

    def __repr__(self) -> str:
        return f"FileSystemError(kind={self.kind.name}, path='{self.path}')"


class SecurityError(BaseAppError):
    """Exception raised when a write targets a path outside the sandbox."""

    pass


class CommandError(BaseAppError):
    """Exception carrying a fully formatted command failure message."""

    def __init__(self, message: str, exit_code: int = 1):
        self.exit_code = exit_code
        super().__init__(message)


class UsageError(CommandError):
    """Exception raised for wrong argument count or shape."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
