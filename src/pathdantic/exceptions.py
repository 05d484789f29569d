"""Domain exception hierarchy for pathdantic."""

from __future__ import annotations

from typing import Any


def _safe_value(value: Any) -> Any:
    if isinstance(value, bytes):
        return f"<bytes:{len(value)}>"
    if isinstance(value, dict):
        return {str(key): _safe_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_safe_value(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


class PathdanticError(Exception):
    """Base exception for all pathdantic errors."""

    default_code = "PATHDANTIC_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context = dict(context or {})

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe description of the error."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "context": _safe_value(self.context),
        }


class FilesystemError(PathdanticError):
    """Base error for filesystem operations."""

    default_code = "FS_ERROR"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, context={"path": path} if path is not None else None)
        self.path = path
        self.cause = cause
        self.errno: int | None = getattr(cause, "errno", None)
        self.strerror: str | None = getattr(cause, "strerror", None)


class FileNotFoundError(FilesystemError):
    """Raised when a requested file or directory does not exist."""

    default_code = "FS_NOT_FOUND"


class FileExistsError(FilesystemError):
    """Raised when a file or directory already exists."""

    default_code = "FS_ALREADY_EXISTS"


class NotADirectoryError(FilesystemError):
    """Raised when a directory operation targets a non-directory path."""

    default_code = "FS_NOT_A_DIRECTORY"


class IsADirectoryError(FilesystemError):
    """Raised when a file operation targets a directory path."""

    default_code = "FS_IS_A_DIRECTORY"


class DirectoryNotEmptyError(FilesystemError):
    """Raised when attempting to remove a non-empty directory."""

    default_code = "FS_DIRECTORY_NOT_EMPTY"


class PermissionError(FilesystemError):
    """Raised when filesystem permissions deny an operation."""

    default_code = "FS_PERMISSION_DENIED"


class InvalidPathError(FilesystemError):
    """Raised when a path is invalid for the requested operation."""

    default_code = "FS_INVALID_PATH"


class ValidationError(PathdanticError):
    """Raised when configuration data validation fails."""

    default_code = "VALIDATION_ERROR"
