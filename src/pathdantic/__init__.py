"""Pathdantic - lexical path algebra and filesystem helpers with typed results."""

from .config import PathSettings
from .exceptions import (
    DirectoryNotEmptyError,
    FileExistsError,
    FileNotFoundError,
    FilesystemError,
    InvalidPathError,
    IsADirectoryError,
    NotADirectoryError,
    PathdanticError,
    PermissionError,
    ValidationError,
)
from .filesystem import Filesystem, LocalFilesystem, get_filesystem, use_filesystem
from .models import FileStats
from .path import Path
from .walk import DirectoryWalker

__version__ = "0.1.0"

__all__ = [
    # Core value type
    "Path",
    "DirectoryWalker",
    "FileStats",
    # Filesystem capability and settings
    "Filesystem",
    "LocalFilesystem",
    "PathSettings",
    "get_filesystem",
    "use_filesystem",
    # Exceptions
    "PathdanticError",
    "FilesystemError",
    "FileNotFoundError",
    "FileExistsError",
    "NotADirectoryError",
    "IsADirectoryError",
    "DirectoryNotEmptyError",
    "PermissionError",
    "InvalidPathError",
    "ValidationError",
]
