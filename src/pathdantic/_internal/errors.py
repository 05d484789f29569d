"""Error translation from ``OSError`` to pathdantic exceptions."""

from __future__ import annotations

import errno
import functools
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from pathdantic.exceptions import (
    DirectoryNotEmptyError,
    FileExistsError,
    FileNotFoundError,
    FilesystemError,
    InvalidPathError,
    IsADirectoryError,
    NotADirectoryError,
    PermissionError,
)

ERRNO_EXCEPTION_MAP: dict[int, type[FilesystemError]] = {
    errno.ENOENT: FileNotFoundError,
    errno.EEXIST: FileExistsError,
    errno.ENOTDIR: NotADirectoryError,
    errno.EISDIR: IsADirectoryError,
    errno.ENOTEMPTY: DirectoryNotEmptyError,
    errno.EPERM: PermissionError,
    errno.EACCES: PermissionError,
    errno.EINVAL: InvalidPathError,
}


def translate_os_error(error: OSError, context: str = "") -> FilesystemError:
    """Translate an ``OSError`` to the matching pathdantic filesystem exception."""

    path = getattr(error, "filename", None)
    base_message = getattr(error, "strerror", None) or str(error)
    message = f"{context}: {base_message}" if context else base_message
    code = getattr(error, "errno", None)

    exception_class = ERRNO_EXCEPTION_MAP.get(code, FilesystemError)
    return exception_class(
        message,
        path=None if path is None else str(path),
        cause=error,
    )


P = ParamSpec("P")
R = TypeVar("R")


def handle_os_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator that re-raises ``OSError`` as pathdantic filesystem errors."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except OSError as e:
            translated = translate_os_error(e, func.__name__)
            raise translated from e

    return wrapper
