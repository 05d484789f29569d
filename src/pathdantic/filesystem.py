"""Filesystem capability consumed by :class:`pathdantic.Path`."""

import glob
import logging
import os
import tempfile
from typing import Optional, Protocol

from ._internal.errors import handle_os_errors
from ._internal.paths import HOME_MARKER, SEPARATOR
from .config import PathSettings
from .models import FileStats


logger = logging.getLogger(__name__)


class Filesystem(Protocol):
    """Operations a path needs from the operating system.

    Predicates (``exists``, ``is_directory``, ``is_symlink``, ``access``)
    answer ``False`` instead of raising. Every other operation raises a
    :class:`pathdantic.exceptions.FilesystemError` subclass on failure.
    """

    encoding: str

    def exists(self, path: str) -> bool: ...

    def is_directory(self, path: str) -> bool: ...

    def is_symlink(self, path: str) -> bool: ...

    def access(self, path: str, mode: int) -> bool: ...

    def stat(self, path: str) -> FileStats: ...

    def lstat(self, path: str) -> FileStats: ...

    def readlink(self, path: str) -> str: ...

    def listdir(self, path: str) -> list[str]: ...

    def getcwd(self) -> str: ...

    def chdir(self, path: str) -> None: ...

    def glob(self, pattern: str) -> list[str]: ...

    def read_bytes(self, path: str) -> bytes: ...

    def write_bytes(self, path: str, data: bytes) -> None: ...

    def remove(self, path: str) -> None: ...

    def mkdir(self, path: str, *, parents: bool = False, exist_ok: bool = False) -> None: ...

    def home(self) -> str: ...

    def temporary(self) -> str: ...

    def expand_user(self, path: str) -> str: ...


class LocalFilesystem:
    """Filesystem capability backed by the ``os`` module.

    Args:
        settings: Optional overrides; read from the environment when omitted.

    Examples:
        >>> fs = LocalFilesystem(PathSettings(home="/home/tester"))
        >>> fs.expand_user("~/notes")
        '/home/tester/notes'
    """

    def __init__(self, settings: Optional[PathSettings] = None):
        self.settings = settings if settings is not None else PathSettings.from_env()

    @property
    def encoding(self) -> str:
        return self.settings.encoding

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def access(self, path: str, mode: int) -> bool:
        return os.access(path, mode)

    @handle_os_errors
    def stat(self, path: str) -> FileStats:
        return FileStats.from_stat_result(os.stat(path))

    @handle_os_errors
    def lstat(self, path: str) -> FileStats:
        return FileStats.from_stat_result(os.lstat(path))

    @handle_os_errors
    def readlink(self, path: str) -> str:
        return os.readlink(path)

    @handle_os_errors
    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)

    @handle_os_errors
    def getcwd(self) -> str:
        return os.getcwd()

    @handle_os_errors
    def chdir(self, path: str) -> None:
        os.chdir(path)

    def glob(self, pattern: str) -> list[str]:
        return sorted(glob.glob(pattern))

    @handle_os_errors
    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()

    @handle_os_errors
    def write_bytes(self, path: str, data: bytes) -> None:
        with open(path, "wb") as handle:
            handle.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    @handle_os_errors
    def remove(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
        logger.debug("Removed %s", path)

    @handle_os_errors
    def mkdir(self, path: str, *, parents: bool = False, exist_ok: bool = False) -> None:
        if parents:
            os.makedirs(path, exist_ok=exist_ok)
        elif exist_ok and os.path.isdir(path):
            return
        else:
            os.mkdir(path)
        logger.debug("Created directory %s", path)

    def home(self) -> str:
        if self.settings.home is not None:
            return self.settings.home
        return os.path.expanduser(HOME_MARKER)

    def temporary(self) -> str:
        if self.settings.temporary is not None:
            return self.settings.temporary
        return tempfile.gettempdir()

    def expand_user(self, path: str) -> str:
        """Expand a leading ``~`` or ``~user``; other paths are returned unchanged."""
        if path == HOME_MARKER or path.startswith(HOME_MARKER + SEPARATOR):
            return self.home().rstrip(SEPARATOR) + path[len(HOME_MARKER):] or SEPARATOR
        if path.startswith(HOME_MARKER):
            return os.path.expanduser(path)
        return path


_active: Optional[Filesystem] = None


def get_filesystem() -> Filesystem:
    """Return the capability used by every :class:`pathdantic.Path`.

    The default :class:`LocalFilesystem` is built on first use, so settings
    from the environment are read then rather than at import.
    """
    global _active
    if _active is None:
        _active = LocalFilesystem()
    return _active


def use_filesystem(filesystem: Optional[Filesystem]) -> Optional[Filesystem]:
    """Install ``filesystem`` for all paths and return the previous one.

    ``None`` restores the lazily built default. The returned value may be
    ``None`` when no capability had been built yet; passing it back restores
    that state.
    """
    global _active
    previous = _active
    _active = filesystem
    return previous
