"""The :class:`Path` value type."""

import codecs
import functools
import logging
import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, Literal, Optional, Union, overload

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ._internal.paths import (
    SEPARATOR,
    abbreviate_path,
    append_component,
    append_paths,
    join_components,
    last_component,
    normalize_path,
    split_components,
    split_extension,
)
from .filesystem import get_filesystem
from .models import FileStats
from .walk import DirectoryWalker


logger = logging.getLogger(__name__)

PathLike = Union["Path", str, "os.PathLike[str]"]


def _raw(value: Any) -> str:
    if isinstance(value, Path):
        return value._path
    raw = os.fspath(value)
    if not isinstance(raw, str):
        raise TypeError(f"Path requires a str path, got {type(raw).__name__}")
    return raw


@functools.total_ordering
class Path:
    """An immutable filesystem path backed by a single string.

    Path algebra (components, ``+``/``/``, :meth:`normalize`) is purely
    lexical. Filesystem queries and I/O go through the capability returned by
    :func:`pathdantic.filesystem.get_filesystem`.

    Examples:
        >>> Path("a/b/c") + "../d/e"
        Path('a/b/d/e')
        >>> Path("/usr/./local/../bin/swift").normalize()
        Path('/usr/bin/swift')
    """

    __slots__ = ("_path",)

    separator = SEPARATOR

    def __init__(self, path: PathLike = ""):
        object.__setattr__(self, "_path", _raw(path))

    @classmethod
    def from_components(cls, components: Iterable[str]) -> "Path":
        """Join components with the separator; a leading ``"/"`` is not doubled."""
        return cls(join_components(components))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Path is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Path is immutable")

    def __reduce__(self) -> tuple[type["Path"], tuple[str]]:
        return (self.__class__, (self._path,))

    def __copy__(self) -> "Path":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Path":
        return self

    # Conversion

    @property
    def string(self) -> str:
        """The raw path string."""
        return self._path

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Path":
        if isinstance(value, Path):
            return value
        try:
            return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e

    # Components

    @property
    def components(self) -> list[str]:
        return split_components(self._path)

    @property
    def last_component(self) -> str:
        return last_component(self._path)

    @property
    def last_component_without_extension(self) -> str:
        return split_extension(self.last_component)[0]

    @property
    def extension(self) -> Optional[str]:
        return split_extension(self.last_component)[1]

    # Algebra

    def __add__(self, other: object) -> "Path":
        if not isinstance(other, (Path, str)):
            return NotImplemented
        return Path(append_paths(self._path, _raw(other)))

    def __radd__(self, other: object) -> "Path":
        if not isinstance(other, str):
            return NotImplemented
        return Path(append_paths(other, self._path))

    __truediv__ = __add__
    __rtruediv__ = __radd__

    def parent(self) -> "Path":
        return self + ".."

    def normalize(self) -> "Path":
        """Expand a leading ``~`` and resolve ``.``/``..`` without touching the disk."""
        return Path(normalize_path(get_filesystem().expand_user(self._path)))

    @property
    def is_absolute(self) -> bool:
        return self.normalize()._path.startswith(SEPARATOR)

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    def absolute(self) -> "Path":
        if self.is_absolute:
            return self.normalize()
        return (Path.current() + self).normalize()

    def abbreviate(self) -> "Path":
        """Rewrite a path under the home directory to start with ``~``."""
        home = normalize_path(get_filesystem().home())
        return Path(abbreviate_path(self.normalize()._path, home))

    def matches(self, other: PathLike) -> bool:
        """Whether both paths name the same absolute location, lexically."""
        return self.absolute() == Path(other).absolute()

    # Well-known locations

    @classmethod
    def current(cls) -> "Path":
        return cls(get_filesystem().getcwd())

    @classmethod
    def set_current(cls, path: PathLike) -> None:
        """Change the process working directory without restoring it.

        The working directory is process-wide; no lock is taken here or in
        :meth:`chdir`.
        """
        get_filesystem().chdir(_raw(path))
        logger.debug("Working directory set to %s", _raw(path))

    @classmethod
    def home(cls) -> "Path":
        return cls(get_filesystem().home())

    @classmethod
    def temporary(cls) -> "Path":
        return cls(get_filesystem().temporary())

    # Queries

    @property
    def exists(self) -> bool:
        return get_filesystem().exists(self._path)

    @property
    def is_directory(self) -> bool:
        return get_filesystem().is_directory(self._path)

    @property
    def is_symlink(self) -> bool:
        return get_filesystem().is_symlink(self._path)

    @property
    def is_file(self) -> bool:
        return self.exists and not self.is_directory

    @property
    def is_executable(self) -> bool:
        return get_filesystem().access(self._path, os.X_OK)

    @property
    def is_readable(self) -> bool:
        return get_filesystem().access(self._path, os.R_OK)

    @property
    def is_writable(self) -> bool:
        return get_filesystem().access(self._path, os.W_OK)

    @property
    def is_deletable(self) -> bool:
        """Whether the entry exists and its parent directory allows removal."""
        if not (self.exists or self.is_symlink):
            return False
        parent = self.absolute().parent()
        return get_filesystem().access(parent._path, os.W_OK | os.X_OK)

    def stat(self) -> FileStats:
        return get_filesystem().stat(self._path)

    def lstat(self) -> FileStats:
        return get_filesystem().lstat(self._path)

    def symlink_destination(self) -> "Path":
        """Return the link target; relative targets are resolved against the link's parent.

        Raises:
            InvalidPathError: If the path is not a symlink
            FileNotFoundError: If the path does not exist
        """
        destination = Path(get_filesystem().readlink(self._path))
        if destination.is_relative:
            return self.parent() + destination
        return destination

    # Traversal

    def children(self) -> list["Path"]:
        """Direct entries of this directory, sorted by name."""
        names = get_filesystem().listdir(self._path)
        return [Path(append_component(self._path, name)) for name in sorted(names)]

    def recursive_children(self) -> list["Path"]:
        return list(self.walk())

    def walk(self) -> DirectoryWalker:
        return DirectoryWalker(self)

    def __iter__(self) -> Iterator["Path"]:
        return self.walk()

    # I/O

    @overload
    def read(
        self,
        *,
        mode: Literal["text"] = "text",
        encoding: Optional[str] = None,
    ) -> str: ...

    @overload
    def read(
        self,
        *,
        mode: Literal["binary"],
        encoding: None = None,
    ) -> bytes: ...

    def read(
        self,
        *,
        mode: Literal["text", "binary"] = "text",
        encoding: Optional[str] = None,
    ) -> Union[str, bytes]:
        """Read the file.

        * ``mode='text'`` returns ``str`` decoded with ``encoding`` (or the
          filesystem's default encoding). An unknown encoding raises
          ``ValueError``; undecodable content raises ``UnicodeDecodeError``
          (also a ``ValueError``).
        * ``mode='binary'`` returns ``bytes`` and requires ``encoding=None``.
        """
        if mode == "text":
            resolved_encoding = encoding or get_filesystem().encoding
            self._validate_encoding(resolved_encoding)
            return get_filesystem().read_bytes(self._path).decode(resolved_encoding)
        if mode == "binary":
            if encoding is not None:
                raise ValueError("encoding must be None when mode='binary'")
            return get_filesystem().read_bytes(self._path)
        raise ValueError("mode must be 'text' or 'binary'")

    def write(
        self,
        content: Union[str, bytes],
        *,
        mode: Optional[Literal["text", "binary"]] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """Create or overwrite the file.

        ``mode`` is inferred from the content type when omitted. An unknown
        ``encoding`` raises ``ValueError`` before anything is written.
        """
        resolved_encoding = encoding or get_filesystem().encoding
        self._validate_encoding(resolved_encoding)
        payload = self._prepare_write_payload(content, mode=mode, encoding=resolved_encoding)
        get_filesystem().write_bytes(self._path, payload)

    @staticmethod
    def _validate_encoding(encoding: str) -> None:
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e

    @staticmethod
    def _prepare_write_payload(
        content: Union[str, bytes],
        *,
        mode: Optional[Literal["text", "binary"]],
        encoding: str,
    ) -> bytes:
        inferred_mode: Literal["text", "binary"]
        if mode is None:
            if isinstance(content, bytes):
                inferred_mode = "binary"
            elif isinstance(content, str):
                inferred_mode = "text"
            else:
                raise TypeError("content must be str or bytes")
        else:
            inferred_mode = mode

        if inferred_mode == "binary":
            if not isinstance(content, bytes):
                raise TypeError("mode='binary' requires bytes content")
            return content
        if inferred_mode == "text":
            if not isinstance(content, str):
                raise TypeError("mode='text' requires str content")
            return content.encode(encoding)

        raise ValueError("mode must be 'text' or 'binary'")

    def delete(self) -> None:
        """Remove a file, symlink or empty directory."""
        get_filesystem().remove(self._path)

    def mkdir(self, *, parents: bool = False, exist_ok: bool = False) -> None:
        get_filesystem().mkdir(self._path, parents=parents, exist_ok=exist_ok)

    def mkpath(self) -> None:
        self.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def chdir(self) -> Iterator["Path"]:
        """Run a ``with`` block inside this directory.

        The previous working directory is restored on every exit path and
        any exception raised in the block propagates unchanged.

        Examples:
            >>> with Path("/usr/bin").chdir():
            ...     Path.current()
            Path('/usr/bin')
        """
        filesystem = get_filesystem()
        previous = filesystem.getcwd()
        filesystem.chdir(self._path)
        logger.debug("Entered %s (from %s)", self._path, previous)
        try:
            yield self
        finally:
            filesystem.chdir(previous)
            logger.debug("Restored working directory %s", previous)

    # Glob

    @classmethod
    def glob_pattern(cls, pattern: PathLike) -> list["Path"]:
        """Expand a shell glob pattern into sorted absolute paths."""
        expanded = get_filesystem().expand_user(_raw(pattern))
        return [cls(match).absolute() for match in get_filesystem().glob(expanded)]

    def glob(self, pattern: PathLike) -> list["Path"]:
        """Glob ``pattern`` relative to this path."""
        return Path.glob_pattern(self + _raw(pattern))

