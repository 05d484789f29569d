"""Lazy depth-first directory traversal."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Optional

from .exceptions import FileNotFoundError, PermissionError

if TYPE_CHECKING:
    from .path import Path


logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Iterate every descendant of a directory in depth-first pre-order.

    Entries of each directory are visited in sorted order. Symlinked
    directories are yielded but not entered, and subdirectories that cannot
    be read are yielded but skipped. Calling :meth:`skip_descendants`
    after an entry has been yielded stops the walker from entering it; its
    siblings are still visited.

    Examples:
        >>> walker = Path("src").walk()
        >>> for entry in walker:
        ...     if entry.last_component == ".git":
        ...         walker.skip_descendants()
    """

    def __init__(self, root: Path):
        self.root = root
        self._pending: list[Iterator[Path]] = [iter(root.children())]
        self._current: Optional[Path] = None
        self._skip = False

    def __iter__(self) -> "DirectoryWalker":
        return self

    def __next__(self) -> Path:
        self._descend()
        while self._pending:
            entry = next(self._pending[-1], None)
            if entry is None:
                self._pending.pop()
                continue
            self._current = entry
            return entry
        raise StopIteration

    def skip_descendants(self) -> None:
        """Do not enter the entry most recently returned by ``next``."""
        self._skip = True

    def _descend(self) -> None:
        current, skip = self._current, self._skip
        self._current, self._skip = None, False
        if current is None or skip:
            return
        if current.is_symlink or not current.is_directory:
            return

        try:
            children = current.children()
        except FileNotFoundError:
            logger.debug("Directory disappeared before traversal: %s", current)
            return
        except PermissionError:
            logger.debug("Skipping unreadable directory: %s", current)
            return
        self._pending.append(iter(children))
