"""Lexical path algebra shared by :class:`pathdantic.Path`.

Every function here works on plain strings and never touches the
filesystem. Components follow one structural rule: a leading separator
becomes a ``"/"`` component of its own, everything else is split on the
separator as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"
HOME_MARKER = "~"
CURRENT = "."
PARENT = ".."

_SKIPPED = ("", CURRENT)


def split_components(path: str) -> list[str]:
    """Split ``path`` into components without dropping anything."""
    if not path:
        return []
    if path.startswith(SEPARATOR):
        rest = path[len(SEPARATOR):]
        if not rest:
            return [SEPARATOR]
        return [SEPARATOR, *rest.split(SEPARATOR)]
    return path.split(SEPARATOR)


def join_components(components: Iterable[str]) -> str:
    """Inverse of :func:`split_components`."""
    parts = list(components)
    if not parts:
        return ""
    if parts[0] == SEPARATOR:
        return SEPARATOR + SEPARATOR.join(parts[1:])
    return SEPARATOR.join(parts)


def is_anchored(path: str) -> bool:
    """Return whether ``path`` starts at the root or at a home directory."""
    return path.startswith(SEPARATOR) or path.startswith(HOME_MARKER)


def _is_anchor(components: list[str]) -> bool:
    if len(components) != 1:
        return False
    head = components[0]
    return head == SEPARATOR or head.startswith(HOME_MARKER)


def append_paths(lhs: str, rhs: str) -> str:
    """Append ``rhs`` to ``lhs`` resolving ``.`` and ``..`` against ``lhs``.

    An anchored ``rhs`` replaces ``lhs`` entirely. ``..`` never climbs above
    the root (``"/" + ".."`` is ``"/"``) and never cancels another ``..``.
    """
    if is_anchored(rhs):
        return rhs

    left = split_components(lhs)
    right = split_components(rhs)
    result = [component for component in left if component not in _SKIPPED]

    for component in right:
        if component in _SKIPPED:
            continue
        if component != PARENT:
            result.append(component)
        elif not result or result[-1] == PARENT:
            result.append(PARENT)
        elif _is_anchor(result):
            if result[0] != SEPARATOR:
                result.append(PARENT)
        else:
            result.pop()

    if not result:
        return CURRENT if (left or right) else ""
    return join_components(result)


def append_component(base: str, name: str) -> str:
    """Append a single literal entry name (as returned by ``listdir``) to ``base``."""
    result = [component for component in split_components(base) if component not in _SKIPPED]
    result.append(name)
    return join_components(result)


def normalize_path(path: str) -> str:
    """Resolve ``.``, ``..`` and redundant separators lexically.

    ``..`` at the root is dropped, leading ``..`` of a relative path is kept
    and a relative path that cancels out becomes ``"."``. The empty path
    stays empty.
    """
    if not path:
        return ""

    absolute = path.startswith(SEPARATOR)
    parts: list[str] = []
    for segment in path.split(SEPARATOR):
        if segment in _SKIPPED:
            continue
        if segment == PARENT:
            if parts and parts[-1] != PARENT:
                parts.pop()
            elif not absolute:
                parts.append(PARENT)
            continue
        parts.append(segment)

    if absolute:
        return SEPARATOR + SEPARATOR.join(parts)
    return SEPARATOR.join(parts) or CURRENT


def abbreviate_path(path: str, home: str) -> str:
    """Rewrite ``path`` to start with ``~`` when it lies under ``home``."""
    home = home.rstrip(SEPARATOR)
    if not home:
        return path
    if path == home:
        return HOME_MARKER
    if path.startswith(home + SEPARATOR):
        return HOME_MARKER + path[len(home):]
    return path


def last_component(path: str) -> str:
    components = split_components(path)
    while components and components[-1] == "":
        components.pop()
    return components[-1] if components else ""


def split_extension(name: str) -> tuple[str, str | None]:
    """Split ``name`` into stem and extension.

    A leading dot does not start an extension (``.profile`` has none), and
    an empty extension is reported as ``None``.
    """
    index = name.rfind(".")
    if index <= 0:
        return name, None
    return name[:index], name[index + 1:] or None
