"""Internal pathdantic helpers."""

from .errors import ERRNO_EXCEPTION_MAP, handle_os_errors, translate_os_error

__all__ = [
    "ERRNO_EXCEPTION_MAP",
    "handle_os_errors",
    "translate_os_error",
]
