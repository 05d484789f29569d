"""Typed models returned by filesystem queries."""

import os
import stat

from pydantic import BaseModel, Field


class FileStats(BaseModel):
    """File metadata captured from a single ``stat`` call.

    Examples:
        >>> stats = Path("/etc/hosts").stat()
        >>> stats.is_file
        True
    """

    size: int = Field(ge=0, description="Size in bytes")
    mtime: float = Field(description="Modification time as a POSIX timestamp")
    mode: int = Field(description="Raw ``st_mode`` bits")
    is_file: bool = Field(description="Whether the entry is a regular file")
    is_directory: bool = Field(description="Whether the entry is a directory")
    is_symlink: bool = Field(
        default=False,
        description="Whether the entry itself is a symlink (only for lstat results)",
    )

    @property
    def permissions(self) -> int:
        """Permission bits, e.g. ``0o644``."""
        return stat.S_IMODE(self.mode)

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "FileStats":
        return cls(
            size=result.st_size,
            mtime=result.st_mtime,
            mode=result.st_mode,
            is_file=stat.S_ISREG(result.st_mode),
            is_directory=stat.S_ISDIR(result.st_mode),
            is_symlink=stat.S_ISLNK(result.st_mode),
        )
