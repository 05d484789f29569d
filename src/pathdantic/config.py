"""Settings for the local filesystem capability.

No side effects on import. Values can be overridden via ``PATHDANTIC_*``
environment variables.
"""

from __future__ import annotations

import codecs
from typing import Optional

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ValidationError


class PathSettings(BaseSettings):
    """Configuration consulted by :class:`pathdantic.filesystem.LocalFilesystem`.

    Read from ``PATHDANTIC_ENCODING``, ``PATHDANTIC_HOME`` and
    ``PATHDANTIC_TMPDIR``; keyword arguments take precedence.

    Examples:
        >>> settings = PathSettings(home="/home/tester")
        >>> LocalFilesystem(settings).home()
        '/home/tester'
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHDANTIC_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    encoding: str = Field(
        default="utf-8",
        description="Default text encoding for Path.read and Path.write",
    )
    home: Optional[str] = Field(
        None,
        description="Home directory used for '~' expansion and abbreviation",
    )
    temporary: Optional[str] = Field(
        None,
        validation_alias="PATHDANTIC_TMPDIR",
        description="Directory returned by Path.temporary()",
    )

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value

    @field_validator("home", "temporary")
    @classmethod
    def _validate_absolute(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.startswith("/"):
            raise ValueError(f"Directory override must be absolute, got: {value}")
        return value

    @classmethod
    def from_env(cls) -> "PathSettings":
        """Load settings, reporting bad environment values as :class:`ValidationError`."""
        try:
            return cls()
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ValidationError(
                f"Invalid pathdantic settings: {e}",
                context={"fields": fields},
            ) from e
