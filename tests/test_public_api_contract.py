"""Public API contract tests for top-level ``pathdantic`` exports.

These checks are import-only and do not touch the filesystem.
"""

import pathdantic


def test___all___exact_expected_exports() -> None:
    """Top-level public API should match the intended contract exactly."""
    expected_exports = {
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
    }

    assert set(pathdantic.__all__) == expected_exports
    assert len(pathdantic.__all__) == len(expected_exports)


def test_exports_resolve() -> None:
    for name in pathdantic.__all__:
        assert getattr(pathdantic, name) is not None


def test_filesystem_errors_share_a_base() -> None:
    for name in (
        "FileNotFoundError",
        "FileExistsError",
        "NotADirectoryError",
        "IsADirectoryError",
        "DirectoryNotEmptyError",
        "PermissionError",
        "InvalidPathError",
    ):
        assert issubclass(getattr(pathdantic, name), pathdantic.FilesystemError)
    assert issubclass(pathdantic.FilesystemError, pathdantic.PathdanticError)


def test_local_filesystem_satisfies_protocol_shape() -> None:
    members = [
        name
        for name in vars(pathdantic.Filesystem)
        if not name.startswith("_")
    ]
    for name in members:
        assert hasattr(pathdantic.LocalFilesystem, name), name


def test_internal_helpers_not_exposed_at_top_level() -> None:
    """Internal helper symbols should not be importable from ``pathdantic``."""
    assert not hasattr(pathdantic, "translate_os_error")
    assert not hasattr(pathdantic, "normalize_path")
    assert not hasattr(pathdantic, "ERRNO_EXCEPTION_MAP")


def test_version() -> None:
    assert pathdantic.__version__ == "0.1.0"
