"""Pytest configuration and fixtures for pathdantic tests."""

import os

import pytest

from pathdantic import LocalFilesystem, Path, PathSettings, use_filesystem


@pytest.fixture
def restore_cwd():
    """Put the working directory back after tests that change it."""
    saved = os.getcwd()
    yield
    os.chdir(saved)


@pytest.fixture
def home_dir():
    """Install a filesystem whose home directory is ``/home/tester``."""
    previous = use_filesystem(LocalFilesystem(PathSettings(home="/home/tester")))
    try:
        yield "/home/tester"
    finally:
        use_filesystem(previous)


@pytest.fixture
def fixtures(tmp_path):
    """Build the on-disk fixture tree and return its root as a Path.

    Layout::

        directory/child
        directory/subdirectory/child
        file
        permissions/{deletable,executable,readable,writable}
        symlinks/directory -> ../directory
        symlinks/file -> ../file
        symlinks/same-dir -> file
        symlinks/swift -> /usr/bin/swift
    """
    root = os.path.join(os.path.realpath(str(tmp_path)), "Fixtures")

    os.makedirs(os.path.join(root, "directory", "subdirectory"))
    os.makedirs(os.path.join(root, "permissions"))
    os.makedirs(os.path.join(root, "symlinks"))

    for relative in ("directory/child", "directory/subdirectory/child", "file"):
        with open(os.path.join(root, relative), "w") as handle:
            handle.write(relative)

    for name in ("deletable", "executable", "readable", "writable"):
        with open(os.path.join(root, "permissions", name), "w") as handle:
            handle.write(name)
    os.chmod(os.path.join(root, "permissions", "executable"), 0o755)

    os.symlink("../directory", os.path.join(root, "symlinks", "directory"))
    os.symlink("../file", os.path.join(root, "symlinks", "file"))
    os.symlink("file", os.path.join(root, "symlinks", "same-dir"))
    os.symlink("/usr/bin/swift", os.path.join(root, "symlinks", "swift"))

    return Path(root)


@pytest.fixture
def scratch_file(tmp_path):
    """Provide a path inside tmp_path that does not exist yet."""
    return Path(os.path.join(os.path.realpath(str(tmp_path)), "pathdantic-testing"))
