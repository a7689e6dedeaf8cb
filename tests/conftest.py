"""Test configuration and fixtures for dirwalker."""

import os

import pytest


@pytest.fixture
def fx(tmp_path):
    """Create the reference tree used across the walk tests.

    fx/
    ├── .git/
    │   └── HEAD
    ├── a/
    │   ├── .hidden
    │   └── x.txt
    ├── b.txt
    └── link -> a   (only when symlinks can be created)
    """
    root = tmp_path / "fx"
    root.mkdir()
    (root / "a").mkdir()
    (root / "a" / "x.txt").write_text("x")
    (root / "a" / ".hidden").write_text("hidden")
    (root / "b.txt").write_text("b")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    try:
        os.symlink(root / "a", root / "link", target_is_directory=True)
    except (OSError, NotImplementedError):
        # Symlink creation may need privileges on some platforms
        pass
    return root


@pytest.fixture
def has_symlinks(fx):
    return (fx / "link").is_symlink()
