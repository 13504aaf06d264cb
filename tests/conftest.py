"""
Shared pytest fixtures for policymatch tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import policymatch.config as config


@_pytest.fixture(autouse=True)
def isolated_env(
    monkeypatch: _pytest.MonkeyPatch,
    tmp_path: _pathlib.Path,
) -> _pathlib.Path:
    """
    Isolate every test from POLICYMATCH_* variables and real config files.

    The user config directory points at an empty temporary directory and
    the working directory is a fresh project root.

    Returns:
        The temporary project root (current working directory).
    """
    for key in list(_os.environ):
        if key.startswith("POLICYMATCH_"):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "user-config"
    user_dir.mkdir()
    monkeypatch.setenv("POLICYMATCH_CONFIG_DIR", str(user_dir))

    project_root = tmp_path / "project"
    project_root.mkdir()
    monkeypatch.chdir(project_root)
    return project_root


@_pytest.fixture
def user_config_dir() -> _pathlib.Path:
    """The isolated user config directory."""
    return _pathlib.Path(_os.environ["POLICYMATCH_CONFIG_DIR"])


@_pytest.fixture
def clean_settings() -> config.Settings:
    """Settings with defaults only (no YAML layers)."""
    return config.Settings.construct_isolated()


@_pytest.fixture
def write_yaml() -> _typing.Callable[[_pathlib.Path, str], _pathlib.Path]:
    """Return a helper that writes a YAML file, creating parent directories."""

    def _write(path: _pathlib.Path, content: str) -> _pathlib.Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
