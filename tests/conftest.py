"""Shared fixtures for the nestgen test suite."""

from pathlib import Path

import pytest

from nestgen.core.names import NameSet, derive

from _samples import APP_MODULE


@pytest.fixture
def media() -> NameSet:
    return derive("media")


@pytest.fixture
def media_user() -> NameSet:
    return derive("MediaUser")


@pytest.fixture
def src_root(tmp_path: Path) -> Path:
    """Empty ``apps/api/src`` directory inside a temporary workspace."""
    src = tmp_path / "apps" / "api" / "src"
    src.mkdir(parents=True)
    return src


@pytest.fixture
def app_module(src_root: Path) -> Path:
    path = src_root / "app.module.ts"
    path.write_text(APP_MODULE, encoding="utf-8")
    return path
