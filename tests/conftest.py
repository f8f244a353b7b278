"""Shared fixtures for the cppmod test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MakeTemplates = Callable[..., Path]


@pytest.fixture
def make_templates() -> MakeTemplates:
    """Create a template directory holding the given ``{filename: content}`` files."""

    def _make(directory: Path, files: dict[str, str] | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for name, content in (files or {"template.src.cpp": "// src\n"}).items():
            (directory / name).write_text(content, encoding="utf-8")
        return directory

    return _make


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root
