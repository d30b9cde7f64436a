"""Shared fixtures for aptclient tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from aptclient.runner import CommandResult


@pytest.fixture
def apt_dir(tmp_path: Path) -> Path:
    """An empty apt configuration folder with a sources.list.d directory."""
    (tmp_path / "sources.list.d").mkdir()
    return tmp_path


@pytest.fixture
def make_result():
    """Factory for canned CommandResult values."""

    def _make(output: str = "", returncode: int = 0, args: list[str] | None = None) -> CommandResult:
        return CommandResult(args=args or [], returncode=returncode, output=output)

    return _make
