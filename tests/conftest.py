"""Shared fixtures for hookscanner tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from hookscanner.console import RichLogger

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the sample PHP plugin files."""
    return FIXTURES_DIR


@pytest.fixture
def quiet_logger():
    """Logger writing to an in-memory console."""
    return RichLogger(console=Console(file=io.StringIO(), width=500), verbose=True)


@pytest.fixture
def write_php(tmp_path):
    """Write a PHP file relative to tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
