"""Pytest fixtures for Tag Text tests."""

import pytest
from pathlib import Path

from tag_text import config
from tag_text.formatting.diagnostics import DiagnosticCollector
from tag_text.formatting.parser import TagFormatParser


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and TAG_TEXT_* variables between tests."""
    for var in ("TAG_TEXT_FORMAT", "TAG_TEXT_STRICT", "TAG_TEXT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def parser() -> TagFormatParser:
    """Create a parser with the default style table."""
    return TagFormatParser()


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    """Create an empty diagnostics collector."""
    return DiagnosticCollector()


@pytest.fixture
def sample_markup() -> str:
    """Sample markup with nesting and overlap."""
    return "<bold>Bold <italic>both</bold> italic</italic> plain"


@pytest.fixture
def tmp_markup_file(tmp_path: Path, sample_markup: str) -> Path:
    """Create a temporary markup file for testing."""
    file_path = tmp_path / "markup.txt"
    file_path.write_text(sample_markup, encoding="utf-8")
    return file_path
