"""Pytest fixtures for md-export tests."""

import pytest
from pathlib import Path

import md_export.config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Give every test fresh settings, isolated from the developer's .env."""
    monkeypatch.chdir(tmp_path)
    for name in ("MD_EXPORT_FORMAT", "MD_EXPORT_OUTPUT_DIR", "MD_EXPORT_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(md_export.config, "_settings", None)


@pytest.fixture
def sample_markdown() -> str:
    """Sample document covering headings, blank lines and emphasis."""
    return "# Title\n\nThis is **bold** and *italic*."


@pytest.fixture
def long_markdown() -> str:
    """A document long enough to span several PDF pages."""
    sections = []
    for i in range(40):
        sections.append(f"## Section {i}")
        sections.append("Lorem ipsum **dolor** sit amet, *consectetur* adipiscing elit. " * 3)
        sections.append("")
    return "\n".join(sections)


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary Markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory the CLI writes artifacts into."""
    return tmp_path / "out"
