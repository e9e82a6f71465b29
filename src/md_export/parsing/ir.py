"""Intermediate Representation for parsed Markdown.

This module defines the data structures that bridge raw Markdown input
to format-specific rendering. Every renderer consumes the same typed
lines and styled runs, so parsing happens once per export.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LineKind(Enum):
    """Classification of a single input line."""

    HEADING1 = "h1"
    HEADING2 = "h2"
    PARAGRAPH = "paragraph"
    EMPTY = "empty"


class TextStyle(Enum):
    """Inline emphasis applied to a run (single level, never combined)."""

    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True)
class Line:
    """One input line after classification.

    Attributes:
        kind: Heading level, paragraph, or empty
        text: Line text with the heading marker (if any) stripped
    """

    kind: LineKind
    text: str = ""

    @property
    def is_heading(self) -> bool:
        """Check if this line is a heading of either level."""
        return self.kind in (LineKind.HEADING1, LineKind.HEADING2)


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content, emphasis markers removed
        style: Emphasis applied to the whole run
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return self.style is TextStyle.BOLD

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return self.style is TextStyle.ITALIC

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ExportRequest:
    """A single export action: Markdown content plus a format name."""

    content: str
    format: str = "txt"


@dataclass
class Artifact:
    """Rendered output ready for delivery.

    Attributes:
        filename: Suggested file name (e.g. document.pdf)
        data: Raw payload bytes
        media_type: MIME type of the payload
    """

    filename: str
    data: bytes
    media_type: str = "application/octet-stream"

    def save(self, directory: Path) -> Path:
        """Write the payload into a directory and return the file path."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.data)
        return path
