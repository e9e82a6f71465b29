"""Line-level Markdown classification."""

import re

from md_export.parsing.ir import Line, LineKind


BOLD_MARKERS = re.compile(r"\*\*(.*?)\*\*")
ITALIC_MARKERS = re.compile(r"\*(.*?)\*")

# str.splitlines would also break on form feeds and unicode separators
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def strip_emphasis(text: str) -> str:
    """Remove bold and italic markers, keeping the inner text."""
    text = BOLD_MARKERS.sub(r"\1", text)
    return ITALIC_MARKERS.sub(r"\1", text)


def classify_line(raw: str) -> Line:
    """Classify a single raw line.

    Headings lose their marker prefix and any inline emphasis markers;
    headings are always rendered unstyled.
    """
    trimmed = raw.strip()

    if not trimmed:
        return Line(LineKind.EMPTY, "")
    if trimmed.startswith("# "):
        return Line(LineKind.HEADING1, strip_emphasis(trimmed[2:]))
    if trimmed.startswith("## "):
        return Line(LineKind.HEADING2, strip_emphasis(trimmed[3:]))
    return Line(LineKind.PARAGRAPH, trimmed)


def parse_lines(content: str) -> list[Line]:
    """Split Markdown content into typed lines.

    Args:
        content: Raw Markdown text

    Returns:
        One Line per input line, in input order
    """
    return [classify_line(raw) for raw in LINE_BREAK.split(content)]
