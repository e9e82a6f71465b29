"""Parsing utilities turning Markdown text into typed lines and runs."""

from md_export.parsing.ir import (
    Artifact,
    ExportRequest,
    Line,
    LineKind,
    TextRun,
    TextStyle,
)
from md_export.parsing.lines import classify_line, parse_lines, strip_emphasis
from md_export.parsing.emphasis import EmphasisParser, parse_emphasis

__all__ = [
    "Artifact",
    "ExportRequest",
    "Line",
    "LineKind",
    "TextRun",
    "TextStyle",
    "classify_line",
    "parse_lines",
    "strip_emphasis",
    "EmphasisParser",
    "parse_emphasis",
]
