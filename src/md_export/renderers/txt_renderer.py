"""Plain text renderer."""

from typing import Sequence

from md_export.parsing.ir import Line, LineKind
from md_export.parsing.lines import strip_emphasis
from md_export.renderers.base import Renderer


class TXTRenderer(Renderer):
    """Renderer for plain text (.txt) output.

    Heading markers are already gone after line parsing; this renderer
    only strips **bold** and *italic* markers from paragraphs, since
    plain text carries no styling.
    """

    @property
    def name(self) -> str:
        return "txt"

    @property
    def extension(self) -> str:
        return ".txt"

    @property
    def media_type(self) -> str:
        return "text/plain"

    def render(self, lines: Sequence[Line]) -> str:
        """Join lines as unstyled text, trimmed at the document level."""
        parts: list[str] = []

        for line in lines:
            if line.kind is LineKind.PARAGRAPH:
                parts.append(strip_emphasis(line.text))
            else:
                parts.append(line.text)

        return "\n".join(parts).strip()

    def package(self, rendered: str) -> bytes:
        return rendered.encode("utf-8")
