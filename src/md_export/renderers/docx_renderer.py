"""Microsoft Word (.docx) renderer."""

import io
from typing import Sequence

from docx import Document
from docx.document import Document as DocxDocument
from docx.shared import Pt

from md_export.parsing.emphasis import parse_emphasis
from md_export.parsing.ir import Line, LineKind, TextRun
from md_export.renderers.base import Renderer


HEADING_LEVELS = {
    LineKind.HEADING1: 1,
    LineKind.HEADING2: 2,
}


class DOCXRenderer(Renderer):
    """Renderer for Microsoft Word (.docx) output.

    Uses python-docx with one paragraph per input line. Headings use
    the built-in Heading 1/Heading 2 styles; paragraphs get run-level
    bold and italic formatting.
    """

    @property
    def name(self) -> str:
        return "docx"

    @property
    def extension(self) -> str:
        return ".docx"

    @property
    def media_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def render(self, lines: Sequence[Line]) -> DocxDocument:
        """Build a Word document from parsed lines."""
        doc = Document()

        # Set default font
        font = doc.styles["Normal"].font
        font.name = "Calibri"
        font.size = Pt(11)

        for line in lines:
            if line.kind is LineKind.EMPTY:
                doc.add_paragraph()
            elif line.is_heading:
                doc.add_heading(line.text, level=HEADING_LEVELS[line.kind])
            else:
                self._add_styled_paragraph(doc, parse_emphasis(line.text))

        return doc

    def _add_styled_paragraph(self, doc: DocxDocument, runs: list[TextRun]) -> None:
        """Add a paragraph with one run per styled segment."""
        # Word expects at least one run per paragraph
        if not runs:
            runs = [TextRun("")]

        para = doc.add_paragraph()
        for run_data in runs:
            run = para.add_run(run_data.text)
            run.bold = run_data.bold
            run.italic = run_data.italic

    def package(self, rendered: DocxDocument) -> bytes:
        """Serialize the document into .docx bytes."""
        buffer = io.BytesIO()
        rendered.save(buffer)
        return buffer.getvalue()
