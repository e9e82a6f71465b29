"""PDF renderer with manual text flow."""

import io
from dataclasses import dataclass, field
from typing import Optional, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from md_export.parsing.emphasis import parse_emphasis
from md_export.parsing.ir import Line, LineKind, TextRun
from md_export.renderers.base import Renderer


@dataclass(frozen=True)
class PageLayout:
    """Page geometry and typography for the paged renderer.

    All distances are in points. The vertical cursor runs top-down
    from the top margin; conversion to PDF coordinates happens only
    when drawing.
    """

    page_size: tuple[float, float] = A4
    margin: float = 20 * mm
    line_height: float = 7 * mm
    content_width: float = 170 * mm
    regular_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    italic_font: str = "Helvetica-Oblique"
    heading1_size: float = 20
    heading2_size: float = 16
    body_size: float = 12

    @property
    def page_height(self) -> float:
        return self.page_size[1]

    @property
    def break_threshold(self) -> float:
        """Cursor position beyond which the next line starts a new page."""
        return self.page_height - self.margin

    def font_for(self, run: TextRun) -> str:
        """Pick the font face matching a run's emphasis."""
        if run.bold:
            return self.bold_font
        if run.italic:
            return self.italic_font
        return self.regular_font


@dataclass(frozen=True)
class Placement:
    """A piece of text drawn at a fixed position on a page."""

    text: str
    x: float
    y: float
    font: str
    size: float


@dataclass
class Page:
    """One page of positioned text."""

    placements: list[Placement] = field(default_factory=list)

    def place(self, text: str, x: float, y: float, font: str, size: float) -> None:
        self.placements.append(Placement(text, x, y, font, size))


@dataclass
class PagedLayout:
    """Result of laying out a document onto pages."""

    page_size: tuple[float, float]
    pages: list[Page] = field(default_factory=list)

    def new_page(self) -> Page:
        page = Page()
        self.pages.append(page)
        return page

    @property
    def page_count(self) -> int:
        return len(self.pages)


class PDFRenderer(Renderer):
    """Renderer for PDF output.

    Lays out text with a vertical cursor and word wrapping, then draws
    the layout with reportlab's canvas. Headings are bold and larger;
    paragraphs carry per-run bold and italic faces.
    """

    def __init__(self, layout: Optional[PageLayout] = None) -> None:
        self.layout = layout or PageLayout()

    @property
    def name(self) -> str:
        return "pdf"

    @property
    def extension(self) -> str:
        return ".pdf"

    @property
    def media_type(self) -> str:
        return "application/pdf"

    def render(self, lines: Sequence[Line]) -> PagedLayout:
        """Lay out lines onto pages.

        The page-break check runs once per logical line, before it is
        placed; wrapped rows inside a paragraph never break the page.
        """
        layout = self.layout
        paged = PagedLayout(page_size=layout.page_size)
        page = paged.new_page()
        y = layout.margin

        for line in lines:
            if y > layout.break_threshold:
                page = paged.new_page()
                y = layout.margin

            if line.kind is LineKind.HEADING1:
                page.place(line.text, layout.margin, y, layout.bold_font, layout.heading1_size)
                y += layout.line_height * 2
            elif line.kind is LineKind.HEADING2:
                page.place(line.text, layout.margin, y, layout.bold_font, layout.heading2_size)
                y += layout.line_height * 1.5
            elif line.kind is LineKind.PARAGRAPH:
                y = self._render_paragraph(page, parse_emphasis(line.text), y)
            else:
                y += layout.line_height / 2

        return paged

    def _render_paragraph(self, page: Page, runs: list[TextRun], y: float) -> float:
        """Place a paragraph word by word, wrapping at the content width.

        Returns:
            Cursor position one line height below the last row used
        """
        layout = self.layout
        x = layout.margin
        right_edge = layout.margin + layout.content_width

        for run in runs:
            font = layout.font_for(run)
            words = run.text.split(" ")

            for index, word in enumerate(words):
                text = word + " " if index < len(words) - 1 else word
                if not text:
                    continue

                width = stringWidth(text, font, layout.body_size)
                if x + width > right_edge:
                    x = layout.margin
                    y += layout.line_height

                page.place(text, x, y, font, layout.body_size)
                x += width

        return y + layout.line_height

    def package(self, rendered: PagedLayout) -> bytes:
        """Draw the layout onto a PDF canvas."""
        buffer = io.BytesIO()
        canvas = Canvas(buffer, pagesize=rendered.page_size)
        canvas.setTitle("document")
        page_height = rendered.page_size[1]

        for page in rendered.pages:
            for placement in page.placements:
                canvas.setFont(placement.font, placement.size)
                canvas.drawString(placement.x, page_height - placement.y, placement.text)
            canvas.showPage()

        canvas.save()
        return buffer.getvalue()
