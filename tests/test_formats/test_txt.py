"""Tests for TXT renderer."""

import pytest

from md_export.parsing.lines import parse_lines
from md_export.renderers.txt_renderer import TXTRenderer


class TestTXTRenderer:
    """Tests for the plain text renderer."""

    @pytest.fixture
    def renderer(self) -> TXTRenderer:
        return TXTRenderer()

    def test_metadata(self, renderer: TXTRenderer):
        assert renderer.name == "txt"
        assert renderer.filename == "document.txt"
        assert renderer.media_type == "text/plain"

    def test_render_sample(self, renderer: TXTRenderer, sample_markdown: str):
        """Test the heading, blank line and emphasis scenario."""
        text = renderer.render(parse_lines(sample_markdown))

        assert text == "Title\n\nThis is bold and italic."

    def test_heading2_marker_removed(self, renderer: TXTRenderer):
        assert renderer.render(parse_lines("## Sub\nBody")) == "Sub\nBody"

    def test_three_markers_kept(self, renderer: TXTRenderer):
        assert renderer.render(parse_lines("### X")) == "### X"

    def test_document_trimmed(self, renderer: TXTRenderer):
        """Test that leading and trailing blank lines are dropped."""
        text = renderer.render(parse_lines("\n\n  # Title  \nBody\n\n"))

        assert text == "Title\nBody"

    def test_inner_blank_lines_kept(self, renderer: TXTRenderer):
        text = renderer.render(parse_lines("One\n\n\nTwo"))

        assert text == "One\n\n\nTwo"

    def test_lines_trimmed(self, renderer: TXTRenderer):
        assert renderer.render(parse_lines("   indented *text*   ")) == "indented text"

    def test_unterminated_marker_literal(self, renderer: TXTRenderer):
        assert renderer.render(parse_lines("2 * 3 = 6")) == "2 * 3 = 6"

    def test_empty_document(self, renderer: TXTRenderer):
        assert renderer.render(parse_lines("")) == ""

    def test_export_encodes_utf8(self, renderer: TXTRenderer):
        artifact = renderer.export(parse_lines("# Café\n**naïve** façade"))

        assert artifact.filename == "document.txt"
        assert artifact.data.decode("utf-8") == "Café\nnaïve façade"
