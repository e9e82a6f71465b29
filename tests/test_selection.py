"""Tests for renderer selection."""

import logging

import pytest
from reportlab.lib.pagesizes import letter

from md_export.renderers import (
    RENDERER_MAP,
    SUPPORTED_FORMATS,
    DOCXRenderer,
    PageLayout,
    PDFRenderer,
    TXTRenderer,
    get_renderer,
)


class TestGetRenderer:
    """Tests for mapping format names to renderers."""

    @pytest.mark.parametrize(
        "name, renderer_class",
        [
            ("txt", TXTRenderer),
            ("pdf", PDFRenderer),
            ("docx", DOCXRenderer),
        ],
    )
    def test_known_formats(self, name: str, renderer_class: type):
        assert isinstance(get_renderer(name), renderer_class)

    @pytest.mark.parametrize("name", ["PDF", "Pdf", " docx ", "TXT"])
    def test_case_insensitive(self, name: str):
        assert get_renderer(name).name == name.strip().lower()

    def test_unknown_format_falls_back_to_txt(self, caplog: pytest.LogCaptureFixture):
        """Test that an unknown format warns instead of failing."""
        with caplog.at_level(logging.WARNING, logger="md_export.renderers"):
            renderer = get_renderer("rtf")

        assert isinstance(renderer, TXTRenderer)
        assert any(
            record.levelno == logging.WARNING and "rtf" in record.getMessage()
            for record in caplog.records
        )

    def test_known_format_does_not_warn(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            get_renderer("pdf")

        assert caplog.records == []

    def test_empty_name_falls_back(self):
        assert isinstance(get_renderer(""), TXTRenderer)

    def test_fresh_instance_per_call(self):
        assert get_renderer("docx") is not get_renderer("docx")

    def test_layout_passed_to_pdf(self):
        layout = PageLayout(page_size=letter)
        renderer = get_renderer("pdf", layout)

        assert isinstance(renderer, PDFRenderer)
        assert renderer.layout is layout

    def test_supported_formats(self):
        assert SUPPORTED_FORMATS == ("txt", "pdf", "docx")
        assert set(RENDERER_MAP) == set(SUPPORTED_FORMATS)
