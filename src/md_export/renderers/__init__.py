"""Document renderers for md-export."""

import logging
from typing import Optional

from md_export.renderers.base import Renderer
from md_export.renderers.txt_renderer import TXTRenderer
from md_export.renderers.docx_renderer import DOCXRenderer
from md_export.renderers.pdf_renderer import PDFRenderer, PageLayout

__all__ = [
    "Renderer",
    "TXTRenderer",
    "DOCXRenderer",
    "PDFRenderer",
    "PageLayout",
    "RENDERER_MAP",
    "SUPPORTED_FORMATS",
    "FALLBACK_FORMAT",
    "get_renderer",
]

logger = logging.getLogger(__name__)

# Map format names to renderers
RENDERER_MAP: dict[str, type[Renderer]] = {
    "txt": TXTRenderer,
    "pdf": PDFRenderer,
    "docx": DOCXRenderer,
}

SUPPORTED_FORMATS = tuple(RENDERER_MAP.keys())

FALLBACK_FORMAT = "txt"


def get_renderer(format_name: str, layout: Optional[PageLayout] = None) -> Renderer:
    """Get a renderer for a format name.

    Unknown names fall back to plain text with a warning instead of
    failing the export.

    Args:
        format_name: Case-insensitive format name (txt, pdf, docx)
        layout: Page geometry, used only by the PDF renderer

    Returns:
        A fresh renderer instance
    """
    key = format_name.strip().lower()
    if key not in RENDERER_MAP:
        logger.warning(
            "Unknown format: %s. Defaulting to %s. Supported formats: %s",
            format_name,
            FALLBACK_FORMAT.upper(),
            ", ".join(SUPPORTED_FORMATS),
        )
        key = FALLBACK_FORMAT

    if key == "pdf":
        return PDFRenderer(layout)
    return RENDERER_MAP[key]()
