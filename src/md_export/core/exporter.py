"""Main export orchestrator."""

import logging
from typing import Optional

from md_export.parsing.ir import Artifact, ExportRequest
from md_export.parsing.lines import parse_lines
from md_export.renderers import PageLayout, get_renderer

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Error while rendering or packaging an export."""

    pass


class EmptyContentError(ValueError):
    """Export content is empty or whitespace only."""

    pass


def validate_content(content: str) -> str:
    """Check user input before it reaches the exporter.

    Returns:
        The content with surrounding whitespace trimmed

    Raises:
        EmptyContentError: If nothing is left after trimming
    """
    trimmed = content.strip()
    if not trimmed:
        raise EmptyContentError("Please enter some content to export.")
    return trimmed


class DocumentExporter:
    """Orchestrates the export pipeline.

    Pipeline:
    1. Select a renderer for the requested format
    2. Parse content into typed lines
    3. Render and package into an artifact
    """

    def __init__(self, layout: Optional[PageLayout] = None) -> None:
        """Initialize the exporter.

        Args:
            layout: Optional page geometry for PDF output
        """
        self.layout = layout

    def export(self, request: ExportRequest) -> Artifact:
        """Export one request.

        Args:
            request: Markdown content and target format

        Returns:
            The packaged artifact

        Raises:
            ExportError: If rendering or packaging fails
        """
        renderer = get_renderer(request.format, self.layout)
        logger.info("Exporting as %s...", renderer.name.upper())

        lines = parse_lines(request.content)

        try:
            return renderer.export(lines)
        except Exception as e:
            raise ExportError(f"{renderer.name.upper()} export failed: {e}") from e


def export_document(content: str, format_name: str) -> Artifact:
    """Export Markdown content with default settings."""
    return DocumentExporter().export(ExportRequest(content=content, format=format_name))
