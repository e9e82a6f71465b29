"""Core export logic for md-export."""

from md_export.core.exporter import (
    DocumentExporter,
    EmptyContentError,
    ExportError,
    export_document,
    validate_content,
)

__all__ = [
    "DocumentExporter",
    "EmptyContentError",
    "ExportError",
    "export_document",
    "validate_content",
]
