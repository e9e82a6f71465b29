"""md-export: Markdown to plain text, PDF and Word export."""

__version__ = "0.1.0"
