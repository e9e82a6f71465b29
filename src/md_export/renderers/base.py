"""Abstract base class for document renderers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from md_export.parsing.ir import Artifact, Line

logger = logging.getLogger(__name__)


class Renderer(ABC):
    """Abstract base class for format renderers.

    Each renderer turns parsed lines into a format-specific object
    and packages that object into payload bytes. The shared export
    step names the artifact after the renderer's extension.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name (e.g., 'pdf')."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the output file extension (e.g., '.pdf')."""
        ...

    @property
    @abstractmethod
    def media_type(self) -> str:
        """Return the MIME type of the packaged output."""
        ...

    @abstractmethod
    def render(self, lines: Sequence[Line]) -> Any:
        """Render parsed lines into the format's native structure.

        Args:
            lines: Typed lines from the line parser

        Returns:
            A string, paged layout or document object
        """
        ...

    @abstractmethod
    def package(self, rendered: Any) -> bytes:
        """Serialize the output of render() into payload bytes."""
        ...

    @property
    def filename(self) -> str:
        """Suggested file name for the artifact."""
        return f"document{self.extension}"

    def export(self, lines: Sequence[Line]) -> Artifact:
        """Render and package lines in one pass.

        Args:
            lines: Typed lines from the line parser

        Returns:
            Artifact holding the payload and its suggested filename
        """
        logger.info("%s: starting export", self.name.upper())
        data = self.package(self.render(lines))
        logger.info("%s: export completed (%d bytes)", self.name.upper(), len(data))
        return Artifact(filename=self.filename, data=data, media_type=self.media_type)
