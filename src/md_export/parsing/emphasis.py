"""Inline emphasis parser for paragraph text."""

import re

from md_export.parsing.ir import TextRun, TextStyle


class EmphasisParser:
    """Split a line of text into bold, italic and plain runs."""

    BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
    # A single asterisk on both ends, never part of a doubled marker
    ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")

    def parse(self, text: str) -> list[TextRun]:
        """Tokenize text into styled runs.

        The earliest match wins; when bold and italic start at the same
        position bold is taken. Unterminated markers stay literal.

        Args:
            text: Paragraph text that may contain **bold** or *italic*

        Returns:
            Runs in order, with markers removed. Empty input gives no runs.
        """
        runs: list[TextRun] = []
        remaining = text

        while remaining:
            bold = self.BOLD_PATTERN.search(remaining)
            italic = self.ITALIC_PATTERN.search(remaining)

            if bold and (italic is None or bold.start() <= italic.start()):
                match, style = bold, TextStyle.BOLD
            elif italic:
                match, style = italic, TextStyle.ITALIC
            else:
                runs.append(TextRun(remaining))
                break

            if match.start() > 0:
                runs.append(TextRun(remaining[: match.start()]))
            runs.append(TextRun(match.group(1), style))
            remaining = remaining[match.end():]

        return runs


_parser = EmphasisParser()


def parse_emphasis(text: str) -> list[TextRun]:
    """Parse inline emphasis with a shared parser instance."""
    return _parser.parse(text)
