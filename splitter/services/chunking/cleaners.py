"""Text cleaners for chunking input. Only line endings are touched; content is kept as-is."""

import re

_line_break = re.compile(r"\r\n?")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF so line separators match."""
    if not text:
        return ""
    return _line_break.sub("\n", text)
