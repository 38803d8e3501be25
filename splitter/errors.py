"""Error types raised by the splitter and its loaders."""


class SplitterError(Exception):
    """Base class for splitter errors."""


class InvalidChunkConfigError(SplitterError, ValueError):
    """Raised when a chunking configuration cannot produce bounded chunks."""


class UnsupportedSourceError(SplitterError):
    """Raised when no loader is registered for a source."""

    def __init__(self, source: str):
        super().__init__(f"Unsupported source type: {source!r}")
        self.source = source
