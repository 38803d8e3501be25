"""Source loaders and regex-based routing from a source path to a loader."""

import re
from pathlib import Path
from typing import Iterable, Protocol

from splitter.config.chunking.models import SplitterConfig
from splitter.config.logging import get_logger
from splitter.errors import UnsupportedSourceError
from splitter.models.document import Document
from splitter.services.chunking.strategies.recursive_character import RecursiveTextSplitter

logger = get_logger(__name__)


class Loader(Protocol):
    def load_from_source(self, source: str) -> list[Document]: ...


class TextLoader:
    """Read a UTF-8 text file into a single document."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_from_source(self, source: str) -> list[Document]:
        content = Path(source).read_text(encoding=self.encoding)
        return [Document(content=content, metadata={"source": source})]


class LoaderRegistry:
    """
    Maps source patterns to loaders. Patterns are matched against the full source
    string; routes registered later take precedence over earlier ones.
    """

    def __init__(self, include_defaults: bool = True):
        self._routes: list[tuple[re.Pattern[str], Loader]] = []
        if include_defaults:
            text_loader = TextLoader()
            self.with_loader(r".*\.txt$", text_loader)
            self.with_loader(r".*\.md$", text_loader)

    def with_loader(self, pattern: str | re.Pattern[str], loader: Loader) -> "LoaderRegistry":
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        self._routes.append((compiled, loader))
        return self

    def loader_for(self, source: str) -> Loader:
        for pattern, loader in reversed(self._routes):
            if pattern.match(source):
                return loader
        raise UnsupportedSourceError(source)

    def load(self, source: str) -> list[Document]:
        return self.loader_for(source).load_from_source(source)


def load_and_split_sources(
    sources: Iterable[str],
    config: SplitterConfig | None = None,
    registry: LoaderRegistry | None = None,
) -> list[Document]:
    """
    Load every source through the registry and split the result into chunk documents,
    in source order. Raises UnsupportedSourceError for sources without a loader.
    """
    registry = registry or LoaderRegistry()
    splitter = RecursiveTextSplitter(config)
    out: list[Document] = []
    for source in sources:
        documents = registry.load(source)
        chunks = splitter.split_documents(documents)
        logger.info("Loaded source", extra={"source": source, "documents": len(documents), "chunks": len(chunks)})
        out.extend(chunks)
    return out
