"""Recursive character chunking. Splits on a separator cascade and merges fragments with overlap."""

from typing import Iterable, Sequence

from splitter.config.chunking.models import SplitterConfig
from splitter.config.logging import get_logger
from splitter.models.document import Document
from splitter.services.chunking.cleaners import normalize_newlines
from splitter.services.chunking.tokenizer import LengthFunction, get_length_function

logger = get_logger(__name__)


def select_separator(text: str, separators: Sequence[str]) -> str:
    """
    Return the first separator that occurs in text. The empty separator matches
    unconditionally. When nothing matches, the last separator is returned.
    """
    for separator in separators:
        if separator == "" or separator in text:
            return separator
    return separators[-1]


def split_on_separator(text: str, separator: str) -> list[str]:
    """Split on every occurrence of separator, keeping empty fragments. '' explodes into characters."""
    if separator:
        return text.split(separator)
    return list(text)


class RecursiveTextSplitter:
    """
    Cut text into chunks of at most config.chunk_size, preferring the earliest
    separators of the cascade (paragraphs, then lines, then words, then characters).

    Consecutive chunks of one merge pass share trailing fragments up to config.overlap.
    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, config: SplitterConfig | None = None, length_function: LengthFunction | None = None):
        self.config = config if config is not None else SplitterConfig()
        self._length = length_function or get_length_function(self.config.length_function)

    def select_separator(self, text: str) -> str:
        return select_separator(text, self.config.separators)

    def split_text(self, text: str) -> list[str]:
        """Return ordered chunks for text. Empty text gives no chunks."""
        if not text:
            return []
        if self.config.normalize_newlines:
            text = normalize_newlines(text)
        return self._split(text)

    def _split(self, text: str) -> list[str]:
        chunk_size = self.config.chunk_size
        separator = self.select_separator(text)
        splits = split_on_separator(text, separator)
        if separator and len(splits) == 1 and self._length(text) >= chunk_size:
            # The separator does not occur; without this the same text would recurse forever
            logger.debug(
                "No separator makes progress, splitting into characters",
                extra={"separator": separator, "length": len(text)},
            )
            separator = ""
            splits = list(text)

        chunks: list[str] = []
        good_splits: list[str] = []
        for fragment in splits:
            if self._length(fragment) < chunk_size:
                good_splits.append(fragment)
                continue
            if good_splits:
                chunks.extend(self.merge_splits(good_splits, separator))
                good_splits = []
            # Atomic means one codepoint, whatever the length function measures
            if len(fragment) <= 1:
                logger.debug(
                    "Emitting atomic unit larger than chunk_size",
                    extra={"length": self._length(fragment), "chunk_size": chunk_size},
                )
                chunks.append(fragment)
            else:
                chunks.extend(self._split(fragment))
        if good_splits:
            chunks.extend(self.merge_splits(good_splits, separator))
        return chunks

    def merge_splits(self, splits: Iterable[str], separator: str) -> list[str]:
        """
        Join fragments back into chunks no longer than chunk_size. When a chunk is
        closed, its trailing fragments (up to overlap) seed the next one.
        """
        chunk_size = self.config.chunk_size
        separator_len = self._length(separator)
        chunks: list[str] = []
        window: list[str] = []
        window_len = 0
        for split in splits:
            split_len = self._length(split)
            if window and window_len + separator_len + split_len > chunk_size:
                self._close_window(window, separator, chunks)
                window, window_len = self._carry_over(window, separator_len, split_len)
            window_len += split_len + (separator_len if window else 0)
            window.append(split)
        if window:
            self._close_window(window, separator, chunks)
        return chunks

    def _close_window(self, window: list[str], separator: str, chunks: list[str]) -> None:
        chunk = separator.join(window)
        if chunk:
            chunks.append(chunk)
            return
        # A lone empty fragment stands for the separator beside it; keep that as its own chunk
        if not separator:
            return
        if self._length(separator) <= self.config.chunk_size:
            chunks.append(separator)
        else:
            chunks.extend(self.merge_splits(list(separator), ""))

    def _carry_over(self, window: list[str], separator_len: int, incoming_len: int) -> tuple[list[str], int]:
        """Trailing fragments of a closed window that fit within overlap and leave room for the next fragment."""
        if self.config.overlap == 0:
            return [], 0
        limit = self.config.chunk_size - separator_len - incoming_len
        carried: list[str] = []
        carried_len = 0
        for fragment in reversed(window):
            candidate = carried_len + self._length(fragment) + (separator_len if carried else 0)
            if candidate > self.config.overlap or candidate > limit:
                break
            carried.append(fragment)
            carried_len = candidate
        carried.reverse()
        return carried, carried_len

    def split_documents(self, documents: Iterable[Document]) -> list[Document]:
        """Split each document; every chunk gets its own shallow copy of the source metadata."""
        out: list[Document] = []
        for doc in documents:
            for chunk in self.split_text(doc.content):
                out.append(Document(content=chunk, metadata=dict(doc.metadata)))
        return out


def recursive_character_chunks(text: str, config: SplitterConfig) -> list[str]:
    """Strategy entry point: split text with a RecursiveTextSplitter built from config."""
    return RecursiveTextSplitter(config).split_text(text)
