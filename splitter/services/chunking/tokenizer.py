"""Length functions for chunk sizing: codepoints by default, tiktoken tokens on request."""

from typing import Callable

import tiktoken

from splitter.config.logging import get_logger
from splitter.errors import InvalidChunkConfigError

logger = get_logger(__name__)

LengthFunction = Callable[[str], int]

_tiktoken_encoding = None


def _get_tiktoken_encoding():
    """Lazy-load tiktoken encoding (cl100k_base used by OpenAI)."""
    global _tiktoken_encoding
    if _tiktoken_encoding is None:
        _tiktoken_encoding = tiktoken.get_encoding("cl100k_base")
        logger.debug("Loaded tiktoken encoding", extra={"encoding": "cl100k_base"})
    return _tiktoken_encoding


def count_characters(text: str) -> int:
    """Return the number of codepoints in text."""
    return len(text)


def count_tokens(text: str) -> int:
    """Return token count for text using the cl100k_base encoding."""
    if not text:
        return 0
    # Special-token strings in documents are counted as plain text
    return len(_get_tiktoken_encoding().encode(text, disallowed_special=()))


LENGTH_FUNCTIONS: dict[str, LengthFunction] = {
    "characters": count_characters,
    "tokens": count_tokens,
}


def get_length_function(name: str) -> LengthFunction:
    """Return the length function registered under name."""
    fn = LENGTH_FUNCTIONS.get(name)
    if fn is None:
        raise InvalidChunkConfigError(f"invalid chunk configuration: unknown length function {name!r}")
    return fn
