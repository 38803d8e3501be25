"""Tests for length functions."""

import pytest

from splitter.config.chunking.models import SplitterConfig
from splitter.errors import InvalidChunkConfigError
from splitter.services.chunking import tokenizer
from splitter.services.chunking.strategies.recursive_character import RecursiveTextSplitter


class _WhitespaceEncoding:
    def __init__(self):
        self.calls: list[dict] = []

    def encode(self, text: str, **kwargs) -> list[str]:
        self.calls.append(kwargs)
        return text.split()


@pytest.fixture()
def fake_encoding(monkeypatch: pytest.MonkeyPatch) -> _WhitespaceEncoding:
    encoding = _WhitespaceEncoding()
    monkeypatch.setattr(tokenizer, "_tiktoken_encoding", encoding)
    return encoding


def test_count_characters_counts_codepoints() -> None:
    assert tokenizer.count_characters("héllo") == 5


def test_count_tokens_empty_text() -> None:
    assert tokenizer.count_tokens("") == 0


def test_count_tokens_uses_encoding(fake_encoding: _WhitespaceEncoding) -> None:
    assert tokenizer.count_tokens("one two three") == 3


def test_get_length_function() -> None:
    assert tokenizer.get_length_function("characters") is tokenizer.count_characters
    assert tokenizer.get_length_function("tokens") is tokenizer.count_tokens


def test_unknown_length_function() -> None:
    with pytest.raises(InvalidChunkConfigError, match="unknown length function"):
        tokenizer.get_length_function("bytes")


def test_splitter_measures_in_tokens(fake_encoding: _WhitespaceEncoding) -> None:
    config = SplitterConfig(chunk_size=3, overlap=0, separators=[" ", ""], length_function="tokens")

    chunks = RecursiveTextSplitter(config).split_text("alpha beta gamma delta epsilon")

    assert chunks == ["alpha beta gamma", "delta epsilon"]


def test_count_tokens_accepts_special_token_text(fake_encoding: _WhitespaceEncoding) -> None:
    assert tokenizer.count_tokens("hello <|endoftext|> world") == 3
    assert fake_encoding.calls == [{"disallowed_special": ()}]
