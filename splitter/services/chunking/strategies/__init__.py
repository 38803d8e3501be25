"""Chunking strategy implementations."""

from typing import Callable

from splitter.config.chunking.models import SplitterConfig
from splitter.services.chunking.strategies.recursive_character import recursive_character_chunks

STRATEGY_REGISTRY: dict[str, Callable[[str, SplitterConfig], list[str]]] = {
    "recursive_character": recursive_character_chunks,
    "recursive": recursive_character_chunks,  # alias
}


def get_strategy_fn(strategy_name: str):
    """Return the chunking function for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)
