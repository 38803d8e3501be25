"""Chunking configuration models. Read-only; validation only."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from splitter.errors import InvalidChunkConfigError

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ", "")


class SplitterConfig(BaseModel):
    """Recursive splitter parameters. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(default=1000, ge=1, description="Maximum chunk size, in length_function units")
    overlap: int = Field(default=0, ge=0, description="Target overlap between consecutive chunks")
    separators: tuple[str, ...] = Field(
        default=DEFAULT_SEPARATORS,
        description="Separator cascade, highest priority first; '' splits into characters",
    )
    length_function: Literal["characters", "tokens"] = Field(default="characters")
    normalize_newlines: bool = Field(default=False, description="Convert CRLF/CR to LF before splitting")

    @field_validator("separators", mode="before")
    @classmethod
    def _default_when_empty(cls, value):
        # An empty cascade means "use the default one"
        if value is None or len(value) == 0:
            return DEFAULT_SEPARATORS
        return value

    @model_validator(mode="after")
    def _check_overlap(self) -> "SplitterConfig":
        if self.overlap >= self.chunk_size:
            raise InvalidChunkConfigError(
                f"invalid chunk configuration: overlap ({self.overlap}) must be smaller "
                f"than chunk_size ({self.chunk_size})"
            )
        return self
