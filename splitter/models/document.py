"""Document model shared by loaders, the splitter and the HTTP layer."""

from typing import Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    """Text content paired with opaque metadata. Metadata is copied, never shared, by the splitter."""

    content: str = Field(default="", description="Raw text")
    metadata: dict[str, Any] = Field(default_factory=dict)
