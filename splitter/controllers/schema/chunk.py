"""Request/response schemas for POST /chunk and GET /chunk/profiles."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from splitter.models.document import Document


class ChunkRequest(BaseModel):
    """POST /chunk request body. Documents are chunked with a profile from static.json plus optional overrides."""

    documents: list[Document] = Field(..., min_length=1, description="Documents to chunk, in order")
    profile: str | None = Field(default=None, description="Profile name; defaults to the configured profile")
    chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Optional override for chunk size")
    overlap: int | None = Field(default=None, ge=0, le=100000, description="Optional override for overlap")
    separators: list[str] | None = Field(default=None, description="Optional override for the separator cascade")


class ChunkRecord(BaseModel):
    """One chunk as returned to the caller."""

    chunk_id: str
    document_id: str
    chunk_index: int = Field(..., ge=0)
    chunk_text: str
    chunk_length: int = Field(..., ge=0)
    chunk_hash: str
    chunking_strategy: str
    chunking_config: dict[str, Any]
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class ChunkResponse(BaseModel):
    """POST /chunk response body."""

    documents_chunked: int = Field(..., ge=0, description="Number of documents chunked")
    total_chunks: int = Field(..., ge=0, description="Total chunks across all documents")
    chunks: list[ChunkRecord] = Field(default_factory=list)
    status: str = Field(..., description="success")


class ProfilesResponse(BaseModel):
    """GET /chunk/profiles response body."""

    active: str
    profiles: dict[str, dict[str, Any]]
