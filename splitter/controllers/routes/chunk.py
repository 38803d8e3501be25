"""POST /chunk: split inline documents with a chunking profile. GET /chunk/profiles: list profiles."""

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from splitter.config.chunking.static import (
    UnknownProfileError,
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunking_config,
)
from splitter.config.logging import get_logger
from splitter.config.settings import get_settings
from splitter.controllers.schema.chunk import ChunkRecord, ChunkRequest, ChunkResponse, ProfilesResponse
from splitter.errors import InvalidChunkConfigError
from splitter.services.chunking.chunker import chunk_documents

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])


def _overrides(body: ChunkRequest) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if body.chunk_size is not None:
        overrides["chunk_size"] = body.chunk_size
    if body.overlap is not None:
        overrides["overlap"] = body.overlap
    if body.separators is not None:
        overrides["separators"] = body.separators
    return overrides


@router.post("", response_model=ChunkResponse)
async def chunk(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk the request documents. The profile defaults to the configured one;
    chunk_size, overlap and separators can be overridden per request.
    """
    settings = get_settings()
    if len(body.documents) > settings.max_documents_per_request:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_documents_per_request} documents per request",
        )
    profile = body.profile or settings.chunking_profile
    try:
        config = resolve_chunking_config(profile, _overrides(body))
    except UnknownProfileError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except (InvalidChunkConfigError, ValidationError) as e:
        logger.info("Rejected chunk configuration", extra={"profile": profile, "error": str(e)})
        raise HTTPException(status_code=422, detail="invalid chunk configuration") from e

    # CPU-bound; keep the event loop free for other requests
    records = await run_in_threadpool(chunk_documents, body.documents, config)
    return ChunkResponse(
        documents_chunked=len(body.documents),
        total_chunks=len(records),
        chunks=[ChunkRecord.model_validate(r) for r in records],
        status="success",
    )


@router.get("/profiles", response_model=ProfilesResponse)
async def list_profiles() -> ProfilesResponse:
    """Return the configured chunking profiles and the active profile name."""
    profiles = load_chunking_profiles()
    return ProfilesResponse(
        active=get_active_profile_name(),
        profiles={name: cfg.model_dump(mode="json") for name, cfg in profiles.items()},
    )
