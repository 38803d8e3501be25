"""Id generation for chunks. Deterministic so re-chunking the same input gives the same ids."""

import hashlib


def generate_chunk_id(document_id: str, chunk_index: int, chunk_hash: str) -> str:
    """Generate a deterministic chunk_id from document, index, and hash."""
    payload = f"{document_id}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"
