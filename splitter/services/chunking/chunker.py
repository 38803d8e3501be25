"""
Chunker: takes documents + strategy + config and returns chunk records with chunk_hash.
Deterministic per input and config, apart from created_at.
"""

import hashlib
import json
from datetime import datetime, timezone
from typing import Any, Iterable

from splitter.config.chunking.models import SplitterConfig
from splitter.config.logging import get_logger
from splitter.models.document import Document
from splitter.services.chunking.strategies import get_strategy_fn
from splitter.services.chunking.tokenizer import get_length_function
from splitter.utils.ids import generate_chunk_id

logger = get_logger(__name__)

DEFAULT_STRATEGY = "recursive_character"


def compute_chunk_hash(chunk_text: str, strategy: str, config: SplitterConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + strategy + canonical config JSON)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{strategy}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_document(
    document: Document,
    document_id: str,
    config: SplitterConfig,
    strategy_name: str = DEFAULT_STRATEGY,
) -> list[dict[str, Any]]:
    """
    Chunk one document and build records with chunk_id, chunk_hash, measured length
    and a copy of the document metadata.
    """
    strategy_fn = get_strategy_fn(strategy_name)
    if strategy_fn is None:
        raise ValueError(f"Unknown chunking strategy: {strategy_name!r}")
    length_fn = get_length_function(config.length_function)
    chunk_texts = strategy_fn(document.content, config)
    config_dict = config.model_dump(mode="json")
    now = datetime.now(timezone.utc)
    records: list[dict[str, Any]] = []
    for i, chunk_text in enumerate(chunk_texts):
        chunk_hash = compute_chunk_hash(chunk_text, strategy_name, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, i, chunk_hash),
            "document_id": document_id,
            "chunk_index": i,
            "chunk_text": chunk_text,
            "chunk_length": length_fn(chunk_text),
            "chunk_hash": chunk_hash,
            "chunking_strategy": strategy_name,
            "chunking_config": config_dict,
            "metadata": dict(document.metadata),
            "created_at": now,
        })
    return records


def chunk_documents(
    documents: Iterable[Document],
    config: SplitterConfig,
    strategy_name: str = DEFAULT_STRATEGY,
) -> list[dict[str, Any]]:
    """
    Chunk documents in input order. The document id comes from metadata["id"],
    falling back to doc_<position>.
    """
    records: list[dict[str, Any]] = []
    for position, document in enumerate(documents):
        raw_id = document.metadata.get("id")
        document_id = str(raw_id) if raw_id is not None else f"doc_{position}"
        doc_records = chunk_document(document, document_id, config, strategy_name)
        logger.debug("Chunked document", extra={"document_id": document_id, "chunks": len(doc_records)})
        records.extend(doc_records)
    return records
