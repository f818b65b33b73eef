"""Record construction and batched upserts."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from pdf_rag.errors import UpsertError
from pdf_rag.ingestion.embedder import clean_text
from pdf_rag.ingestion.models import Chunk
from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import IndexRecord

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 200

T = TypeVar("T")


def record_id(chunk: Chunk) -> str:
    """``<doc_id>-<chunk_index>``; unique across documents and stable across runs."""
    return f"{chunk.doc_id}-{chunk.chunk_index}"


def build_records(chunks: Sequence[Chunk], vectors: Sequence[list[float]]) -> list[IndexRecord]:
    """Pair every chunk with its vector.

    The stored ``text`` is the cleaned text that was embedded.
    ``pageIndex`` is the source page the chunk starts on.
    """
    if len(chunks) != len(vectors):
        raise ValueError(f"Got {len(vectors)} vector(s) for {len(chunks)} chunk(s)")

    return [
        IndexRecord(
            id=record_id(chunk),
            values=vector,
            metadata={
                "text": clean_text(chunk.text),
                "source": chunk.source,
                "pageIndex": chunk.page,
                "chunk_index": chunk.chunk_index,
                "doc_id": chunk.doc_id,
            },
        )
        for chunk, vector in zip(chunks, vectors)
    ]


def batched(items: Sequence[T], size: int) -> Iterator[tuple[int, Sequence[T]]]:
    """Yield ``(start, slice)`` pairs of at most *size* items, in order."""
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield start, items[start : start + size]


def upsert_records(
    store: VectorStoreBase,
    records: Sequence[IndexRecord],
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> int:
    """Write *records* to *store* in batches of at most *batch_size*.

    Returns the number of batches sent.  The first failing batch raises
    :class:`UpsertError` and the remaining batches are not attempted.
    """
    batches = 0
    for start, batch in batched(records, batch_size):
        batch_number = batches + 1
        try:
            store.upsert(list(batch))
        except Exception as exc:
            raise UpsertError(
                f"Upsert of batch {batch_number} (records {start}-{start + len(batch)}) failed: {exc}",
                batch_number=batch_number,
                start=start,
            ) from exc
        batches = batch_number
        logger.info("  upserted batch %d (%d-%d)", batches, start, start + len(batch))
    return batches
