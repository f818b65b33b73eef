"""Transient ingestion models."""

from __future__ import annotations

from pydantic import BaseModel


class Chunk(BaseModel):
    """A bounded-length segment of a loaded document.

    ``chunk_index`` is the position inside the parent's chunk list;
    ``page`` is the 0-based PDF page the chunk starts on.
    """

    doc_id: str
    source: str
    text: str
    chunk_index: int
    start_index: int = 0
    page: int = 0


class IngestionReport(BaseModel):
    """Counters accumulated over one ingestion run."""

    documents: int = 0
    chunks: int = 0
    records: int = 0
    batches: int = 0

    def __str__(self) -> str:  # noqa: D105
        return (
            f"{self.documents} document(s), {self.chunks} chunk(s), "
            f"{self.records} record(s) in {self.batches} batch(es)"
        )
