"""Text chunking."""

from __future__ import annotations

import hashlib
from bisect import bisect_right

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from pdf_rag.ingestion.models import Chunk

DEFAULT_CHUNK_SIZE = 1000


def document_id(document: Document) -> str:
    """Return a stable identifier for *document*.

    Derived from the source path (and the page, for per-page documents)
    so two files never share an id and re-runs reproduce the same one.
    """
    key = str(document.metadata.get("source", ""))
    if "page" in document.metadata:
        key = f"{key}#page={document.metadata['page']}"
    return hashlib.sha256(key.encode()).hexdigest()[:16]


def chunk_document(document: Document, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[Chunk]:
    """Split *document* into chunks of at most *chunk_size* characters.

    Only the size is configured; separators and overlap are the
    splitter's defaults.

    Parameters
    ----------
    document:
        A document produced by :mod:`pdf_rag.ingestion.loader`.
    chunk_size:
        Maximum number of characters per chunk.

    Returns
    -------
    list[Chunk]
        Chunks in read order; ``chunk_index`` equals list position.
    """
    splitter = RecursiveCharacterTextSplitter(chunk_size=chunk_size, add_start_index=True)
    pieces = splitter.create_documents([document.page_content])

    doc_id = document_id(document)
    source = str(document.metadata.get("source", "unknown"))
    chunks: list[Chunk] = []
    for i, piece in enumerate(pieces):
        start = piece.metadata.get("start_index", 0)
        chunks.append(
            Chunk(
                doc_id=doc_id,
                source=source,
                text=piece.page_content,
                chunk_index=i,
                start_index=max(start, 0),
                page=_page_for_offset(document, start),
            )
        )
    return chunks


def chunk_documents(documents: list[Document], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[Chunk]:
    """Chunk every document in *documents*, preserving order."""
    return [c for doc in documents for c in chunk_document(doc, chunk_size=chunk_size)]


def _page_for_offset(document: Document, offset: int) -> int:
    meta = document.metadata
    if "page" in meta:
        return int(meta["page"])
    page_starts = meta.get("page_starts")
    if not page_starts or offset < 0:
        return 0
    return max(bisect_right(page_starts, offset) - 1, 0)
