"""Query engine — embed a question, search the index, assemble context.

Usage::

    engine = QueryEngine(store, embedder, top_k=10)
    matches, context = engine.ask("Where all did the puppy travel to?")
"""

from __future__ import annotations

import logging

from pdf_rag.ingestion.embedder import EmbeddingClient
from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import QueryMatch

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n"


def build_context(matches: list[QueryMatch]) -> str:
    """Join the ``text`` of every match, best match first."""
    return CONTEXT_SEPARATOR.join(m.text for m in matches)


class QueryEngine:
    """Nearest-neighbour retrieval over a :class:`VectorStoreBase`.

    Every one of the top-*k* matches is kept: no score threshold, no
    deduplication.

    Parameters
    ----------
    store:
        The vector store to search.
    embedder:
        Client used to embed the question.
    top_k:
        Number of neighbours to request.
    """

    def __init__(self, store: VectorStoreBase, embedder: EmbeddingClient, *, top_k: int = 10) -> None:
        self._store = store
        self._embedder = embedder
        self.top_k = top_k

    def retrieve(self, question: str) -> list[QueryMatch]:
        """Return the matches for *question* ordered by descending score."""
        vector = self._embedder.embed_query(question)
        matches = self._store.query(
            vector,
            top_k=self.top_k,
            include_metadata=True,
            include_values=False,
        )
        logger.info("Query returned %d match(es)", len(matches))
        for match in matches:
            logger.debug("  %s", match)
        return sorted(matches, key=lambda m: m.score, reverse=True)

    def ask(self, question: str) -> tuple[list[QueryMatch], str]:
        """Retrieve matches for *question* and build the context string."""
        matches = self.retrieve(question)
        return matches, build_context(matches)
