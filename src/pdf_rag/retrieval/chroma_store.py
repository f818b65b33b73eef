"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

import chromadb

from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import IndexRecord, QueryMatch

logger = logging.getLogger(__name__)

# Pinecone metric names -> Chroma ``hnsw:space`` values.
_SPACE_MAP = {
    "cosine": "cosine",
    "euclidean": "l2",
    "dotproduct": "ip",
}


def _distance_to_score(distance: float, space: str) -> float:
    """Convert a Chroma distance into a higher-is-better similarity."""
    if space in ("cosine", "ip"):
        return 1.0 - distance
    return 1.0 / (1.0 + distance)


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store; an index maps to a collection.

    Parameters
    ----------
    client:
        A constructed Chroma client (``chromadb.HttpClient`` in production).
    index_name:
        Name of the Chroma collection.
    """

    def __init__(self, client: Any, index_name: str) -> None:
        super().__init__(index_name)
        self._client = client
        self._collection: Any = None

    @classmethod
    def from_host(cls, host: str, port: int, index_name: str) -> ChromaVectorStore:
        return cls(chromadb.HttpClient(host=host, port=port), index_name)

    @property
    def collection(self) -> Any:
        if self._collection is None:
            self._collection = self._client.get_collection(self.index_name)
        return self._collection

    # -- VectorStoreBase overrides --------------------------------------------

    def list_indexes(self) -> list[str]:
        # Newer Chroma releases return names, older ones Collection objects.
        return [getattr(c, "name", c) for c in self._client.list_collections()]

    def create_index(self, *, dimension: int, metric: str) -> None:
        space = _SPACE_MAP.get(metric)
        if space is None:
            raise ValueError(f"Unsupported metric for Chroma: {metric!r}")
        # Chroma fixes the dimension on the first insert.
        logger.debug("Creating Chroma collection %r (dim=%d, space=%s)", self.index_name, dimension, space)
        self._collection = self._client.create_collection(
            name=self.index_name,
            metadata={"hnsw:space": space},
        )

    def upsert(self, records: list[IndexRecord]) -> None:
        self.collection.upsert(
            ids=[r.id for r in records],
            embeddings=[r.values for r in records],
            documents=[r.metadata.get("text", "") for r in records],
            metadatas=[r.metadata for r in records],
        )

    def query(
        self,
        vector: list[float],
        *,
        top_k: int,
        include_metadata: bool = True,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        include = ["distances"]
        if include_metadata:
            include.append("metadatas")
        if include_values:
            include.append("embeddings")

        results = self.collection.query(
            query_embeddings=[vector],
            n_results=top_k,
            include=include,
        )
        space = (self.collection.metadata or {}).get("hnsw:space", "l2")

        ids = results.get("ids", [[]])[0]
        distances = results.get("distances", [[]])[0]
        metas = (results.get("metadatas") or [[None] * len(ids)])[0]

        matches = [
            QueryMatch(id=doc_id, score=_distance_to_score(dist, space), metadata=meta or {})
            for doc_id, dist, meta in zip(ids, distances, metas)
        ]
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches
