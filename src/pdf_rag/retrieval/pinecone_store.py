"""Pinecone implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

from pinecone import Pinecone, ServerlessSpec

from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import IndexRecord, QueryMatch

logger = logging.getLogger(__name__)


class PineconeVectorStore(VectorStoreBase):
    """Pinecone serverless index.

    Parameters
    ----------
    client:
        A constructed ``pinecone.Pinecone`` client.
    index_name:
        Name of the serverless index.
    cloud / region:
        Deployment used when the index has to be created.
    wait_until_ready:
        Whether :meth:`create_index` blocks until Pinecone reports the
        index ready.  When ``False`` the call returns immediately and the
        index may not accept writes for a short while.
    """

    def __init__(
        self,
        client: Pinecone,
        index_name: str,
        *,
        cloud: str = "aws",
        region: str = "us-east-1",
        wait_until_ready: bool = True,
    ) -> None:
        super().__init__(index_name)
        self._client = client
        self._cloud = cloud
        self._region = region
        self._wait_until_ready = wait_until_ready
        self._index: Any = None

    @classmethod
    def from_api_key(cls, api_key: str, index_name: str, **kwargs: Any) -> PineconeVectorStore:
        return cls(Pinecone(api_key=api_key), index_name, **kwargs)

    @property
    def index(self) -> Any:
        """Lazily resolved data-plane handle for :attr:`index_name`."""
        if self._index is None:
            self._index = self._client.Index(self.index_name)
        return self._index

    # -- VectorStoreBase overrides --------------------------------------------

    def list_indexes(self) -> list[str]:
        return list(self._client.list_indexes().names())

    def create_index(self, *, dimension: int, metric: str) -> None:
        # timeout=None waits for readiness, -1 returns right away.
        self._client.create_index(
            name=self.index_name,
            dimension=dimension,
            metric=metric,
            spec=ServerlessSpec(cloud=self._cloud, region=self._region),
            timeout=None if self._wait_until_ready else -1,
        )

    def upsert(self, records: list[IndexRecord]) -> None:
        self.index.upsert(vectors=[r.to_upsert_dict() for r in records])

    def query(
        self,
        vector: list[float],
        *,
        top_k: int,
        include_metadata: bool = True,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        response = self.index.query(
            vector=vector,
            top_k=top_k,
            include_metadata=include_metadata,
            include_values=include_values,
        )
        return [
            QueryMatch(id=m.id, score=m.score, metadata=dict(m.metadata or {}))
            for m in response.matches
        ]
