"""Abstract base class for vector-store backends.

Adding a new backend (Weaviate, Qdrant …) only requires subclassing
:class:`VectorStoreBase` and implementing the four abstract methods.
Provisioning, upserting and querying are backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pdf_rag.retrieval.models import IndexRecord, QueryMatch


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    index_name:
        Logical name of the index / collection this handle writes to.
    """

    def __init__(self, index_name: str) -> None:
        self.index_name = index_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def list_indexes(self) -> list[str]:
        """Return the names of every index known to the store."""
        ...

    @abstractmethod
    def create_index(self, *, dimension: int, metric: str) -> None:
        """Create :attr:`index_name` with the given dimensionality and metric."""
        ...

    @abstractmethod
    def upsert(self, records: list[IndexRecord]) -> None:
        """Insert or overwrite *records* in a single call."""
        ...

    @abstractmethod
    def query(
        self,
        vector: list[float],
        *,
        top_k: int,
        include_metadata: bool = True,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        """Return at most *top_k* matches ordered by descending similarity."""
        ...
