"""Domain models for index records and query results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class IndexRecord(BaseModel):
    """The unit persisted in the vector store.

    Attributes
    ----------
    id:
        Identifier unique across the whole index.
    values:
        The embedding vector.
    metadata:
        Flat mapping stored next to the vector.  Always carries ``text``,
        ``source`` and ``pageIndex``.
    """

    id: str
    values: list[float]
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_upsert_dict(self) -> dict[str, Any]:
        """Return the ``{id, values, metadata}`` shape vector stores accept."""
        return {"id": self.id, "values": self.values, "metadata": self.metadata}


class QueryMatch(BaseModel):
    """A single hit of a similarity search."""

    id: str
    score: float
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.metadata.get("text") or ""

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.id} {self.score:.3f}] {self.text[:120]}"
