"""Embedding client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_openai import OpenAIEmbeddings

from pdf_rag.config import Settings, settings
from pdf_rag.errors import EmbeddingError

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def get_embedding_function(config: Settings = settings) -> OpenAIEmbeddings:
    """Return the configured OpenAI embedding model.

    ``text-embedding-3-*`` models are asked for ``config.embedding_dimension``
    values; older models have a fixed size and reject the parameter.
    """
    kwargs: dict = {"model": config.embedding_model, "api_key": config.openai_api_key}
    if config.embedding_model.startswith("text-embedding-3"):
        kwargs["dimensions"] = config.embedding_dimension
    return OpenAIEmbeddings(**kwargs)


def clean_text(text: str) -> str:
    """Replace newlines with spaces so the model sees one contiguous passage."""
    return text.replace("\n", " ")


class EmbeddingClient:
    """Order-preserving wrapper around a LangChain ``Embeddings`` model.

    Parameters
    ----------
    embeddings:
        Any LangChain embedding model.
    dimension:
        Expected length of every returned vector.
    """

    def __init__(self, embeddings: Embeddings, *, dimension: int) -> None:
        self._embeddings = embeddings
        self.dimension = dimension

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """Clean and embed *texts*; ``result[i]`` belongs to ``texts[i]``."""
        if not texts:
            return []
        vectors = self._embeddings.embed_documents([clean_text(t) for t in texts])
        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"Embedding service returned {len(vectors)} vector(s) for {len(texts)} input(s)"
            )
        for vector in vectors:
            self._check_dimension(vector)
        logger.debug("Embedded %d text(s)", len(texts))
        return vectors

    def embed_query(self, text: str) -> list[float]:
        """Embed a single query string."""
        return self._check_dimension(self._embeddings.embed_query(text))

    def _check_dimension(self, vector: list[float]) -> list[float]:
        if len(vector) != self.dimension:
            raise EmbeddingError(
                f"Expected {self.dimension}-dimensional embedding, got {len(vector)}"
            )
        return vector
