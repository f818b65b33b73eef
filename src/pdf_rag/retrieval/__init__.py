"""
Retrieval — vector-store backends, index provisioning and querying.

Public surface
--------------
- :class:`VectorStoreBase` — abstract backend.
- :class:`PineconeVectorStore` — default Pinecone backend.
- :class:`ChromaVectorStore` — alternative Chroma backend.
- :func:`provision_index` — create the index when missing.
- :class:`QueryEngine` — top-K retrieval and context assembly.
- :class:`IndexRecord`, :class:`QueryMatch` — data models.
"""

from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import IndexRecord, QueryMatch
from pdf_rag.retrieval.provisioner import provision_index
from pdf_rag.retrieval.query_engine import QueryEngine, build_context

__all__ = [
    "ChromaVectorStore",
    "IndexRecord",
    "PineconeVectorStore",
    "QueryEngine",
    "QueryMatch",
    "VectorStoreBase",
    "build_context",
    "provision_index",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import the backends so only the selected SDK is loaded."""
    if name == "PineconeVectorStore":
        from pdf_rag.retrieval.pinecone_store import PineconeVectorStore

        return PineconeVectorStore
    if name == "ChromaVectorStore":
        from pdf_rag.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
