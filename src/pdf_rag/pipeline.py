"""End-to-end RAG pipeline: provision → ingest → retrieve → answer.

Clients are built once by :func:`build_services` and passed explicitly
into every stage::

    from pdf_rag.config import settings
    from pdf_rag.pipeline import build_services, run

    answer = run(settings, build_services(settings))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pdf_rag.config import Settings
from pdf_rag.generation.generator import AnswerGenerator
from pdf_rag.generation.llm import get_llm
from pdf_rag.ingestion.chunker import chunk_document
from pdf_rag.ingestion.embedder import EmbeddingClient, get_embedding_function
from pdf_rag.ingestion.loader import load_pdf_directory
from pdf_rag.ingestion.models import IngestionReport
from pdf_rag.ingestion.upserter import build_records, upsert_records
from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.provisioner import provision_index
from pdf_rag.retrieval.query_engine import QueryEngine

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """External collaborators shared by every stage of one run."""

    store: VectorStoreBase
    embedder: EmbeddingClient
    llm: BaseChatModel


def build_vector_store(config: Settings) -> VectorStoreBase:
    """Instantiate the backend selected by ``config.vector_backend``."""
    if config.vector_backend == "pinecone":
        from pdf_rag.retrieval.pinecone_store import PineconeVectorStore

        return PineconeVectorStore.from_api_key(
            config.pinecone_api_key,
            config.index_name,
            cloud=config.index_cloud,
            region=config.index_region,
            wait_until_ready=config.wait_for_index_ready,
        )
    if config.vector_backend == "chroma":
        from pdf_rag.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore.from_host(config.chroma_host, config.chroma_port, config.index_name)
    raise ValueError(f"Unsupported vector_backend={config.vector_backend!r}")


def build_services(config: Settings) -> Services:
    """Construct the vector store, embedding client and chat model."""
    return Services(
        store=build_vector_store(config),
        embedder=EmbeddingClient(get_embedding_function(config), dimension=config.embedding_dimension),
        llm=get_llm(config),
    )


def ingest(services: Services, config: Settings) -> IngestionReport:
    """Load, chunk, embed and upsert every PDF of ``config.documents_dir``.

    Documents are handled one at a time; any failure aborts the run and
    leaves already-written batches in the index.
    """
    documents = load_pdf_directory(config.documents_dir, per_page=config.load_per_page)
    report = IngestionReport(documents=len(documents))

    for document in documents:
        chunks = chunk_document(document, chunk_size=config.chunk_size)
        logger.info("%s: %d chunk(s)", document.metadata.get("source", "?"), len(chunks))
        if not chunks:
            continue

        vectors = services.embedder.embed_documents([c.text for c in chunks])
        records = build_records(chunks, vectors)
        report.chunks += len(chunks)
        report.records += len(records)
        report.batches += upsert_records(services.store, records, batch_size=config.upsert_batch_size)

    logger.info("Ingestion finished: %s", report)
    return report


def answer_question(services: Services, config: Settings, question: str) -> str:
    """Retrieve context for *question* and let the chat model answer it."""
    engine = QueryEngine(services.store, services.embedder, top_k=config.top_k)
    _, context = engine.ask(question)
    return AnswerGenerator(services.llm).generate(context, question)


def run(config: Settings, services: Services | None = None, *, question: str | None = None) -> str:
    """Execute the whole pipeline once and return the answer."""
    services = services or build_services(config)
    provision_index(services.store, dimension=config.embedding_dimension, metric=config.index_metric)
    ingest(services, config)
    return answer_question(services, config, question or config.question)
