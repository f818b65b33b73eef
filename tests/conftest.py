"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Callable

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from pdf_rag.config import Settings
from pdf_rag.ingestion.embedder import EmbeddingClient
from pdf_rag.pipeline import Services
from pdf_rag.retrieval.base import VectorStoreBase
from pdf_rag.retrieval.models import IndexRecord, QueryMatch

DIMENSION = 1536


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Fake vector store ───────────────────────────────────────────────────


def _cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class InMemoryVectorStore(VectorStoreBase):
    """Cosine-similarity store that records every call it receives."""

    def __init__(self, index_name: str = "test-index", existing: list[str] | None = None) -> None:
        super().__init__(index_name)
        self.indexes: dict[str, dict[str, Any]] = {name: {} for name in existing or []}
        self.records: dict[str, IndexRecord] = {}
        self.upsert_calls: list[list[IndexRecord]] = []
        self.query_calls: list[dict[str, Any]] = []

    def list_indexes(self) -> list[str]:
        return list(self.indexes)

    def create_index(self, *, dimension: int, metric: str) -> None:
        self.indexes[self.index_name] = {"dimension": dimension, "metric": metric}

    def upsert(self, records: list[IndexRecord]) -> None:
        self.upsert_calls.append(list(records))
        for record in records:
            self.records[record.id] = record

    def query(
        self,
        vector: list[float],
        *,
        top_k: int,
        include_metadata: bool = True,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        self.query_calls.append(
            {"top_k": top_k, "include_metadata": include_metadata, "include_values": include_values}
        )
        scored = [
            QueryMatch(
                id=r.id,
                score=_cosine(vector, r.values),
                metadata=dict(r.metadata) if include_metadata else {},
            )
            for r in self.records.values()
        ]
        scored.sort(key=lambda m: m.score, reverse=True)
        return scored[:top_k]


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture()
def fake_embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=DIMENSION)


@pytest.fixture()
def embedder(fake_embeddings: DeterministicFakeEmbedding) -> EmbeddingClient:
    return EmbeddingClient(fake_embeddings, dimension=DIMENSION)


@pytest.fixture()
def fake_llm() -> FakeListChatModel:
    return FakeListChatModel(responses=["The puppy travelled to Paris and Rome."])


@pytest.fixture()
def services(store: InMemoryVectorStore, embedder: EmbeddingClient, fake_llm: FakeListChatModel) -> Services:
    return Services(store=store, embedder=embedder, llm=fake_llm)


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """Build ``Settings`` isolated from any ``.env`` file."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "documents_dir": str(tmp_path),
            "index_name": "test-index",
            "openai_api_key": "sk-test",
            "pinecone_api_key": "pc-test",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


# ── PDF fixture writer ──────────────────────────────────────────────────


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(pages: list[str]) -> bytes:
    """Return a minimal, valid PDF with one line of Helvetica text per page."""
    n = len(pages)
    font_num = 3 + 2 * n
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            "<< /Type /Pages /Kids ["
            + " ".join(f"{3 + 2 * i} 0 R" for i in range(n))
            + f"] /Count {n} >>"
        ).encode(),
    ]
    for i, text in enumerate(pages):
        content_num = 4 + 2 * i
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 {font_num} 0 R >> >> /Contents {content_num} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({_pdf_escape(text)}) Tj ET".encode("latin-1")
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


@pytest.fixture()
def write_pdf() -> Callable[[Path, list[str]], Path]:
    def _write(path: Path, pages: list[str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(make_pdf(pages))
        return path

    return _write
