"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pipeline settings, populated from env vars or .env file."""

    # LLM / embeddings
    openai_api_key: str = Field(default="", description="OpenAI API key")
    llm_model_name: str = Field(default="gpt-4o-mini", description="Chat model identifier")
    llm_temperature: float | None = Field(default=None, description="Sampling temperature; provider default when unset")
    llm_base_url: str = Field(
        default="",
        description="Base URL of an OpenAI-compatible endpoint. Leave empty to use OpenAI cloud.",
    )
    embedding_model: str = "text-embedding-ada-002"
    embedding_dimension: int = 1536

    # Vector store
    vector_backend: Literal["pinecone", "chroma"] = "pinecone"
    pinecone_api_key: str = ""
    index_name: str = "mypineconeindex"
    index_metric: str = "cosine"
    index_cloud: str = "aws"
    index_region: str = "us-east-1"
    wait_for_index_ready: bool = Field(
        default=True,
        description="Block on index creation until the store reports it ready.",
    )
    chroma_host: str = "localhost"
    chroma_port: int = 8000

    # Ingestion
    documents_dir: str = "./documents"
    load_per_page: bool = False
    # Must exceed the splitter's default 200-character overlap.
    chunk_size: int = Field(default=1000, gt=200)
    upsert_batch_size: int = Field(default=200, gt=0)

    # Query
    top_k: int = Field(default=10, gt=0)
    question: str = "Where all did the puppy travel to?"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# Singleton — import `settings` wherever needed.
settings = Settings()
