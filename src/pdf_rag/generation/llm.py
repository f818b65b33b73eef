"""LLM initialisation — single place to swap providers.

Supports two modes:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible endpoint** — set ``LLM_BASE_URL`` (vLLM, a local
   gateway, …).  ``ChatOpenAI`` talks to it unchanged.
"""

from __future__ import annotations

import logging

from langchain_openai import ChatOpenAI

from pdf_rag.config import Settings, settings

logger = logging.getLogger(__name__)


def get_llm(config: Settings = settings) -> ChatOpenAI:
    """Return the configured chat model.

    ``config.llm_temperature`` is left to the provider default unless set.
    """
    kwargs: dict = {"model": config.llm_model_name}
    if config.llm_temperature is not None:
        kwargs["temperature"] = config.llm_temperature

    if config.llm_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", config.llm_base_url)
        kwargs["base_url"] = config.llm_base_url
        # Self-hosted endpoints usually ignore the key; LangChain requires a non-empty value.
        kwargs["api_key"] = config.openai_api_key or "EMPTY"
    else:
        kwargs["api_key"] = config.openai_api_key

    return ChatOpenAI(**kwargs)
