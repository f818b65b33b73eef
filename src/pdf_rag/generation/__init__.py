"""
Generation — turn retrieved context into a human-readable answer.

Public API
----------
- :class:`AnswerGenerator` — render the prompt and invoke the chat model.
- :func:`get_llm` — build the configured chat model.
"""

from pdf_rag.generation.generator import AnswerGenerator
from pdf_rag.generation.llm import get_llm

__all__ = ["AnswerGenerator", "get_llm"]
