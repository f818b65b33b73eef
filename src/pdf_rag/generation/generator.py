"""Answer generator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_core.output_parsers import StrOutputParser

from pdf_rag.generation.prompts import build_answer_prompt

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


class AnswerGenerator:
    """Fill the answer prompt and return the model's reply verbatim."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._chain = build_answer_prompt() | llm | StrOutputParser()

    def generate(self, context: str, question: str) -> str:
        logger.debug("Generating answer from %d characters of context", len(context))
        return self._chain.invoke({"context": context, "question": question})
