"""Prompt template for answer generation."""

from __future__ import annotations

from langchain_core.prompts import ChatPromptTemplate

ANSWER_TEMPLATE = """\
You are an assistant that summarizes documents.
Context: {context}
Question: {question}
Answer:"""


def build_answer_prompt() -> ChatPromptTemplate:
    """Return the two-slot (``context``, ``question``) answer prompt."""
    return ChatPromptTemplate.from_template(ANSWER_TEMPLATE)
