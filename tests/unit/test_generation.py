"""Unit tests for answer generation."""

from __future__ import annotations

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from pdf_rag.config import Settings
from pdf_rag.generation.generator import AnswerGenerator
from pdf_rag.generation.llm import get_llm
from pdf_rag.generation.prompts import ANSWER_TEMPLATE, build_answer_prompt


def test_prompt_renders_both_slots() -> None:
    messages = build_answer_prompt().format_messages(context="ctx text", question="Where?")
    assert len(messages) == 1
    assert messages[0].content == (
        "You are an assistant that summarizes documents.\n"
        "Context: ctx text\n"
        "Question: Where?\n"
        "Answer:"
    )


def test_template_slots() -> None:
    assert set(build_answer_prompt().input_variables) == {"context", "question"}
    assert ANSWER_TEMPLATE.endswith("Answer:")


def test_generator_returns_model_text_verbatim() -> None:
    llm = FakeListChatModel(responses=["  Paris, then Rome.\n"])
    assert AnswerGenerator(llm).generate("ctx", "Where?") == "  Paris, then Rome.\n"


def test_generator_sends_rendered_prompt() -> None:
    seen = []

    def _model(prompt_value):
        seen.append(prompt_value.to_messages())
        return AIMessage(content="ok")

    answer = AnswerGenerator(RunnableLambda(_model)).generate("puppy went to Paris", "Where?")

    assert answer == "ok"
    [messages] = seen
    assert "Context: puppy went to Paris\nQuestion: Where?" in messages[0].content


class TestGetLlm:
    def test_openai_cloud(self) -> None:
        llm = get_llm(Settings(_env_file=None, openai_api_key="sk-test", llm_model_name="gpt-4o-mini"))
        assert llm.model_name == "gpt-4o-mini"
        assert not llm.openai_api_base

    def test_compatible_endpoint(self) -> None:
        config = Settings(
            _env_file=None,
            openai_api_key="sk-test",
            llm_base_url="http://localhost:8000/v1",
            llm_temperature=0.0,
        )
        llm = get_llm(config)
        assert llm.openai_api_base == "http://localhost:8000/v1"
        assert llm.temperature == 0.0
