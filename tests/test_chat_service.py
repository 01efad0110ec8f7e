"""Chat service tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from audio.features import summarize_features
from cognition.response_engine import CONTINUITY_SENTENCE, ResponseEngine
from core.chat_service import ChatService
from llm.base_llm import BaseLLM, LLMReply
from llm.model_registry import ModelRegistry
from memory.history_store import HistoryStore
from memory.stores.sql_store import SQLStore


class RecordingLLM(BaseLLM):
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def generate(self, prompt: str, model: str) -> LLMReply:
        self.calls.append((prompt, model))
        return LLMReply(text="recorded", tokens_used=1, processing_time_ms=0, confidence=0.9)


class BrokenHistory:
    def fetch_recent(self, limit: int) -> list:
        raise RuntimeError("database is locked")

    def append(self, entry: object) -> int:  # pragma: no cover - never reached
        raise AssertionError("append should not be called")


def build_service(tmp_path: Path, **kwargs: object) -> ChatService:
    store = SQLStore(db_path=tmp_path / "dwight.db")
    store.create_all()
    return ChatService(engine=ResponseEngine(), history=HistoryStore(sql_store=store), **kwargs)


def test_chat_persists_turn(tmp_path: Path) -> None:
    service = build_service(tmp_path)

    reply = service.chat("hello")

    assert reply.context_used is False
    stored = service.history.fetch_recent(1)[0]
    assert stored.user_input == "hello"
    assert stored.response == reply.message
    assert stored.context == "User asked: hello"


def test_second_turn_uses_history(tmp_path: Path) -> None:
    service = build_service(tmp_path)

    service.chat("tell me about audio forensics")
    reply = service.chat("hello")

    assert reply.context_used is True
    assert CONTINUITY_SENTENCE in reply.message
    assert service.history.count() == 2


def test_context_limit_bounds_history(tmp_path: Path) -> None:
    service = build_service(tmp_path, context_limit=1)

    service.chat("audio first")
    service.chat("second")
    reply = service.chat("third")

    assert reply.context_used is True
    assert CONTINUITY_SENTENCE not in reply.message


def test_history_errors_propagate() -> None:
    service = ChatService(engine=ResponseEngine(), history=BrokenHistory())  # type: ignore[arg-type]

    with pytest.raises(RuntimeError, match="locked"):
        service.chat("hello")


def test_enhanced_chat_uses_default_model_tag(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm)

    reply = service.enhanced_chat("what was that bang?")

    assert reply.text == "recorded"
    prompt, model = llm.calls[0]
    assert model == "llama3:8b"
    assert prompt.startswith("You are Dwight")
    assert "User input: what was that bang?" in prompt


def test_enhanced_chat_with_documents(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm)

    service.enhanced_chat("door?", context_documents=["Door slammed at 9pm"], use_advanced_model=True)

    prompt, _ = llm.calls[0]
    assert prompt.startswith("Context documents:\nDocument 1: Door slammed at 9pm")
    assert prompt.endswith("Please answer the query based on the provided context.")


def test_documents_ignored_without_advanced_flag(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm)

    service.enhanced_chat("door?", context_documents=["Door slammed"])

    assert "Context documents" not in llm.calls[0][0]


def test_disabled_or_unknown_model_falls_back(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm, registry=ModelRegistry())

    disabled = service.query("ping", "llama3-70b")
    unknown = service.query("ping", "gpt-9")

    assert llm.calls == []
    assert disabled.text.startswith("Fallback response for: ping")
    assert "simulated response from gpt-9" in unknown.text
    assert unknown.confidence == 0.6


def test_analyze_audio_queries_mixtral(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm)

    payload = service.analyze_audio(summarize_features([0.5, -0.5, 0.25]), metadata={"file": "door.wav"})

    prompt, model = llm.calls[0]
    assert model == "mixtral:8x7b"
    assert prompt.startswith("Analyze this audio data:")
    assert "Zero crossings: 1" in prompt
    assert payload["analysis"] == "recorded"
    assert payload["confidence"] == 0.9
    assert payload["processing_time_ms"] == 0
    assert payload["metadata"] == {"file": "door.wav"}


def test_rag_search_uses_default_model(tmp_path: Path) -> None:
    llm = RecordingLLM()
    service = build_service(tmp_path, llm=llm)

    service.rag_search("door?", ["Door slammed at 9pm"])

    prompt, model = llm.calls[0]
    assert model == "llama3:8b"
    assert prompt.startswith("Context documents:\nDocument 1: Door slammed at 9pm")
    assert "Query: door?" in prompt
