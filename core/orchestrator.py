"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from audio.pattern_detector import AudioPatternDetector
from audio.transcriber import MockTranscriber
from cognition.response_engine import ResponseEngine
from core.chat_service import ChatService
from core.policy_runtime import ensure_runtime_dirs, load_effective_config
from llm.base_llm import BaseLLM
from llm.llm_factory import build_llm
from llm.model_registry import ModelRegistry
from memory.audio_library import AudioLibrary
from memory.history_store import HistoryStore
from memory.stores.sql_store import SQLStore
from vision.image_describer import MockImageDescriber


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    history: HistoryStore
    library: AudioLibrary
    engine: ResponseEngine
    detector: AudioPatternDetector
    chat: ChatService
    llm: BaseLLM
    models: ModelRegistry
    transcriber: MockTranscriber
    describer: MockImageDescriber


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        paths = ensure_runtime_dirs(self.root, config)

        sql_store = SQLStore.from_config(paths["db_path"], config)
        sql_store.create_all()

        history = HistoryStore(sql_store=sql_store)
        library = AudioLibrary(sql_store=sql_store)
        engine = ResponseEngine()
        llm = build_llm(config=config)
        models = ModelRegistry.from_config(config)
        llm_cfg = config.get("models", {}).get("llm", {})
        chat = ChatService(
            engine=engine,
            history=history,
            llm=llm,
            registry=models,
            context_limit=int(config.get("memory", {}).get("context_limit", 10)),
            default_model=str(llm_cfg.get("default_model", "llama3-8b")),
        )

        return RuntimeBundle(
            config=config,
            history=history,
            library=library,
            engine=engine,
            detector=self._detector(config),
            chat=chat,
            llm=llm,
            models=models,
            transcriber=MockTranscriber(),
            describer=MockImageDescriber(),
        )

    @staticmethod
    def _detector(config: dict[str, Any]) -> AudioPatternDetector:
        audio_cfg = config.get("audio", {})
        return AudioPatternDetector(
            loud_threshold=float(audio_cfg.get("loud_threshold", 0.8)),
            quiet_threshold=float(audio_cfg.get("quiet_threshold", 0.1)),
            window_size=int(audio_cfg.get("window_size", 100)),
            peak_threshold=float(audio_cfg.get("peak_threshold", 0.6)),
            run_length=int(audio_cfg.get("run_length", 5)),
        )
