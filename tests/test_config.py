"""Configuration loading and orchestration tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.orchestrator import Orchestrator
from core.policy_runtime import configure_logging, load_effective_config, merge_dicts


def test_defaults_when_config_missing(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config["memory"]["context_limit"] == 10
    assert config["audio"]["window_size"] == 100
    assert config["models"]["llm"]["active_provider"] == "mock"


def test_yaml_overrides_merge(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text("audio:\n  peak_threshold: 0.5\n", encoding="utf-8")
    (config_dir / "models.yaml").write_text("llm:\n  default_model: mistral-7b\n", encoding="utf-8")

    config = load_effective_config(tmp_path)

    assert config["audio"]["peak_threshold"] == 0.5
    assert config["audio"]["loud_threshold"] == 0.8
    assert config["models"]["llm"]["default_model"] == "mistral-7b"
    assert config["models"]["llm"]["active_provider"] == "mock"


def test_non_mapping_yaml_rejected(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_effective_config(tmp_path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 1}, {"a": {"c": 3}})

    assert merged == {"a": {"b": 1, "c": 3}, "d": 1}


def test_configure_logging_sets_level() -> None:
    configure_logging({"logging": {"level": "debug"}})
    assert logging.getLogger("dwight").level == logging.DEBUG

    with pytest.raises(ValueError):
        configure_logging({"logging": {"level": "chatty"}})
    configure_logging({"logging": {"level": "WARNING"}})


def test_orchestrator_wires_runtime(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "database:\n  echo: true\nmemory:\n  context_limit: 3\naudio:\n  window_size: 50\n", encoding="utf-8"
    )

    bundle = Orchestrator(root=tmp_path).build()

    assert (tmp_path / "workspace" / "dwight.db").exists()
    assert bundle.chat.context_limit == 3
    assert bundle.detector.window_size == 50
    assert bundle.history.sql_store.engine.echo is True
    assert bundle.chat.chat("hello").context_used is False
    assert bundle.history.count() == 1
