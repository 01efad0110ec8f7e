"""Configuration loading and runtime directory bootstrapping."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {"db_path": "workspace/dwight.db"},
    "database": {"echo": False, "timeout_s": 5.0},
    "memory": {"context_limit": 10},
    "audio": {
        "loud_threshold": 0.8,
        "quiet_threshold": 0.1,
        "window_size": 100,
        "peak_threshold": 0.6,
        "run_length": 5,
    },
    "logging": {"level": "WARNING"},
    "models": {"llm": {"active_provider": "mock", "default_model": "llama3-8b"}},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def ensure_runtime_dirs(root: Path, config: dict[str, Any]) -> dict[str, Path]:
    """Ensure the database directory exists and return resolved paths."""
    paths_cfg = config.get("paths", {})
    db_path = (root / paths_cfg.get("db_path", "workspace/dwight.db")).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return {"db_path": db_path}


def load_effective_config(root: Path) -> dict[str, Any]:
    """Merge built-in defaults with config/default.yaml and config/models.yaml."""
    config_dir = root / "config"
    default_cfg = load_yaml(config_dir / "default.yaml")
    models_cfg = load_yaml(config_dir / "models.yaml")

    merged = merge_dicts(DEFAULT_CONFIG, default_cfg)
    return merge_dicts(merged, {"models": models_cfg})


def configure_logging(config: dict[str, Any]) -> None:
    """Apply the configured log level to the ``dwight`` logger tree."""
    level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("dwight").setLevel(level)
