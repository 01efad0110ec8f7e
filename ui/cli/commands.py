"""Typer command handlers."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import NoReturn

import typer

from audio.features import summarize_features
from audio.file_insights import analyze_audio_file
from audio.loader import load_wav_samples
from core.errors import DwightError
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging


def _runtime(root: Path | None = None) -> RuntimeBundle:
    if root is None and os.getenv("DWIGHT_ROOT"):
        root = Path(os.environ["DWIGHT_ROOT"])
    bundle = Orchestrator(root=root).build()
    configure_logging(bundle.config)
    return bundle


def _fail(exc: DwightError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


def _print_reply(message: str, suggestions: list[str], confidence: float) -> None:
    typer.echo(f"dwight: {message}")
    typer.echo(f"(confidence={confidence:.2f})")
    for suggestion in suggestions:
        typer.echo(f"  * {suggestion}")


def chat() -> None:
    """Run interactive chat loop."""
    bundle = _runtime()
    typer.echo("Chat mode. Type 'exit' to quit.")
    while True:
        user_text = typer.prompt("you")
        if user_text.strip().lower() in {"exit", "quit"}:
            typer.echo("bye")
            break
        reply = bundle.chat.chat(user_text)
        _print_reply(reply.message, reply.suggestions, reply.confidence)


def ask(text: str, as_json: bool) -> None:
    """Answer a single utterance and store it in history."""
    bundle = _runtime()
    reply = bundle.chat.chat(text)
    if as_json:
        typer.echo(json.dumps(reply.to_dict(), indent=2))
        return
    _print_reply(reply.message, reply.suggestions, reply.confidence)


def enhanced(text: str, documents: list[str], advanced: bool) -> None:
    """Ask the configured language model in persona."""
    bundle = _runtime()
    reply = bundle.chat.enhanced_chat(
        text,
        context_documents=documents or None,
        use_advanced_model=advanced,
    )
    typer.echo(json.dumps(reply.to_dict(), indent=2))


def query(text: str, model_key: str) -> None:
    """Send a raw prompt to one registered model."""
    bundle = _runtime()
    reply = bundle.chat.query(text, model_key)
    typer.echo(json.dumps(reply.to_dict(), indent=2))


def rag(text: str, documents: list[str]) -> None:
    """Answer a query from the given context documents."""
    bundle = _runtime()
    reply = bundle.chat.rag_search(text, documents)
    typer.echo(json.dumps(reply.to_dict(), indent=2))



def history(limit: int) -> None:
    """Show recent conversation history."""
    bundle = _runtime()
    try:
        entries = bundle.history.fetch_recent(limit)
    except DwightError as exc:
        _fail(exc)
    payload = [entry.model_dump(mode="json") for entry in entries]
    typer.echo(json.dumps(payload, indent=2))


def detect(path: Path) -> None:
    """Print pattern observations for a WAV file."""
    bundle = _runtime()
    try:
        audio = load_wav_samples(path)
    except DwightError as exc:
        _fail(exc)
    observations = bundle.detector.detect(audio.samples)
    if not observations:
        typer.echo("No notable patterns detected.")
    for observation in observations:
        typer.echo(f"- {observation}")


def features(path: Path) -> None:
    """Print amplitude features and a model's reading of them for a WAV file."""
    bundle = _runtime()
    try:
        audio = load_wav_samples(path)
        summary = summarize_features(audio.samples)
    except DwightError as exc:
        _fail(exc)
    payload = bundle.chat.analyze_audio(
        summary,
        metadata={"file": path.name, "sample_rate": audio.sample_rate, "duration": audio.duration},
    )
    typer.echo(json.dumps(payload, indent=2))



def inspect_file(path: Path) -> None:
    """Print format notes for an audio file."""
    for note in analyze_audio_file(path):
        typer.echo(f"- {note}")


def transcribe(path: Path) -> None:
    """Transcribe an audio file (mock backend)."""
    bundle = _runtime()
    typer.echo(bundle.transcriber.transcribe(path))


def describe_image(path: Path) -> None:
    """Describe an image file (mock backend)."""
    bundle = _runtime()
    try:
        typer.echo(bundle.describer.describe(path))
    except DwightError as exc:
        _fail(exc)


def triggers_add(trigger_type: str, value: str) -> None:
    """Register a sound or speech trigger."""
    bundle = _runtime()
    try:
        trigger_id = bundle.library.save_trigger(trigger_type, value)
    except DwightError as exc:
        _fail(exc)
    typer.echo(f"Added trigger {trigger_id}: {trigger_type} '{value}'")


def triggers_list() -> None:
    """List active triggers."""
    bundle = _runtime()
    triggers = bundle.library.list_active_triggers()
    typer.echo(json.dumps([t.model_dump(mode="json") for t in triggers], indent=2))


def triggers_disable(trigger_id: int) -> None:
    """Deactivate a trigger."""
    bundle = _runtime()
    if not bundle.library.deactivate_trigger(trigger_id):
        typer.echo(f"error: no trigger with id {trigger_id}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Disabled trigger {trigger_id}")


def records_add(title: str, path: Path, duration: float | None, transcript: str | None) -> None:
    """Store an audio record; duration is read from WAV files when omitted."""
    bundle = _runtime()
    try:
        if duration is None:
            duration = load_wav_samples(path).duration if path.suffix.lower() == ".wav" else 0.0
        record_id = bundle.library.save_audio_record(
            title=title,
            file_path=str(path),
            duration=duration,
            transcript=transcript,
        )
    except DwightError as exc:
        _fail(exc)
    typer.echo(f"Added audio record {record_id}: {title}")


def records_list() -> None:
    """List stored audio records."""
    bundle = _runtime()
    records = bundle.library.list_audio_records()
    typer.echo(json.dumps([r.model_dump(mode="json") for r in records], indent=2))


def models_list(show_all: bool) -> None:
    """List configured models."""
    bundle = _runtime()
    models = bundle.models.all_models() if show_all else bundle.models.available_models()
    for model in models:
        status = "enabled" if model.enabled else "disabled"
        line = f"{model.key}: {model.name} ({model.model_type}, {status})"
        if model.api_endpoint:
            line += f" endpoint={model.api_endpoint}"
        if model.local_path:
            line += f" path={model.local_path}"
        typer.echo(line)


def config_show() -> None:
    """Show effective runtime config."""
    bundle = _runtime()
    typer.echo(json.dumps(bundle.config, indent=2, default=str))
