"""Placeholder transcription backend."""

from __future__ import annotations

from pathlib import Path


class MockTranscriber:
    """Echoes the received path instead of running speech recognition."""

    def transcribe(self, file_path: str | Path) -> str:
        return f"(Mock transcript) Received file: {file_path}"
