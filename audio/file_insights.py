"""Format notes for an audio file before it is transcribed or analyzed."""

from __future__ import annotations

from pathlib import Path

FORMAT_NOTES = {
    ".wav": "WAV format detected - high quality uncompressed audio",
    ".mp3": "MP3 format detected - compressed audio, may have some quality loss",
}

READINESS_NOTES = (
    "Audio file ready for transcription and pattern analysis",
    "I can detect speech, identify speakers, and find non-verbal sounds",
    "Trigger detection is active for configured sound patterns",
)


def analyze_audio_file(file_path: str | Path) -> list[str]:
    """Return notes based on the file's suffix; the file is not opened."""
    notes: list[str] = []
    suffix = Path(file_path).suffix.lower()
    if suffix in FORMAT_NOTES:
        notes.append(FORMAT_NOTES[suffix])
    notes.extend(READINESS_NOTES)
    return notes
