"""Typed memory payload models."""

from memory.types.audio import AudioRecord, SoundTrigger
from memory.types.history import HistoryEntry

__all__ = [
    "AudioRecord",
    "HistoryEntry",
    "SoundTrigger",
]
