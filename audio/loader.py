"""WAV loading into normalized mono samples."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from scipy.io import wavfile

from core.errors import InvalidInput

logger = logging.getLogger("dwight.audio")


@dataclass(frozen=True)
class LoadedAudio:
    """Mono float samples in [-1, 1] plus their sample rate."""

    samples: np.ndarray
    sample_rate: int

    @property
    def duration(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return len(self.samples) / float(self.sample_rate)


def _to_unit_range(data: np.ndarray) -> np.ndarray:
    if np.issubdtype(data.dtype, np.integer):
        info = np.iinfo(data.dtype)
        if info.min == 0:
            # Unsigned PCM (8-bit WAV) is centred on the midpoint.
            midpoint = (info.max + 1) / 2.0
            return (data.astype(np.float32) - midpoint) / midpoint
        return data.astype(np.float32) / float(-info.min)
    return np.clip(data.astype(np.float32), -1.0, 1.0)


def load_wav_samples(path: Path) -> LoadedAudio:
    """Read a WAV file, mix it down to mono and scale it to [-1, 1]."""
    if not path.exists():
        raise InvalidInput(f"Audio file does not exist: {path}")
    try:
        rate, data = wavfile.read(path)
    except (OSError, ValueError) as exc:
        raise InvalidInput(f"Unreadable WAV file {path}: {exc}") from exc

    samples = _to_unit_range(np.asarray(data))
    if samples.ndim > 1:
        samples = samples.mean(axis=1)
    logger.debug("Loaded %s: %d samples at %d Hz", path.name, len(samples), rate)
    return LoadedAudio(samples=samples.astype(np.float32), sample_rate=int(rate))
