"""Qualitative audio observations from simple windowed statistics."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from core.errors import InvalidInput

LOUD_OBSERVATION = "High volume detected - possible loud event"
QUIET_OBSERVATION = "Very quiet - possible silence or ambient noise"
REPETITIVE_OBSERVATION = "Repetitive pattern detected - possible machinery or rhythmic sounds"


@dataclass(frozen=True)
class AudioPatternDetector:
    """Thresholds for the loudness check and the peak-run scan."""

    loud_threshold: float = 0.8
    quiet_threshold: float = 0.1
    window_size: int = 100
    peak_threshold: float = 0.6
    run_length: int = 5

    def __post_init__(self) -> None:
        if self.window_size < 1:
            raise InvalidInput(f"window_size must be positive, got {self.window_size}")
        if self.run_length < 0:
            raise InvalidInput(f"run_length must not be negative, got {self.run_length}")

    def detect(self, samples: Sequence[float]) -> list[str]:
        """Return observations for ``samples``; empty input yields none."""
        observations: list[str] = []
        if len(samples) == 0:
            return observations

        avg_amplitude = sum(abs(x) for x in samples) / len(samples)
        if avg_amplitude > self.loud_threshold:
            observations.append(LOUD_OBSERVATION)
        elif avg_amplitude < self.quiet_threshold:
            observations.append(QUIET_OBSERVATION)

        consecutive_peaks = 0
        for window in self._windows(samples):
            if max(abs(x) for x in window) > self.peak_threshold:
                consecutive_peaks += 1
            else:
                consecutive_peaks = 0
            if consecutive_peaks > self.run_length:
                observations.append(REPETITIVE_OBSERVATION)
                break
        return observations

    def _windows(self, samples: Sequence[float]) -> Iterator[Sequence[float]]:
        # Full windows only; a trailing partial window is ignored.
        size = self.window_size
        for start in range(0, len(samples) - size + 1, size):
            yield samples[start : start + size]


DEFAULT_DETECTOR = AudioPatternDetector()


def detect_patterns(samples: Sequence[float]) -> list[str]:
    """Run the default detector over ``samples``."""
    return DEFAULT_DETECTOR.detect(samples)
