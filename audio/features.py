"""Summary statistics for raw audio samples."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from core.errors import InvalidInput

RECOMMENDATIONS = (
    "Consider applying noise reduction if background noise is high",
    "Use trigger detection for automated monitoring",
    "Enable continuous recording for security applications",
)


@dataclass(frozen=True)
class AudioFeatures:
    avg_amplitude: float
    peak_amplitude: float
    zero_crossings: int
    sample_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def count_zero_crossings(samples: Sequence[float]) -> int:
    """Count sign changes between neighbouring samples (zero counts as positive)."""
    crossings = 0
    for prev, cur in zip(samples, samples[1:]):
        if (prev >= 0.0) != (cur >= 0.0):
            crossings += 1
    return crossings


def summarize_features(samples: Sequence[float]) -> AudioFeatures:
    """Compute signed mean, peak, zero crossings and length of ``samples``."""
    if len(samples) == 0:
        raise InvalidInput("Cannot summarize an empty sample sequence")
    values = [float(x) for x in samples]
    return AudioFeatures(
        avg_amplitude=sum(values) / len(values),
        peak_amplitude=max(0.0, max(values)),
        zero_crossings=count_zero_crossings(values),
        sample_count=len(values),
    )


def describe_features(
    features: AudioFeatures,
    metadata: dict[str, Any] | None = None,
    analysis: str = "",
    confidence: float = 0.0,
    processing_time_ms: int = 0,
) -> dict[str, Any]:
    """Build the analysis payload shown to the user for one clip."""
    return {
        "analysis": analysis,
        "confidence": confidence,
        "processing_time_ms": processing_time_ms,
        "metadata": dict(metadata or {}),
        "audio_features": features.to_dict(),
        "recommendations": list(RECOMMENDATIONS),
    }


def features_prompt(features: AudioFeatures, metadata: dict[str, Any] | None = None) -> str:
    """Render features as a model prompt."""
    return (
        "Analyze this audio data:\n"
        f"- Average amplitude: {features.avg_amplitude:.3f}\n"
        f"- Peak amplitude: {features.peak_amplitude:.3f}\n"
        f"- Zero crossings: {features.zero_crossings}\n"
        f"- Sample count: {features.sample_count}\n"
        f"- Metadata: {dict(metadata or {})}\n\n"
        "Provide a detailed analysis of what this audio might contain, "
        "potential sounds or speech patterns, and any security-relevant observations."
    )
