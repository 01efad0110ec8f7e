"""Audio feature, file insight and WAV loading tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from scipy.io import wavfile

from audio.features import RECOMMENDATIONS, describe_features, features_prompt, summarize_features
from audio.file_insights import READINESS_NOTES, analyze_audio_file
from audio.loader import load_wav_samples
from audio.transcriber import MockTranscriber
from core.errors import InvalidInput


def test_summarize_features() -> None:
    features = summarize_features([0.5, -0.5, 0.5, 0.0])

    assert features.avg_amplitude == pytest.approx(0.125)
    assert features.peak_amplitude == 0.5
    assert features.zero_crossings == 2
    assert features.sample_count == 4


def test_peak_never_below_zero() -> None:
    assert summarize_features([-0.2, -0.4]).peak_amplitude == 0.0


def test_empty_samples_rejected() -> None:
    with pytest.raises(InvalidInput):
        summarize_features([])


def test_describe_features_payload() -> None:
    features = summarize_features([0.1, -0.1])
    payload = describe_features(features, metadata={"file": "x.wav"})

    assert payload["audio_features"]["zero_crossings"] == 1
    assert payload["recommendations"] == list(RECOMMENDATIONS)
    assert payload["metadata"] == {"file": "x.wav"}
    assert "Zero crossings: 1" in features_prompt(features)


def test_wav_and_mp3_notes() -> None:
    wav_notes = analyze_audio_file("clips/door.WAV")
    mp3_notes = analyze_audio_file(Path("clips/door.mp3"))

    assert wav_notes[0].startswith("WAV format detected")
    assert mp3_notes[0].startswith("MP3 format detected")
    assert wav_notes[1:] == list(READINESS_NOTES)


def test_unknown_format_gets_readiness_notes_only() -> None:
    assert analyze_audio_file("clip.ogg") == list(READINESS_NOTES)


def test_load_int16_wav(tmp_path: Path) -> None:
    path = tmp_path / "tone.wav"
    wavfile.write(path, 8000, np.array([0, 16384, -32768, 0] * 2000, dtype=np.int16))

    audio = load_wav_samples(path)

    assert audio.sample_rate == 8000
    assert audio.duration == pytest.approx(1.0)
    assert audio.samples[:3].tolist() == pytest.approx([0.0, 0.5, -1.0])


def test_load_stereo_wav_mixes_to_mono(tmp_path: Path) -> None:
    path = tmp_path / "stereo.wav"
    data = np.array([[0.5, -0.5], [1.0, 0.0]], dtype=np.float32)
    wavfile.write(path, 16000, data)

    audio = load_wav_samples(path)

    assert audio.samples.ndim == 1
    assert audio.samples.tolist() == pytest.approx([0.0, 0.5])


def test_missing_wav_rejected(tmp_path: Path) -> None:
    with pytest.raises(InvalidInput):
        load_wav_samples(tmp_path / "missing.wav")


def test_garbage_wav_rejected(tmp_path: Path) -> None:
    path = tmp_path / "broken.wav"
    path.write_bytes(b"not a wav file at all")

    with pytest.raises(InvalidInput):
        load_wav_samples(path)


def test_mock_transcriber_echoes_path() -> None:
    assert MockTranscriber().transcribe("a/b.wav") == "(Mock transcript) Received file: a/b.wav"


def test_directory_named_like_wav_rejected(tmp_path: Path) -> None:
    folder = tmp_path / "clip.wav"
    folder.mkdir()

    with pytest.raises(InvalidInput):
        load_wav_samples(folder)
