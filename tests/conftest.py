"""Fixtures compartilhadas para todos os testes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest
import soundfile as sf

from tests.helpers import POP_POSITIONS, SAMPLE_RATE, make_pcm16, make_sine, with_pops

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def clean_stereo_pcm16() -> np.ndarray:
    """Audio stereo int16 sem pops (frames, 2)."""
    left = make_pcm16(make_sine(frequency=220.0))
    right = make_pcm16(make_sine(frequency=330.0, amplitude=0.3, phase=1.0))
    return np.stack([left, right], axis=1)


@pytest.fixture
def popped_wav(tmp_path: Path, clean_stereo_pcm16: np.ndarray) -> Path:
    """WAV PCM 16-bit stereo com pops so no canal 0."""
    data = clean_stereo_pcm16.copy()
    data[:, 0] = with_pops(data[:, 0])
    path = tmp_path / "popped.wav"
    sf.write(str(path), data, SAMPLE_RATE, subtype="PCM_16")
    return path


@pytest.fixture
def popped_flac_24bit(tmp_path: Path) -> Path:
    """FLAC 24-bit mono com pops."""
    signal = make_sine(frequency=440.0, amplitude=0.4)
    signal[list(POP_POSITIONS)] = -0.99
    path = tmp_path / "popped.flac"
    sf.write(str(path), signal, SAMPLE_RATE, subtype="PCM_24")
    return path
