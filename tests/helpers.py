"""Helpers de geracao de sinais para os testes."""

from __future__ import annotations

import numpy as np

SAMPLE_RATE = 16000

# Posicoes dos pops injetados nos fixtures de audio
POP_POSITIONS = (400, 1203, 2750)


def make_sine(
    frequency: float = 220.0,
    sample_rate: int = SAMPLE_RATE,
    duration: float = 0.25,
    amplitude: float = 0.5,
    phase: float = 0.0,
) -> np.ndarray:
    """Gera senoide float64 normalizada."""
    t = np.arange(int(sample_rate * duration)) / sample_rate
    return amplitude * np.sin(2 * np.pi * frequency * t + phase)


def make_pcm16(signal: np.ndarray) -> np.ndarray:
    """Converte sinal float normalizado para int16."""
    return np.round(signal * 32767).astype(np.int16)


def with_pops(samples: np.ndarray, positions: tuple[int, ...] = POP_POSITIONS) -> np.ndarray:
    """Copia `samples` injetando pops de fundo de escala nas posicoes dadas."""
    corrupted = samples.copy()
    info_max = np.iinfo(samples.dtype).max if samples.dtype.kind in "iu" else 1.0
    for position in positions:
        corrupted[position] = info_max if corrupted[position] < 0 else -info_max
    return corrupted
