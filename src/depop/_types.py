"""Tipos fundamentais do Depop.

Dataclasses compartilhadas entre o filtro, o pipeline, o I/O de audio e a CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


@dataclass(frozen=True, slots=True)
class SampleBounds:
    """Valores extremos representaveis de uma representacao de amostra.

    Usados como sentinelas no padding das bordas do filtro.
    Ex: int16 -> (-32768, 32767); float normalizado -> (-1.0, 1.0).
    """

    minimum: int | float
    maximum: int | float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            msg = f"minimum ({self.minimum}) maior que maximum ({self.maximum})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class AudioBuffer:
    """Audio multi-canal decodificado, na representacao nativa da fonte.

    `data` tem shape (frames, channels); o dtype reflete a profundidade
    de bits da fonte (int16, int32, float32 ou float64).
    """

    data: np.ndarray
    sample_rate: int
    subtype: str
    format: str

    @property
    def frames(self) -> int:
        return int(self.data.shape[0])

    @property
    def channels(self) -> int:
        return int(self.data.shape[1])

    @property
    def duration(self) -> float:
        """Duracao em segundos."""
        if self.sample_rate <= 0:
            return 0.0
        return self.frames / self.sample_rate

    def channel(self, index: int) -> np.ndarray:
        """Retorna a sequencia de amostras de um canal (view, sem copia)."""
        return self.data[:, index]


@dataclass(frozen=True, slots=True)
class RepairReport:
    """Resumo de uma execucao do pipeline de reparo."""

    frames: int
    channels: int
    sample_rate: int
    repaired_per_channel: tuple[int, ...]

    @property
    def total_repaired(self) -> int:
        return sum(self.repaired_per_channel)
