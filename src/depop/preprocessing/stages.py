"""Interface base para stages do pipeline de reparo."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


class AudioStage(ABC):
    """Stage individual do pipeline de reparo de audio.

    Cada stage recebe as amostras de UM canal, na representacao nativa
    (int16, int32, float32...), e retorna o resultado com o sample rate.
    Canais sao processados de forma independente pelo pipeline.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nome identificador do stage (ex: 'declick')."""
        ...

    @abstractmethod
    def process(self, audio: np.ndarray, sample_rate: int) -> tuple[np.ndarray, int]:
        """Processa as amostras de um canal.

        Args:
            audio: Array numpy 1-D com as amostras do canal.
            sample_rate: Sample rate atual do audio em Hz.

        Returns:
            Tupla (audio processado, novo sample rate).
        """
        ...
