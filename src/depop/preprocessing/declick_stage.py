"""DeclickStage — filtro de pops de amostra unica como stage do pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from depop.preprocessing.declick import repair
from depop.preprocessing.stages import AudioStage
from depop.preprocessing.streaming import StreamingDeclicker

if TYPE_CHECKING:
    from depop._types import SampleBounds


class DeclickStage(AudioStage):
    """Substitui pops de amostra unica pelo ponto medio dos vizinhos.

    Args:
        bounds: Extremos da representacao usados como sentinelas nas bordas.
            Se None, derivados do dtype de cada canal.
        chunk_frames: Se > 0, processa o canal em blocos desse tamanho via
            StreamingDeclicker (mesmo resultado, menos memoria intermediaria).
    """

    def __init__(self, bounds: SampleBounds | None = None, chunk_frames: int = 0) -> None:
        self._bounds = bounds
        self._chunk_frames = chunk_frames

    @property
    def name(self) -> str:
        """Nome identificador do stage."""
        return "declick"

    @property
    def bounds(self) -> SampleBounds | None:
        return self._bounds

    @property
    def chunk_frames(self) -> int:
        return self._chunk_frames

    def process(self, audio: np.ndarray, sample_rate: int) -> tuple[np.ndarray, int]:
        """Repara o canal, preservando dtype, comprimento e sample rate."""
        if len(audio) == 0:
            return audio, sample_rate

        if self._chunk_frames <= 0:
            return repair(audio, self._bounds), sample_rate

        declicker = StreamingDeclicker(self._bounds)
        parts = [
            declicker.process_chunk(audio[start : start + self._chunk_frames])
            for start in range(0, len(audio), self._chunk_frames)
        ]
        parts.append(declicker.flush())
        return np.concatenate(parts).astype(audio.dtype, copy=False), sample_rate
