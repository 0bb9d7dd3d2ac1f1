"""Streaming Declicker — reparo bloco a bloco de um canal.

Diferenca do `repair` (batch):
- Batch: recebe o canal inteiro e retorna o canal reparado.
- Streaming: recebe blocos de tamanho arbitrario e guarda as ultimas 4
  amostras como contexto. A saida atrasa 2 amostras em relacao a entrada,
  e `flush()` emite o restante usando os sentinelas do fim.

A concatenacao de todas as saidas e identica a `repair` da concatenacao
das entradas, qualquer que seja a divisao em blocos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from depop.exceptions import InvalidSampleFormatError
from depop.logging import get_logger
from depop.preprocessing.declick import (
    CONTEXT,
    WINDOW_SIZE,
    bounds_for_dtype,
    repair_padded,
    sentinels,
    to_working,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from depop._types import SampleBounds

logger = get_logger("preprocessing.streaming")


class StreamingDeclicker:
    """Adapter de declick para processamento bloco a bloco de um canal.

    Args:
        bounds: Extremos da representacao. Se None, derivados do dtype do
            primeiro bloco recebido.
    """

    def __init__(self, bounds: SampleBounds | None = None) -> None:
        self._configured_bounds = bounds
        self._bounds: SampleBounds | None = bounds
        self._dtype: np.dtype | None = None
        self._history: np.ndarray | None = None
        self._samples_in = 0
        self._samples_out = 0

    @property
    def samples_in(self) -> int:
        """Total de amostras recebidas desde o ultimo reset."""
        return self._samples_in

    @property
    def samples_out(self) -> int:
        """Total de amostras emitidas desde o ultimo reset."""
        return self._samples_out

    @property
    def pending(self) -> int:
        """Amostras recebidas que ainda aguardam contexto a direita."""
        return self._samples_in - self._samples_out

    def reset(self) -> None:
        """Descarta contexto e volta ao estado inicial."""
        self._bounds = self._configured_bounds
        self._dtype = None
        self._history = None
        self._samples_in = 0
        self._samples_out = 0

    def process_chunk(self, chunk: ArrayLike) -> np.ndarray:
        """Processa um bloco e retorna as amostras que ja tem contexto completo.

        Args:
            chunk: Amostras 1-D do canal. Todos os blocos devem ter o mesmo dtype.

        Returns:
            Amostras reparadas (possivelmente vazio), no dtype de entrada.

        Raises:
            InvalidSampleFormatError: Se o bloco nao e 1-D ou muda de dtype.
        """
        block = np.asarray(chunk)
        if block.ndim != 1:
            raise InvalidSampleFormatError(f"esperado bloco 1-D, recebido shape {block.shape}")

        self._start(block.dtype)
        self._samples_in += len(block)
        return self._emit(to_working(block))

    def flush(self) -> np.ndarray:
        """Emite as amostras pendentes usando os sentinelas do fim do stream.

        Depois do flush o declicker volta ao estado inicial.
        """
        if self._history is None or self._bounds is None or self._dtype is None:
            return np.zeros(0)

        tail = self._emit(sentinels(self._bounds, self._history.dtype))
        logger.debug(
            "stream_flushed",
            samples_in=self._samples_in,
            samples_out=self._samples_out,
        )
        self.reset()
        return tail

    def _start(self, dtype: np.dtype) -> None:
        if self._dtype is None:
            self._dtype = dtype
            if self._bounds is None:
                self._bounds = bounds_for_dtype(dtype)
            self._history = sentinels(self._bounds, to_working(np.zeros(0, dtype=dtype)).dtype)
        elif dtype != self._dtype:
            raise InvalidSampleFormatError(
                f"dtype mudou durante o stream: {self._dtype} -> {dtype}"
            )

    def _emit(self, work: np.ndarray) -> np.ndarray:
        assert self._history is not None
        assert self._dtype is not None
        buffer = np.concatenate([self._history, work])

        if len(buffer) < WINDOW_SIZE:
            self._history = buffer
            return np.zeros(0, dtype=self._dtype)

        out = repair_padded(buffer, self._dtype)
        self._history = buffer[-2 * CONTEXT :]
        self._samples_out += len(out)
        return out
