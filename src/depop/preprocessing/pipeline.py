"""Pipeline de reparo de audio.

Aplica os stages a cada canal de forma independente e remonta os canais
na ordem original. Nenhum canal influencia a decisao de outro.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

import numpy as np

from depop._types import AudioBuffer, RepairReport
from depop.config.declick import DeclickConfig
from depop.logging import get_logger
from depop.preprocessing.audio_io import read_audio, write_audio
from depop.preprocessing.declick_stage import DeclickStage

if TYPE_CHECKING:
    from pathlib import Path

    from depop.preprocessing.stages import AudioStage

logger = get_logger("preprocessing.pipeline")


class RepairPipeline:
    """Pipeline de reparo de pops por canal.

    Args:
        config: Configuracao do pipeline. Se None, usa DeclickConfig().
        stages: Stages a executar em cada canal. Se None, usa apenas
                DeclickStage configurado a partir de `config`.
    """

    def __init__(
        self,
        config: DeclickConfig | None = None,
        stages: list[AudioStage] | None = None,
    ) -> None:
        self._config = config if config is not None else DeclickConfig()
        if stages is None:
            stages = [DeclickStage(chunk_frames=self._config.chunk_frames)]
        self._stages = stages

    @property
    def config(self) -> DeclickConfig:
        """Configuracao do pipeline."""
        return self._config

    @property
    def stages(self) -> list[AudioStage]:
        """Lista de stages do pipeline."""
        return list(self._stages)

    def process_channel(self, audio: np.ndarray, sample_rate: int) -> np.ndarray:
        """Aplica todos os stages a um unico canal."""
        for stage in self._stages:
            logger.debug("stage_start", stage=stage.name, samples=len(audio))
            audio, sample_rate = stage.process(audio, sample_rate)
            logger.debug("stage_complete", stage=stage.name, samples=len(audio))
        return audio

    def process_buffer(self, buffer: AudioBuffer) -> tuple[AudioBuffer, RepairReport]:
        """Repara todos os canais de um buffer.

        Args:
            buffer: Audio decodificado (frames, channels).

        Returns:
            Tupla (buffer reparado, relatorio com amostras substituidas por canal).
        """
        sources = [buffer.channel(i) for i in range(buffer.channels)]

        def run(index: int) -> np.ndarray:
            return self.process_channel(sources[index], buffer.sample_rate)

        indexes = range(buffer.channels)
        if self._config.parallel_channels and buffer.channels > 1:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
                repaired = list(executor.map(run, indexes))
        else:
            repaired = [run(i) for i in indexes]

        counts: list[int] = []
        for index, (source, result) in enumerate(zip(sources, repaired, strict=True)):
            count = int(np.count_nonzero(source != result))
            counts.append(count)
            logger.info("channel_repaired", channel=index, repaired=count, frames=len(source))

        if repaired:
            data = np.stack(repaired, axis=1).astype(buffer.data.dtype, copy=False)
        else:
            data = buffer.data.copy()

        output = AudioBuffer(
            data=data,
            sample_rate=buffer.sample_rate,
            subtype=buffer.subtype,
            format=buffer.format,
        )
        report = RepairReport(
            frames=buffer.frames,
            channels=buffer.channels,
            sample_rate=buffer.sample_rate,
            repaired_per_channel=tuple(counts),
        )
        return output, report

    def process_file(self, input_path: str | Path, output_path: str | Path) -> RepairReport:
        """Decodifica, repara e codifica um arquivo de audio.

        Raises:
            AudioReadError: Se a entrada nao pode ser lida.
            UnsupportedFormatError: Se o formato de entrada ou saida nao e suportado.
            AudioWriteError: Se a saida nao pode ser gravada.
        """
        buffer = read_audio(input_path)
        repaired, report = self.process_buffer(buffer)
        write_audio(repaired, output_path, subtype=self._config.output_subtype)

        logger.info(
            "file_repaired",
            input=str(input_path),
            output=str(output_path),
            channels=report.channels,
            frames=report.frames,
            repaired=report.total_repaired,
        )
        return report
