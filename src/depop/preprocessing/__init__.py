"""Pipeline de reparo de audio.

Pipeline: Decode -> [Declick por canal] -> Encode, preservando a
representacao nativa da fonte (int16, int32, float32, float64).
"""

from __future__ import annotations

from depop.preprocessing.declick_stage import DeclickStage
from depop.preprocessing.pipeline import RepairPipeline
from depop.preprocessing.stages import AudioStage
from depop.preprocessing.streaming import StreamingDeclicker

__all__ = ["AudioStage", "DeclickStage", "RepairPipeline", "StreamingDeclicker"]
