"""Testes do DeclickStage e da interface AudioStage."""

from __future__ import annotations

import numpy as np
import pytest

from depop._types import SampleBounds
from depop.preprocessing.declick import repair
from depop.preprocessing.declick_stage import DeclickStage
from depop.preprocessing.stages import AudioStage
from tests.helpers import make_pcm16, make_sine, with_pops


class TestAudioStage:
    def test_cannot_instantiate_abc(self) -> None:
        with pytest.raises(TypeError):
            AudioStage()  # type: ignore[abstract]

    def test_declick_stage_is_audio_stage(self) -> None:
        assert isinstance(DeclickStage(), AudioStage)


class TestDeclickStage:
    def test_name_property(self) -> None:
        assert DeclickStage().name == "declick"

    def test_process_repairs_pops(self) -> None:
        # Arrange
        stage = DeclickStage()
        clean = make_pcm16(make_sine())
        corrupted = with_pops(clean)

        # Act
        result, sr = stage.process(corrupted, 16000)

        # Assert
        np.testing.assert_array_equal(result, repair(corrupted))
        assert sr == 16000
        assert result.dtype == np.int16

    def test_preserves_sample_rate(self) -> None:
        _, sr = DeclickStage().process(np.zeros(10, dtype=np.int16), 44100)
        assert sr == 44100

    def test_empty_audio(self) -> None:
        empty = np.array([], dtype=np.float32)
        result, sr = DeclickStage().process(empty, 16000)
        assert len(result) == 0
        assert sr == 16000

    def test_custom_bounds_are_used(self) -> None:
        bounds = SampleBounds(minimum=0, maximum=0)
        stage = DeclickStage(bounds=bounds)
        result, _ = stage.process(np.array([5000, 0, 0, 0], dtype=np.int16), 16000)
        assert result[0] == 0
        assert stage.bounds is bounds

    @pytest.mark.parametrize("chunk_frames", [1, 3, 256, 100_000])
    def test_chunked_processing_matches_batch(self, chunk_frames: int) -> None:
        corrupted = with_pops(make_pcm16(make_sine()))
        result, _ = DeclickStage(chunk_frames=chunk_frames).process(corrupted, 16000)
        np.testing.assert_array_equal(result, repair(corrupted))
        assert result.dtype == np.int16
