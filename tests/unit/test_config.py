"""Testes da configuracao do pipeline de reparo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from depop.config.declick import DeclickConfig
from depop.exceptions import ConfigParseError, ConfigValidationError

if TYPE_CHECKING:
    from pathlib import Path


class TestDeclickConfig:
    def test_defaults(self) -> None:
        config = DeclickConfig()
        assert config.parallel_channels is False
        assert config.max_workers is None
        assert config.output_subtype is None
        assert config.chunk_frames == 0

    def test_custom_values(self) -> None:
        config = DeclickConfig(parallel_channels=True, max_workers=4, output_subtype=" pcm_24 ")
        assert config.parallel_channels is True
        assert config.max_workers == 4
        assert config.output_subtype == "PCM_24"

    def test_blank_subtype_is_none(self) -> None:
        assert DeclickConfig(output_subtype="  ").output_subtype is None

    def test_max_workers_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            DeclickConfig(max_workers=0)

    def test_chunk_frames_not_negative(self) -> None:
        with pytest.raises(ValidationError):
            DeclickConfig(chunk_frames=-1)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeclickConfig(threshold=3)  # type: ignore[call-arg]


class TestDeclickConfigYaml:
    def test_from_yaml_string(self) -> None:
        raw = "parallel_channels: true\nmax_workers: 2\noutput_subtype: PCM_16\n"
        config = DeclickConfig.from_yaml_string(raw)
        assert config == DeclickConfig(
            parallel_channels=True, max_workers=2, output_subtype="PCM_16"
        )

    def test_hyphenated_keys(self) -> None:
        config = DeclickConfig.from_yaml_string("parallel-channels: true\nchunk-frames: 1024\n")
        assert config.parallel_channels is True
        assert config.chunk_frames == 1024

    def test_empty_yaml_gives_defaults(self) -> None:
        assert DeclickConfig.from_yaml_string("") == DeclickConfig()

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigParseError, match="YAML invalido"):
            DeclickConfig.from_yaml_string("parallel_channels: [true")

    def test_non_mapping_yaml(self) -> None:
        with pytest.raises(ConfigParseError, match="mapeamento"):
            DeclickConfig.from_yaml_string("- a\n- b\n")

    def test_validation_error_lists_fields(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            DeclickConfig.from_yaml_string("max_workers: 0\n", source_path="depop.yaml")
        assert exc_info.value.path == "depop.yaml"
        assert any("max_workers" in e for e in exc_info.value.errors)

    def test_from_yaml_path(self, tmp_path: Path) -> None:
        path = tmp_path / "depop.yaml"
        path.write_text("chunk_frames: 4096\n", encoding="utf-8")
        assert DeclickConfig.from_yaml_path(path).chunk_frames == 4096

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigParseError, match="nao encontrado"):
            DeclickConfig.from_yaml_path(tmp_path / "missing.yaml")
