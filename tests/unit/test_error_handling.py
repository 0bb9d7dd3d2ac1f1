"""Testes da hierarquia de exceptions."""

from __future__ import annotations

import pytest

from depop.exceptions import (
    AudioError,
    AudioReadError,
    AudioWriteError,
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    DepopError,
    InvalidSampleFormatError,
    UnsupportedFormatError,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            AudioReadError("in.wav", "x"),
            AudioWriteError("out.wav", "x"),
            UnsupportedFormatError("x"),
            InvalidSampleFormatError("x"),
        ],
    )
    def test_audio_errors(self, exc: AudioError) -> None:
        assert isinstance(exc, AudioError)
        assert isinstance(exc, DepopError)

    def test_config_errors(self) -> None:
        assert isinstance(ConfigParseError("a.yaml", "x"), ConfigError)
        assert isinstance(ConfigValidationError("a.yaml", ["x"]), ConfigError)

    def test_read_and_write_are_distinct(self) -> None:
        assert not issubclass(AudioReadError, AudioWriteError)
        assert not issubclass(AudioWriteError, AudioReadError)
        assert not issubclass(UnsupportedFormatError, AudioReadError)


class TestExceptionMessages:
    def test_read_error(self) -> None:
        err = AudioReadError("in.wav", "arquivo nao encontrado")
        assert err.path == "in.wav"
        assert err.reason == "arquivo nao encontrado"
        assert "in.wav" in str(err)

    def test_write_error(self) -> None:
        err = AudioWriteError("out.flac", "disco cheio")
        assert "out.flac" in str(err)
        assert "disco cheio" in str(err)

    def test_validation_error_joins_errors(self) -> None:
        err = ConfigValidationError("depop.yaml", ["a: ruim", "b: pior"])
        assert "a: ruim; b: pior" in str(err)
