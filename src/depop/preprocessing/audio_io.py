"""Funcoes de decodificacao e codificacao de audio.

Converte entre arquivos de audio (WAV, FLAC, AIFF, OGG...) e arrays numpy
(frames, channels) na representacao nativa da fonte. O filtro de declick
trabalha com os valores exatos do arquivo, por isso a leitura nunca
normaliza PCM inteiro para float.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import soundfile as sf

from depop._types import AudioBuffer
from depop.exceptions import AudioReadError, AudioWriteError, UnsupportedFormatError
from depop.logging import get_logger

logger = get_logger("preprocessing.audio_io")

# Subtype libsndfile -> dtype de leitura que preserva a resolucao da fonte.
# libsndfile alinha inteiros a esquerda: PCM_24 lido como int32 ocupa a faixa
# inteira de int32, entao os extremos do dtype sao os sentinelas corretos.
_SUBTYPE_DTYPES: dict[str, str] = {
    "PCM_S8": "int16",
    "PCM_U8": "int16",
    "PCM_16": "int16",
    "ULAW": "int16",
    "ALAW": "int16",
    "PCM_24": "int32",
    "PCM_32": "int32",
    "FLOAT": "float32",
    "DOUBLE": "float64",
}

# Codecs com perdas e demais subtypes sao decodificados como float.
_DEFAULT_DTYPE = "float32"


def dtype_for_subtype(subtype: str) -> str:
    """Retorna o dtype numpy usado para ler um subtype libsndfile."""
    return _SUBTYPE_DTYPES.get(subtype.upper(), _DEFAULT_DTYPE)


def format_for_path(path: str | Path) -> str:
    """Determina o container de saida a partir da extensao do arquivo.

    Raises:
        UnsupportedFormatError: Se a extensao nao corresponde a um container libsndfile.
    """
    suffix = Path(path).suffix.lstrip(".").upper()
    if not suffix:
        raise UnsupportedFormatError(f"arquivo sem extensao: '{path}'")

    # Extensoes com nome diferente do container libsndfile
    aliases = {"AIF": "AIFF", "OGA": "OGG", "OPUS": "OGG"}
    fmt = aliases.get(suffix, suffix)
    if fmt not in sf.available_formats():
        raise UnsupportedFormatError(f"extensao '.{suffix.lower()}' nao suportada")
    return fmt


def read_audio(path: str | Path) -> AudioBuffer:
    """Decodifica um arquivo de audio mantendo a representacao nativa.

    Args:
        path: Caminho do arquivo de entrada.

    Returns:
        AudioBuffer com data 2-D (frames, channels).

    Raises:
        AudioReadError: Se o arquivo nao existe ou nao pode ser lido.
        UnsupportedFormatError: Se libsndfile nao reconhece o formato.
    """
    path = Path(path)
    if not path.is_file():
        raise AudioReadError(str(path), "arquivo nao encontrado")

    try:
        with path.open("rb") as f:
            f.read(1)
    except OSError as e:
        raise AudioReadError(str(path), str(e)) from e

    try:
        info = sf.info(str(path))
    except sf.LibsndfileError as e:
        raise UnsupportedFormatError(f"'{path}': {e}") from e

    dtype = dtype_for_subtype(info.subtype)
    try:
        data, sample_rate = sf.read(str(path), dtype=dtype, always_2d=True)
    except sf.LibsndfileError as e:
        raise AudioReadError(str(path), str(e)) from e

    logger.debug(
        "audio_decoded",
        path=str(path),
        format=info.format,
        subtype=info.subtype,
        dtype=dtype,
        channels=data.shape[1],
        frames=data.shape[0],
        sample_rate=sample_rate,
    )

    return AudioBuffer(
        data=data,
        sample_rate=int(sample_rate),
        subtype=info.subtype,
        format=info.format,
    )


def resolve_subtype(fmt: str, source_subtype: str, subtype: str | None = None) -> str:
    """Escolhe o subtype de saida para um container.

    Ordem: subtype explicito; subtype da fonte se o container aceita;
    subtype default do container.

    Raises:
        UnsupportedFormatError: Se o subtype explicito nao e valido para o container.
    """
    if subtype is not None:
        requested = subtype.upper()
        if not sf.check_format(fmt, requested):
            raise UnsupportedFormatError(f"subtype '{requested}' invalido para container {fmt}")
        return requested

    if source_subtype and sf.check_format(fmt, source_subtype):
        return source_subtype

    default = sf.default_subtype(fmt)
    if default is None:
        raise UnsupportedFormatError(f"container {fmt} sem subtype default")
    return default


def write_audio(buffer: AudioBuffer, path: str | Path, subtype: str | None = None) -> None:
    """Codifica um AudioBuffer no container indicado pela extensao de `path`.

    Args:
        buffer: Audio a gravar; o dtype de data e repassado ao libsndfile.
        path: Caminho do arquivo de saida.
        subtype: Subtype libsndfile (ex: 'PCM_16'). Default: o da fonte.

    Raises:
        UnsupportedFormatError: Se a extensao ou o subtype nao sao suportados.
        AudioWriteError: Se a gravacao falha.
    """
    path = Path(path)
    fmt = format_for_path(path)
    resolved_subtype = resolve_subtype(fmt, buffer.subtype, subtype)

    data = np.ascontiguousarray(buffer.data)
    try:
        sf.write(str(path), data, buffer.sample_rate, subtype=resolved_subtype, format=fmt)
    except (sf.LibsndfileError, OSError) as e:
        raise AudioWriteError(str(path), str(e)) from e

    logger.debug(
        "audio_encoded",
        path=str(path),
        format=fmt,
        subtype=resolved_subtype,
        channels=buffer.channels,
        frames=buffer.frames,
        sample_rate=buffer.sample_rate,
    )
