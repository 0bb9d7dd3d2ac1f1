"""Configuracao do pipeline de reparo (depop.yaml)."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from depop.exceptions import ConfigParseError, ConfigValidationError


class DeclickConfig(BaseModel, extra="forbid"):
    """Configuracao do pipeline de reparo de pops.

    Canais sao sempre reparados de forma independente; parallel_channels
    apenas distribui os canais num pool de threads.
    """

    parallel_channels: bool = False
    max_workers: int | None = None
    output_subtype: str | None = None
    chunk_frames: int = 0

    @field_validator("max_workers")
    @classmethod
    def max_workers_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            msg = f"max_workers deve ser >= 1, recebido {v}"
            raise ValueError(msg)
        return v

    @field_validator("chunk_frames")
    @classmethod
    def chunk_frames_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            msg = f"chunk_frames deve ser >= 0, recebido {v}"
            raise ValueError(msg)
        return v

    @field_validator("output_subtype")
    @classmethod
    def normalize_subtype(cls, v: str | None) -> str | None:
        if v is None:
            return None
        normalized = v.strip().upper()
        return normalized or None

    @classmethod
    def from_yaml_path(cls, path: str | Path) -> DeclickConfig:
        """Carrega configuracao a partir de arquivo YAML."""
        path = Path(path)
        if not path.exists():
            raise ConfigParseError(str(path), "Arquivo nao encontrado")

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigParseError(str(path), f"Erro ao ler arquivo: {e}") from e

        return cls.from_yaml_string(raw, source_path=str(path))

    @classmethod
    def from_yaml_string(cls, raw: str, source_path: str = "<string>") -> DeclickConfig:
        """Carrega configuracao a partir de string YAML.

        Arquivo vazio resulta na configuracao default.
        """
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigParseError(source_path, f"YAML invalido: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigParseError(source_path, "Conteudo YAML deve ser um mapeamento")

        # Aceita chaves com hifen (parallel-channels)
        data = {str(k).replace("-", "_"): v for k, v in data.items()}

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            raise ConfigValidationError(source_path, errors) from e
