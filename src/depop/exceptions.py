"""Exceptions tipadas do Depop.

Hierarquia:
    DepopError (base)
    +-- ConfigError
    |   +-- ConfigParseError
    |   +-- ConfigValidationError
    +-- AudioError
        +-- AudioReadError
        +-- AudioWriteError
        +-- UnsupportedFormatError
        +-- InvalidSampleFormatError

O filtro de declick nao levanta excecoes: falhas so existem na camada
de decode/encode e configuracao.
"""

from __future__ import annotations


class DepopError(Exception):
    """Base para todas as exceptions do Depop."""


# --- Configuracao ---


class ConfigError(DepopError):
    """Erro de configuracao."""


class ConfigParseError(ConfigError):
    """Falha ao ler ou parsear arquivo de configuracao YAML."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Falha ao parsear configuracao '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Configuracao com campos invalidos."""

    def __init__(self, path: str, errors: list[str]) -> None:
        self.path = path
        self.errors = errors
        detail = "; ".join(errors)
        super().__init__(f"Configuracao '{path}' invalida: {detail}")


# --- Audio ---


class AudioError(DepopError):
    """Erro relacionado a leitura, escrita ou formato de audio."""


class AudioReadError(AudioError):
    """Arquivo de entrada inexistente ou ilegivel."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Nao foi possivel ler '{path}': {reason}")


class AudioWriteError(AudioError):
    """Falha ao codificar ou gravar o arquivo de saida."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Nao foi possivel gravar '{path}': {reason}")


class UnsupportedFormatError(AudioError):
    """Container ou subtype de audio nao suportado."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Formato de audio nao suportado: {detail}")


class InvalidSampleFormatError(AudioError):
    """Amostras com dtype ou shape incompativel com a operacao."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Formato de amostra invalido: {detail}")
