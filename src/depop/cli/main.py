"""Grupo principal de comandos CLI do Depop."""

from __future__ import annotations

import click

import depop

# Exit codes por tipo de falha
EXIT_CONFIG_ERROR = 1
EXIT_READ_ERROR = 2
EXIT_UNSUPPORTED_FORMAT = 3
EXIT_WRITE_ERROR = 4

log_format_option = click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    show_default=True,
    help="Formato de log.",
)

log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    show_default=True,
    help="Nivel de log.",
)


@click.group()
@click.version_option(version=depop.__version__, prog_name="depop")
def cli() -> None:
    """Depop — remove pops de amostra unica de arquivos de audio."""
