"""Comando `depop repair` — repara pops e grava o audio de saida."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from depop.cli.main import (
    EXIT_CONFIG_ERROR,
    EXIT_READ_ERROR,
    EXIT_UNSUPPORTED_FORMAT,
    EXIT_WRITE_ERROR,
    cli,
    log_format_option,
    log_level_option,
)
from depop.exceptions import (
    AudioReadError,
    AudioWriteError,
    ConfigError,
    UnsupportedFormatError,
)
from depop.logging import configure_logging, get_logger

logger = get_logger("cli.repair")


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(path_type=Path),
    help="Arquivo de audio de entrada.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    required=True,
    type=click.Path(path_type=Path),
    help="Arquivo de saida (container definido pela extensao).",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Arquivo YAML de configuracao.",
)
@click.option("--subtype", default=None, help="Subtype de saida (ex: PCM_16, PCM_24, FLOAT).")
@click.option(
    "--parallel/--no-parallel",
    default=None,
    help="Processa canais em paralelo (default: valor da configuracao).",
)
@log_format_option
@log_level_option
def repair(
    input_path: Path,
    output_path: Path,
    config_path: Path | None,
    subtype: str | None,
    parallel: bool | None,
    log_format: str,
    log_level: str,
) -> None:
    """Remove pops de amostra unica de todos os canais de um arquivo.

    Exemplo: depop repair -i gravacao.flac -o gravacao_limpa.flac
    """
    from depop.config.declick import DeclickConfig
    from depop.preprocessing.pipeline import RepairPipeline

    configure_logging(log_format=log_format, level=log_level, force=True)

    try:
        config = (
            DeclickConfig.from_yaml_path(config_path) if config_path else DeclickConfig()
        )
    except ConfigError as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    overrides: dict[str, object] = {}
    if subtype is not None:
        overrides["output_subtype"] = subtype.upper()
    if parallel is not None:
        overrides["parallel_channels"] = parallel
    if overrides:
        config = config.model_copy(update=overrides)

    pipeline = RepairPipeline(config)
    try:
        report = pipeline.process_file(input_path, output_path)
    except AudioReadError as e:
        logger.error("read_failed", path=str(input_path), reason=e.reason)
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_READ_ERROR)
    except UnsupportedFormatError as e:
        logger.error("unsupported_format", detail=e.detail)
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_UNSUPPORTED_FORMAT)
    except AudioWriteError as e:
        logger.error("write_failed", path=str(output_path), reason=e.reason)
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_WRITE_ERROR)

    for channel, count in enumerate(report.repaired_per_channel):
        click.echo(f"Canal {channel}: {count} amostras reparadas")
    click.echo(
        f"{report.total_repaired} pops removidos em {report.frames} frames "
        f"({report.channels} canais, {report.sample_rate} Hz) -> {output_path}"
    )
