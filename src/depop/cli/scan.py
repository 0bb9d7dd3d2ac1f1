"""Comando `depop scan` — conta pops por canal sem gravar nada."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from depop.cli.main import (
    EXIT_READ_ERROR,
    EXIT_UNSUPPORTED_FORMAT,
    cli,
    log_format_option,
    log_level_option,
)
from depop.exceptions import AudioReadError, UnsupportedFormatError
from depop.logging import configure_logging


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(path_type=Path),
    help="Arquivo de audio a analisar.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Saida em JSON.")
@log_format_option
@log_level_option
def scan(input_path: Path, as_json: bool, log_format: str, log_level: str) -> None:
    """Mostra formato do arquivo e quantos pops seriam removidos por canal.

    Exemplo: depop scan -i gravacao.wav
    """
    import numpy as np

    from depop.preprocessing.audio_io import read_audio
    from depop.preprocessing.declick import detect_pops

    configure_logging(log_format=log_format, level=log_level, force=True)

    try:
        buffer = read_audio(input_path)
    except AudioReadError as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_READ_ERROR)
    except UnsupportedFormatError as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(EXIT_UNSUPPORTED_FORMAT)

    positions = [np.flatnonzero(detect_pops(buffer.channel(i))) for i in range(buffer.channels)]

    if as_json:
        body = {
            "path": str(input_path),
            "format": buffer.format,
            "subtype": buffer.subtype,
            "sample_rate": buffer.sample_rate,
            "channels": buffer.channels,
            "frames": buffer.frames,
            "pops": [len(p) for p in positions],
            "first_positions": [p[:10].tolist() for p in positions],
        }
        click.echo(json.dumps(body, indent=2, ensure_ascii=False))
        return

    click.echo(f"Arquivo:     {input_path}")
    click.echo(f"Formato:     {buffer.format} / {buffer.subtype}")
    click.echo(f"Sample rate: {buffer.sample_rate} Hz")
    click.echo(f"Canais:      {buffer.channels}")
    click.echo(f"Frames:      {buffer.frames} ({buffer.duration:.3f}s)")
    for channel, found in enumerate(positions):
        preview = ", ".join(str(p) for p in found[:10].tolist())
        suffix = f" [{preview}{', ...' if len(found) > 10 else ''}]" if len(found) else ""
        click.echo(f"Canal {channel}:     {len(found)} pops{suffix}")
