"""CLI do Depop.

Registra todos os comandos no grupo principal.
"""

from depop.cli.main import cli
from depop.cli.repair import repair
from depop.cli.scan import scan

__all__ = [
    "cli",
    "repair",
    "scan",
]
