"""Structured logging para o Depop.

Usa structlog com stdlib logging como backend. Dois formatos:
- console: legivel para uso interativo (default)
- json: estruturado para execucao em lote
"""

from __future__ import annotations

import logging
import os

import structlog

_configured = False


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
    *,
    force: bool = False,
) -> None:
    """Configura logging estruturado.

    Idempotente — chamadas subsequentes sao ignoradas, exceto com force=True
    (usado pela CLI, que recebe formato e nivel por flag).

    Args:
        log_format: "json" ou "console". Default via DEPOP_LOG_FORMAT env ou "console".
        level: Nivel de log (DEBUG, INFO, WARNING, ERROR). Default via DEPOP_LOG_LEVEL
            env ou "WARNING".
        force: Reconfigura mesmo se ja configurado.
    """
    global _configured
    if _configured and not force:
        return

    resolved_format = log_format or os.environ.get("DEPOP_LOG_FORMAT", "console")
    resolved_level = level or os.environ.get("DEPOP_LOG_LEVEL", "WARNING")

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if resolved_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # stderr: stdout fica livre para o resumo da CLI
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, resolved_level.upper(), logging.WARNING))

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Retorna logger com contexto de componente.

    Args:
        component: Nome do componente (ex: "preprocessing.pipeline", "cli.repair").

    Returns:
        BoundLogger com campo component vinculado.
    """
    configure_logging()
    return structlog.get_logger().bind(component=component)  # type: ignore[no-any-return]
