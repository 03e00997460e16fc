"""Structured logging configuration using structlog on top of stdlib logging."""

import logging

import structlog

from token_math.config import get_settings


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog with JSON or console rendering.

    token-math is a library and never calls this itself; applications that
    want its debug events rendered call it once at startup.

    Args:
        log_level: Root log level. Defaults to ``TokenMathSettings.log_level``.
        log_format: ``"json"`` for machine-readable output or ``"console"``
            for development. Defaults to ``TokenMathSettings.log_format``.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
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

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
