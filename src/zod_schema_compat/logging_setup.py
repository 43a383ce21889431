"""Structured logging setup for zod-schema-compat."""

import logging as py_logging

import structlog

from .config import Config


def configure_logging(app_config: Config) -> structlog.stdlib.BoundLogger:
    """Configure stdlib logging and structlog from ``app_config.logging``.

    Library code only ever calls ``structlog.get_logger``; this is meant for
    entry points (the CLI, or an application embedding the converter).
    """
    level = getattr(py_logging, app_config.logging.level.upper(), py_logging.INFO)

    py_logging.basicConfig(
        level=level,
        format="%(message)s",
        force=True
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=True) if app_config.logging.format.lower() == "console"
            else structlog.processors.JSONRenderer(sort_keys=True)
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logger = structlog.get_logger("zod_schema_compat")
    logger.debug("Logging configured.", logging_level=app_config.logging.level, logging_format=app_config.logging.format)
    return logger
