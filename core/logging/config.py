"""Structlog configuration: JSON file logs plus a coloured console stream."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from core.logging.processors import (
    add_process_info,
    add_service_context,
    add_user_context,
    console_renderer,
)

DEFAULT_LOG_FILE = "./logs/blog-service.log"
DEFAULT_MAX_BYTES = 50 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 20


def _shared_processors() -> list:
    """Processors applied to both structlog and foreign (stdlib) records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.contextvars.merge_contextvars,
        add_user_context,
    ]


def setup_logging() -> None:
    """Route structlog and stdlib logging through two handlers.

    The rotating file handler writes one JSON object per line with request,
    user, service and process metadata. The console handler prints
    ``[LEVEL] timestamp | request_id | logger | message key=value``.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/blog-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - LOG_MAX_BYTES / LOG_BACKUP_COUNT: rotation size and depth
    - SERVICE_NAME, ENVIRONMENT: service metadata added to file logs
    """
    log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(DEFAULT_MAX_BYTES))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", str(DEFAULT_BACKUP_COUNT))),
        encoding="utf-8",
    )
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                *_shared_processors(),
                add_service_context,
                add_process_info,
            ],
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in (file_handler, console_handler):
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level_name,
    )
