"""Logging for fbx4vrm_reporter.

Package modules log through plain stdlib loggers. Applications embedding the
client call configure_logging() once to render those records with structlog;
a library import never installs handlers on its own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from fbx4vrm_reporter.infrastructure.observability.redaction_service import redaction_processor

PACKAGE_LOGGER = "fbx4vrm_reporter"

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Attach a structlog-rendered handler to the package logger. Later calls are no-ops."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _renderer()
    shared_processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
    ]
    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.PrintLoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *shared_processors, renderer],
        )
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False


def _renderer() -> Any:
    # LOG_FORMAT=json for log shippers, colored console output otherwise
    if os.environ.get("LOG_FORMAT", "").lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


class LoggerFactoryService:
    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        return logging.getLogger(name)
