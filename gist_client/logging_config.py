"""Structured logging configuration using structlog.

The client only emits events through ``structlog.get_logger()``; importing it
never touches logging configuration.  Applications call ``configure_logging``
once at startup to route those events through the stdlib root logger, either
as JSON lines or as console output.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, TextIO

import structlog

from gist_client.config import Settings

# Event keys whose values must never reach a log sink.
SENSITIVE_KEYS: frozenset[str] = frozenset({"token", "authorization", "credential"})

REDACTED = "[redacted]"


def redact_credentials(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask credential-bearing keys in an event dict."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(
    *,
    json_logs: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Render events as JSON when *True*, otherwise use the
            structlog console renderer.
        log_level: Root log level name (e.g. ``"INFO"``, ``"DEBUG"``).
        stream: Destination for rendered events.  Defaults to stdout.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_credentials,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


def configure_logging_from_settings(
    settings: Settings | None = None, *, stream: TextIO | None = None
) -> None:
    """Configure logging from ``Settings.log_level`` and ``Settings.json_logs``.

    When *settings* is None they are read from the environment at call time.
    """
    if settings is None:
        settings = Settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level, stream=stream)
