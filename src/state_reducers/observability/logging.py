"""
state_reducers.observability.logging

Loggers for the reducers, plus an opt-in structlog setup for applications.

Responsibilities:
- Hand out named structlog loggers (`get_logger`).
- Let an embedding application route reducer logs through stdlib logging
  with a structlog processor chain derived from `Settings`.

The package never configures logging on import. Until `configure_logging`
is called, reducer warnings follow whatever structlog configuration the
host application has installed.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from state_reducers.settings import Settings, get_settings

PACKAGE_LOGGER = "state_reducers"


def configure_logging(settings: Settings | None = None) -> None:
    """
    Install a structlog chain that forwards to stdlib logging.

    Only the package logger's level is touched; handlers and the root logger
    stay under the application's control.
    """

    settings = settings or get_settings()
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    renderer: Any
    if settings.env == "dev":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(settings.service_name),
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
