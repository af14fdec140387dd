"""Structured logging setup."""
from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping

import structlog

_ROOT_LOGGER = "pysignify"
_DEFAULT_LEVEL = "WARNING"


def configure_logging(level: str | None = None) -> None:
    """Route structlog events for ``pysignify.*`` to stderr as JSON lines.

    Each line carries ``ts``, ``level``, ``component`` (the emitting module)
    and ``msg``. Only the package logger gets a handler; the root logger of an
    embedding application is left alone. Stdout is reserved for key and
    signature material printed by the CLI.
    """

    numeric_level = _resolve_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    package_logger = logging.getLogger(_ROOT_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("msg"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_component(
    logger: logging.Logger, _name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    event_dict.setdefault("component", getattr(logger, "name", None) or _ROOT_LOGGER)
    return event_dict


def _resolve_level(level: str | None) -> int:
    resolved = logging.getLevelName((level or _DEFAULT_LEVEL).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


__all__ = ["configure_logging"]
