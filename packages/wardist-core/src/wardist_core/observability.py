"""Logging and tracing for registry operations.

Resolution, materialization and packaging each run inside a span named
``wardist.<operation>``. Spans go through opentelemetry-api, so they cost
nothing until an SDK is installed; span events are mirrored to structlog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from opentelemetry.trace import Span, Tracer
    from structlog.stdlib import BoundLogger

TRACER_NAME = "wardist"


@lru_cache(maxsize=None)
def get_logger() -> BoundLogger:
    """Return the structlog logger shared by span events."""
    return structlog.get_logger(TRACER_NAME)  # type: ignore[no-any-return]


@lru_cache(maxsize=None)
def get_tracer() -> Tracer:
    return trace.get_tracer(TRACER_NAME)


def configure_logging(
    *,
    log_level: str = "INFO",
    json_format: bool = True,
    add_timestamp: bool = True,
) -> None:
    """Route structlog through the stdlib root logger.

    Args:
        log_level: Root logger level name, e.g. "DEBUG".
        json_format: Render JSON lines; otherwise use the console renderer.
        add_timestamp: Prefix each event with an ISO timestamp.
    """
    processors: list[Any] = []
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=log_level.upper())


@contextmanager
def span(name: str, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
    """Run a block inside a span, logging ``<name>_started/_completed/_failed``.

    Exceptions are recorded on the span and re-raised unchanged.
    """
    attrs = attributes or {}
    logger = get_logger()

    with get_tracer().start_as_current_span(name, attributes=attrs) as current:
        logger.debug(f"{name}_started", **attrs)
        try:
            yield current
        except Exception as exc:
            current.set_status(Status(StatusCode.ERROR, str(exc)))
            current.record_exception(exc)
            logger.error(f"{name}_failed", error=str(exc), **attrs)
            raise
        current.set_status(Status(StatusCode.OK))
        logger.info(f"{name}_completed", **attrs)


@contextmanager
def registry_operation(
    operation: str,
    *,
    channel: str | None = None,
    module: str | None = None,
    destination: str | None = None,
) -> Iterator[Span]:
    """Span ``wardist.<operation>`` tagged with the channel, module and destination given."""
    tags = {"channel": channel, "module": module, "destination": destination}
    attrs: dict[str, Any] = {"wardist.operation": operation}
    attrs.update({f"wardist.{key}": value for key, value in tags.items() if value})

    with span(f"wardist.{operation}", attrs) as current:
        yield current
