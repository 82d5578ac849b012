"""Structured logging for forecast runs, built on structlog.

Every pipeline run binds a ``run_id`` into structlog's contextvars, so
events from indicators, feature building and training are grouped per
run without passing a logger around.
"""

import logging
import os
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import numpy as np
import structlog


def _coerce_numpy(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Turn numpy scalars and arrays into plain Python values for rendering."""
    for key, value in event_dict.items():
        if isinstance(value, np.generic):
            event_dict[key] = value.item()
        elif isinstance(value, np.ndarray):
            event_dict[key] = value.tolist()
    return event_dict


def setup_logging(
    log_level: str = "INFO",
    log_format: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: Root level name, e.g. "DEBUG" to see per-epoch progress.
        log_format: "json" or "console". Falls back to the LOG_FORMAT
            environment variable, then "console".
        stream: Destination for rendered lines. Defaults to stderr.
    """
    log_format = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()
    stream = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _coerce_numpy,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

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

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@contextmanager
def run_context(**values: Any) -> Iterator[str]:
    """Bind a fresh ``run_id`` (plus any extra values) for the enclosed block.

    Yields:
        The generated run id.
    """
    run_id = uuid.uuid4().hex[:12]
    with structlog.contextvars.bound_contextvars(run_id=run_id, **values):
        yield run_id


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
