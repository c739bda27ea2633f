"""Logging setup shared by the CLI and the HTTP server.

structlog and stdlib records end up in one stderr handler, rendered
either for a terminal or as JSON lines (``--log-json``). folioctl's own
loggers drop to DEBUG with ``--verbose``; library loggers stay at WARNING
unless listed in ``_VERBOSE_LIBRARIES``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import Processor

# Shown at INFO under --verbose: werkzeug's per-request access lines.
_VERBOSE_LIBRARIES = ("werkzeug",)
_QUIET_LIBRARIES = ("httpx", "httpcore", "flask_cors")


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(renderer: Processor) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to stderr.

    Args:
        verbose: DEBUG for ``folioctl.*`` (otherwise WARNING).
        log_json: JSON lines instead of the console renderer.
    """
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(renderer)]
    root.setLevel(logging.WARNING)

    logging.getLogger("folioctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _VERBOSE_LIBRARIES:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Attach *values* to every record logged inside the block.

    Used per HTTP request so contact logs carry ``request_id`` and
    ``remote_addr``. Nested blocks restore the outer values on exit.
    """
    tokens = structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)
