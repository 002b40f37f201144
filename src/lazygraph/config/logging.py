"""structlog logging for lazygraph.

Library modules get their logger from :func:`get_logger` and emit
dot-named events with key-value fields, e.g.
``logger.debug("min_path.found", cost=3, steps=2)``. Those loggers sit on
top of stdlib ``logging`` and never touch the global structlog
configuration, so nothing is printed until the application opts in.

:func:`configure_logging` is that opt-in. It attaches one handler to the
``lazygraph`` logger with two output modes:
- Human (default): console-formatted output to stderr
- JSON (log_json=True): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

LOGGER_NAME = "lazygraph"

# Applied to stdlib records that did not come through get_logger().
_FOREIGN_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso"),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger writing through ``logging.getLogger(name)``.

    Events below the stdlib logger's effective level are dropped before
    any processing.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route ``lazygraph`` log records to *stream* (default: stderr).

    Replaces any handler a previous call installed, so repeated calls do
    not stack output. The ``lazygraph`` logger stops propagating to the
    root logger; the root logger itself is left alone.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Text stream to write to.
    """
    out = stream if stream is not None else sys.stderr
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_FOREIGN_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    lg = logging.getLogger(LOGGER_NAME)
    lg.handlers.clear()
    lg.addHandler(handler)
    lg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    lg.propagate = False


def configure_from_settings() -> None:
    """Apply the ``verbose`` / ``log_json`` flags of the active settings."""
    from lazygraph.config.settings import get_settings

    settings = get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
