"""structlog configuration for postctl.

Log lines go to stderr so they never mix with command output on stdout:
colored console lines by default, one JSON object per line with
``--log-json``. Anything logged while a post is being read carries a
``post`` key bound by :func:`post_context`, including records from
worker threads during a parallel ``check``.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager

import structlog

POST_LOGGER = "postctl"


def _post_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: DEBUG for the ``postctl`` loggers (parse and write steps).
        quiet: Only ERROR and above, so skipped posts are not logged.
            ``verbose`` wins when both are set.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(POST_LOGGER).setLevel(_post_level(verbose=verbose, quiet=quiet))


def post_context(path: str) -> AbstractContextManager[None]:
    """Bind ``post=<path>`` to every log record emitted inside the block."""
    return structlog.contextvars.bound_contextvars(post=path)
