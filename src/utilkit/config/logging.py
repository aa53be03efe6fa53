"""Route utilkit's log records through structlog to stderr.

The helper modules only log with stdlib ``logging`` at DEBUG, when they turn
a failure into ``None`` (a JSON decode, a URL parse, a date coercion).  The
CLI calls :func:`configure_logging` once; ``-v`` makes those records visible
and ``--log-json`` emits them as JSON lines tagged with the helper module.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_HELPER_PREFIX = "utilkit.core."

# Libraries whose DEBUG chatter never reaches the user, even with -v.
_QUIET_LIBRARIES = ("asyncio", "babel")


def _tag_helper(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Add ``helper="strings"`` to records from ``utilkit.core.strings``."""
    name = event_dict.get("logger", "")
    if isinstance(name, str) and name.startswith(_HELPER_PREFIX):
        event_dict["helper"] = name.removeprefix(_HELPER_PREFIX)
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _tag_helper,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install one stderr handler and set the utilkit log level.

    Args:
        verbose: Show utilkit's DEBUG records. Otherwise WARNING and up.
        log_json: Render JSON lines instead of the console format.
    """
    pre_chain = _pre_chain()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("utilkit").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
