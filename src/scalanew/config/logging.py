"""structlog configuration for scalanew.

Everything goes to stderr so stdout stays free for command output
(``--json``, ``--quiet`` and piping a created path into an editor).

- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Symbol lookups log from background worker threads. Their records carry a
``thread`` field so they can be told apart from the command's own output.
"""

from __future__ import annotations

import logging
import sys
import threading

import structlog

# Libraries that log below WARNING on every template render or hook call.
QUIET_LOGGERS = ("jinja2", "pluggy")


def add_worker_thread(
    _logger: object, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Tag events logged off the main thread with the thread's name."""
    current = threading.current_thread()
    if current is not threading.main_thread():
        event_dict.setdefault("thread", current.name)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib loggers through one stderr handler.

    Args:
        verbose: Show DEBUG from ``scalanew.*`` (symbol indexing, plugin
            answers). Otherwise only warnings, such as unreadable jars.
        log_json: Use JSON renderer instead of console renderer.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_worker_thread,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("scalanew").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
