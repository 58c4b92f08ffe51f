"""structlog configuration for vendorctl.

Everything goes to stderr so stdout stays reserved for command results.

Level policy:
- ``vendorctl.*`` logs at WARNING by default. ``--verbose`` lowers it to
  DEBUG, which shows every synchronized action and every file the
  repository writes or removes.
- ``httpx`` logs one INFO line per request. Those lines show up only with
  ``--verbose``, as the trace of which module files were fetched for
  export inspection. ``httpcore`` connection chatter is always held at
  WARNING.

``--log-json`` swaps the console renderer for JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Logger name -> (level when verbose, level otherwise)
_LOGGER_LEVELS: dict[str, tuple[int, int]] = {
    "vendorctl": (logging.DEBUG, logging.WARNING),
    "httpx": (logging.INFO, logging.WARNING),
    "httpcore": (logging.WARNING, logging.WARNING),
}


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route stdlib and structlog records through one stderr handler."""
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    for name, (verbose_level, quiet_level) in _LOGGER_LEVELS.items():
        logging.getLogger(name).setLevel(verbose_level if verbose else quiet_level)
