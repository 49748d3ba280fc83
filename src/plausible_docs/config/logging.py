"""structlog output for the plausible-docs CLI.

Only the ``plausible_docs`` logger tree gets a handler; the root logger
belongs to whichever documentation generator is running the build. Both
``logging.getLogger(__name__)`` records and structlog events end up in the
same ``ProcessorFormatter``: colored console lines by default, JSON lines
with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "plausible_docs"
HANDLER_NAME = "plausible_docs.cli"


def _event_fields() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def build_formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib records and structlog events alike."""
    if log_json:
        render: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_event_fields(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``plausible_docs`` logs to stderr.

    Args:
        verbose: Show DEBUG records. Otherwise only WARNING and above.
        log_json: One JSON object per line instead of console output.
    """
    structlog.configure(
        processors=[*_event_fields(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(log_json=log_json))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    # Replace our own handler on repeat calls, keep anything the host added.
    package_logger.handlers = [h for h in package_logger.handlers if h.get_name() != HANDLER_NAME]
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
