"""fish-i18n structured logging module.

structlog renders through the stdlib root logger, which writes to stderr so
that stdout only ever carries the command's output. Under pytest the root
level sits above CRITICAL and nothing is emitted.
"""

import inspect
import logging
import sys
from typing import Any, List

import structlog
from structlog.stdlib import BoundLogger

from .config import settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _log_level() -> int:
    """Root level: silent under pytest, else LOG_LEVEL (default WARNING)."""
    if _is_test_environment():
        return SILENT
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)


def _processors() -> List[Any]:
    """Processor chain ending in the JSON or console renderer."""
    if settings.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]


def configure_logging() -> BoundLogger:
    """Configure structured logging for the command."""
    level = _log_level()

    structlog.configure(
        processors=_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's name."""
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
