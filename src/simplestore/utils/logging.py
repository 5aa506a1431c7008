"""Logging configuration for the store.

Structured events go through structlog into the standard library root
logger. The console always receives them on stderr, so reply bodies printed
by ``manage.py fetch`` stay clean on stdout. A rotating ``simplestore.log``
(plus ``simplestore_error.log`` for errors) is added when a log directory
is given or ``LOG_DIR`` is set.
"""

import logging
import logging.handlers
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
_JSON_ENVS = ("production", "staging")
_MAX_LOG_BYTES = 10 * 1024 * 1024


def current_env() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Level from ``LOG_LEVEL``, else derived from the deployment environment."""
    return os.getenv("LOG_LEVEL", _LEVELS_BY_ENV.get(current_env(), "INFO")).upper()


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def build_handlers(level: str, log_dir: Path | None = None) -> list[logging.Handler]:
    """Console handler, plus rotating store and error logs under ``log_dir``."""
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_rotating_handler(log_dir / "simplestore.log", level))
        handlers.append(_rotating_handler(log_dir / "simplestore_error.log", logging.ERROR))
    return handlers


def setup_stdlib_logging(level: str, log_dir: Path | None = None) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = build_handlers(level, log_dir)

    logging.getLogger("protean").setLevel(logging.WARNING)


def setup_structlog(json_output: bool) -> None:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str | Path | None = None) -> None:
    """Configure stdlib handlers and structlog for the store process."""
    if log_dir is None and os.getenv("LOG_DIR"):
        log_dir = os.environ["LOG_DIR"]

    setup_stdlib_logging(get_log_level(), Path(log_dir) if log_dir is not None else None)
    setup_structlog(json_output=current_env() in _JSON_ENVS)


@contextmanager
def log_context(**kwargs: Any):
    """Bind context variables for the duration of a block (one fetch request)."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
