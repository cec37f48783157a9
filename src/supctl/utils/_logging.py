"""Structured logging for supctl.

Loggers are built with ``structlog.wrap_logger`` and never touch global
structlog configuration, so an application embedding supctl keeps control of
its own logging setup. Output is one JSON object or one console-rendered line
per event, written to a file or to stderr.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEBUG_ENV = "SUPCTL_DEBUG"
LEVEL_ENV = "SUPCTL_LOG_LEVEL"


def _parse_level(name: str) -> int:
    # Unknown names fall back to WARNING rather than raising
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.WARNING)


def _level_from_env() -> int:
    """Resolve the level from SUPCTL_DEBUG, then SUPCTL_LOG_LEVEL, then WARNING."""
    if os.environ.get(DEBUG_ENV):
        return logging.DEBUG
    return _parse_level(os.environ.get(LEVEL_ENV, "warning"))


def _open_sink(
    path: Path,
    level: int,
    max_bytes: int | None,
    backup_count: int | None,
) -> logging.Logger:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler: logging.FileHandler
    if max_bytes is None or backup_count is None:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    else:
        handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    # Not registered with logging.getLogger: each sink owns its handler, and
    # structlog does the rendering.
    sink = logging.Logger(f"supctl.{path.resolve()}", level)
    sink.propagate = False
    sink.addHandler(handler)
    return sink


def close_client_logger(logger: "FilteringBoundLogger") -> None:
    """Close the log file behind a logger from ``create_client_logger``.

    Loggers writing to stderr, or wrapping anything other than a file sink,
    are left untouched. Records emitted afterwards are dropped.
    """
    sink = getattr(logger, "_logger", None)
    if not isinstance(sink, logging.Logger):
        return
    for handler in list(sink.handlers):
        sink.removeHandler(handler)
        handler.close()
    sink.disabled = True


def _renderers(log_format: LogFormatType) -> "list[Processor]":
    chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        chain += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=False))
    return chain


def _create_logger(
    log_file_path: str = "",
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> "FilteringBoundLogger":
    """Build a standalone structlog logger.

    Args:
        log_file_path: File to append to; stderr is used when empty.
        log_level: Threshold; read from the environment when None.
        log_format: ``json`` for one object per line, ``text`` for console
            rendering.
        max_bytes: Rotate the file at this size. Only honored together with
            ``backup_count``.
        backup_count: Rotated files to keep.
    """
    level = _level_from_env() if log_level is None else log_level

    sink: logging.Logger | structlog.PrintLogger
    if log_file_path:
        sink = _open_sink(Path(log_file_path), level, max_bytes, backup_count)
    else:
        sink = structlog.PrintLoggerFactory(file=sys.stderr)()

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            sink,
            processors=_renderers(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_client_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "text",
    log_file: str = "",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> "FilteringBoundLogger":
    """Create the logger a SupervisorClient traces its calls with.

    SUPCTL_DEBUG always wins and forces DEBUG. Otherwise ``level`` is used
    when given, then SUPCTL_LOG_LEVEL, then WARNING.

    Args:
        level: Level name (debug, info, warning, error).
        log_format: ``json`` or ``text``.
        log_file: File to append to; stderr is used when empty.
        max_bytes: Rotate the file at this size.
        backup_count: Rotated files to keep.
    """
    threshold: int | None = None
    if os.environ.get(DEBUG_ENV):
        threshold = logging.DEBUG
    elif level is not None:
        threshold = _parse_level(level)

    return _create_logger(
        log_file,
        log_level=threshold,
        log_format=log_format,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
