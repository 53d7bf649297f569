"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "configure_logging",
]


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    """Create a logger bound to whatever sys.stderr currently is."""
    return structlog.PrintLogger(file=sys.stderr)


def _renderer(json_logs: bool) -> structlog.types.Processor:
    """Pick the final processor for the chosen output format."""
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(
    *, debug: bool = False, quiet: bool = False, json_logs: bool = False
) -> None:
    """Configure structured logging for termsearch.

    Log records go to stderr so that search output on stdout stays
    machine-readable.

    Args:
        debug: Enable debug level logging.
        quiet: Only report errors. Ignored when debug is set.
        json_logs: Output JSON format (for machine parsing).
    """
    if debug:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(json_logs))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

