"""Logging configuration with rich integration.

Every module logs through ``logging.getLogger(__name__)``; the records are
rendered by a single RichHandler bound to the shared console below, so
progress lines, summary panels and log records never fight over stdout.

Usage:
    from texture_results.utils.logging import console, setup_logging

    setup_logging(level=logging.DEBUG)

Call setup_logging() once from the CLI entry point, never at import time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


# Shared by RichHandler, progress bars and summary panels.
console = Console()

THIRD_PARTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    debug_third_party: bool = False,
) -> None:
    """Configure the root logger with a RichHandler on the shared console.

    Args:
        level: Logging level for the root logger (default: INFO)
        log_file: Optional path to a log file for persistent logging
        debug_third_party: If True, let httpx/httpcore log at DEBUG level
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    third_party_level = logging.DEBUG if debug_third_party else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)
