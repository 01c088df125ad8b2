# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for programs that embed argvtree."""
from __future__ import annotations

import logging
import os

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

LOG_MODE_ENV = "ARGVTREE_LOG_MODE"
LOG_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(show_path=False, markup=False)
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter(LOG_FIELDS))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root handlers with a "cli" (Rich) or "json" console handler.

    `mode` falls back on the ARGVTREE_LOG_MODE variable, then on "cli". A file
    handler is added when `log_filename` is given.
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"
    handlers = [_console_handler(mode)]
    handlers[0].setLevel(console_log_level)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, encoding="UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            JsonFormatter(LOG_FIELDS) if json_log_to_file else logging.Formatter(LOG_FIELDS)
        )
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(logging.DEBUG)
    logging.getLogger("argvtree").debug("Logging set up in '%s' mode", mode)
