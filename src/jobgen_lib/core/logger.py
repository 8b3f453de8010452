# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger with unified formatting.

    Messages are written to stderr through rich's RichHandler with colored levels.
    Setting the debug environment variable enables debug messages and timestamps.
    Calling the function repeatedly for the same name attaches only one handler.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    if handler := next(
        (h for h in logger.handlers if isinstance(h, RichHandler)), None
    ):
        handler.setLevel(level)
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=debug_mode,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
