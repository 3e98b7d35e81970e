from __future__ import annotations

"""
Handler Factories.

Every handler created here is tagged so configure_logging can later
remove exactly the handlers it installed and nothing attached by a host
application or test runner.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from iconjar.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_iconjar_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_console_handler(cfg: LoggingConfig, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(cfg.console_fmt))
    return _tag_handler(handler)


def build_file_handler(cfg: LoggingConfig, level: int) -> Optional[logging.Handler]:
    """
    Open the rotating log file named by the settings.

    Args:
        cfg: Settings holding the path and rotation limits.
        level: Numeric threshold for the handler.

    Returns:
        Optional[logging.Handler]: The handler, or None when the file cannot
        be opened (a warning is written to stderr instead).
    """
    if not cfg.log_file:
        return None
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return _tag_handler(handler)
