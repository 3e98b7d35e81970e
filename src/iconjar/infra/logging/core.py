from __future__ import annotations

"""
Logging Lifecycle.

configure_logging installs a single QueueHandler on the root logger and
starts a QueueListener that feeds the console and file handlers, so
writers only enqueue records while copying assets. The listener is kept
on the root logger so a later call (or shutdown_logging) can stop it.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from iconjar.infra.logging.config import LoggingConfig
from iconjar.infra.logging.handlers import (
    _is_our_handler,
    _tag_handler,
    build_console_handler,
    build_file_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_iconjar_configured"
_QUEUE_LISTENER_ATTR: str = "_iconjar_queue_listener"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger for an archive build.

    Only the first call takes effect unless 'force' is set. Handlers that
    were not installed here are left in place.

    Args:
        cfg: Logging settings.
        force: Replace a previous configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level = _parse_level(cfg.level)
    root.setLevel(level)

    targets: List[logging.Handler] = []
    if cfg.console:
        targets.append(build_console_handler(cfg, level))
    file_handler = build_file_handler(cfg, level)
    if file_handler is not None:
        targets.append(file_handler)
    if not targets:
        return root

    records: queue.Queue = queue.Queue(-1)
    listener = QueueListener(records, *targets, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(_tag_handler(QueueHandler(records)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain pending records and detach every handler installed by configure_logging."""
    root = logging.getLogger()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in list(root.handlers):
        if _is_our_handler(handler):
            root.removeHandler(handler)
            handler.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------


def _parse_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    name = str(level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() fails on a listener whose thread was already joined
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
