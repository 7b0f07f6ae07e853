"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * get_logger - factory returning module-specific loggers.
    * configure_root_logger - installs the shared handler and sets the level.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The CLI
    calls ``configure_root_logger`` once with the configured level, so library
    code never decides where log output goes. Repeated calls only adjust the
    level and never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _HANDLER
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _HANDLER = handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
