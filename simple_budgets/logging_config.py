"""Logging setup for the budget planner.

Library modules obtain a logger through :func:`get_logger` and only emit
records. Handlers are attached once, by the command line entry points,
through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import LOG_LEVEL

__all__ = ["get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "simple_budgets"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``simple_budgets``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_simple_budgets", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._simple_budgets = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)
    return root
