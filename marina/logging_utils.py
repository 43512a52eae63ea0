"""Mini README: Application-wide logging helpers for the marina manager.

Structure:
    * get_logger - factory that returns module loggers with baseline setup.
    * configure_root_logger - installs the shared handler and adjusts level.

Usage:
    Modules import ``get_logger`` to create contextual loggers. The handler is
    installed exactly once; later calls only change the level, so the CLI can
    apply the configured level after modules have already been imported.
    The default level is WARNING because log lines share the terminal with
    the interactive menu.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
