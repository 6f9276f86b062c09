from __future__ import annotations

import logging
import sys
from typing import IO

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "moostats-console"


def configure_moostats_logging(
    *,
    level: int = logging.INFO,
    stream: IO[str] | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Handler | None:
    """
    Send moostats log records to a console stream.

    Statistics lines may go to stdout, so records default to stderr. The level
    is always applied to the "moostats" logger; a handler is only attached when
    the application has not configured the root logger. Calling this again
    reuses the handler instead of stacking a second one.

    Returns the moostats console handler, or None when the root logger already
    handles records.
    """
    moostats_logger = logging.getLogger("moostats")
    moostats_logger.setLevel(level)

    for handler in moostats_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setFormatter(logging.Formatter(fmt))
            return handler

    if logging.getLogger().handlers:
        return None

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    moostats_logger.addHandler(handler)
    moostats_logger.propagate = False
    return handler


__all__ = ["DEFAULT_FORMAT", "configure_moostats_logging"]
