"""
Logging helpers for benchviz.

Library modules only ever call ``get_logger(__name__)``. Scripts that want
to see the plot pipelines' output call ``configure_logging()`` once:

    ```python
    from benchviz.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

At DEBUG level each pipeline dumps its assembled plot description through
``log_plot_description()``, which is the quickest way to see why a chart
looks wrong.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Optional, TextIO, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

LOG_LEVEL_ENV = "BENCHVIZ_LOG_LEVEL"
PACKAGE_LOGGER = "benchviz"


def resolve_level(level: Optional[Union[str, int]]) -> int:
    """Turn a level name, number or None (read BENCHVIZ_LOG_LEVEL) into a logging level.

    Unknown names fall back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    stream: Optional[TextIO] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Handler:
    """
    Attach a stream handler to the ``benchviz`` logger (never root).

    Parameters
    ----------
    level:
        Logging level name or number. Defaults to BENCHVIZ_LOG_LEVEL, else INFO.
    stream:
        Where to write. Defaults to stderr.
    fmt, datefmt:
        Record and timestamp formats.
    force:
        If True, drop existing handlers first. If False, reuse a stream
        handler already writing to the same stream (only its level changes).

    Returns
    -------
    The handler that is now writing the package's records.
    """
    level = resolve_level(level)
    stream = stream or sys.stderr

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is stream:
                h.setLevel(level)
                return h

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(handler)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``logging.getLogger(name)``, or the package logger when name is None."""
    return logging.getLogger(name or PACKAGE_LOGGER)


def log_plot_description(logger: logging.Logger, kind: str, description: Any) -> None:
    """Dump a plot description at DEBUG level.

    Logs a one-line outline (title, canvas, series count) followed by the
    full ``description.to_dict()`` as JSON. Nothing is serialized when
    DEBUG is disabled for logger.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    payload = description.to_dict()
    logger.debug(
        f"{kind} plot {payload['title']!r}: {payload['width']}x{payload['height']}, "
        f"{len(payload['series'])} series -> {payload['output']}"
    )
    logger.debug(json.dumps(payload, default=str))
