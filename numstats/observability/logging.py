"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import os
import sys

# Overridable per deployment, e.g. NUMSTATS_LOG_LEVEL=DEBUG to see conversion failures
LEVEL = logging.getLevelName(os.environ.get("NUMSTATS_LOG_LEVEL", "INFO").upper())

def setup_logging(level: int | str | None = None) -> None:
    """Configure standard Python logging.

    Call **exactly once** at app startup.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return
    level = LEVEL if level is None else level

    # Create a standard formatter with gunicorn-like brackets
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Route uvicorn's own loggers through the root handler
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
