"""
Logging setup for the notes API process.
"""

import logging
import sys

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Requests are logged by LoggingMiddleware; uvicorn's access log would repeat them
QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level_name: str = "INFO") -> None:
    """
    Route all records to stdout at ``level_name``.

    Safe to call more than once; later calls only change the level.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if getattr(setup_logging, "_configured", False):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))
    root.handlers[:] = [handler]
    setup_logging._configured = True
