"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and, when a log file is configured, a file handler.  Request lines and
unexpected server errors are written through this configuration.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install the service's log handlers on the root logger.

    Does nothing when the root logger already has handlers, so the
    application can be built several times in one process (tests).
    Headline changes logged by the store, request lines and server
    error tracebacks all share one timestamped format.

    Parameters
    ----------
    level : str
        Name of the minimum level to emit, e.g. ``"WARNING"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        When set, records are also appended to this file (UTF‑8).
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by pytest or a repeated ``create_app``.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Requests are already logged by the application middleware.
    logging.getLogger("uvicorn.access").setLevel(max(numeric_level, logging.WARNING))
