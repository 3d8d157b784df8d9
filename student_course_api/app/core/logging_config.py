"""
Logging configuration for the Student Course API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  Tests build many
applications, so repeated calls are no-ops unless ``force`` is given.

Uvicorn installs its own handlers on the ``uvicorn`` loggers; they are
routed through the root handlers instead so server and application
records share one format and one destination.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, force: bool = False) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also write records to (``LOG_FILE`` setting).
    force : bool
        Replace existing root handlers instead of keeping them.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if logging was
        already configured.
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return False
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(numeric_level)

    return True
