"""
Logging setup shared by the API and the launcher.

The level comes from ``LOG_LEVEL`` and is resolved once by
``resolve_level`` so that the root logger and uvicorn agree on it.
``setup_logging`` installs handlers on the root logger only if it has
none yet; later calls (one per ``create_app``) leave it alone.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names understood by both ``logging`` and uvicorn's ``log_level``.
_LEVELS = {
    "CRITICAL": "CRITICAL",
    "FATAL": "CRITICAL",
    "ERROR": "ERROR",
    "WARNING": "WARNING",
    "WARN": "WARNING",
    "INFO": "INFO",
    "DEBUG": "DEBUG",
}


def resolve_level(name: Optional[str], default: str = "INFO") -> str:
    """Return the canonical upper‑case level for ``name``.

    Unknown or empty names resolve to ``default``.
    """
    return _LEVELS.get((name or "").strip().upper(), default)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name, resolved with :func:`resolve_level`.
    logfile : Optional[str]
        Extra file to write log records to.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
