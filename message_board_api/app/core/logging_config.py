"""
Logging configuration for the service.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and routes Uvicorn's own loggers through
it, so server, access and application records share one format.

Level names come from the ``LOG_LEVEL`` environment variable and are
normalised by ``resolve_log_level`` to a name both the ``logging``
module and Uvicorn understand.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Uvicorn's accepted names, mapped to numeric levels.  ``trace`` is
# Uvicorn's custom level below DEBUG.
LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": 5,
}
LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}
DEFAULT_LEVEL = "info"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_log_level(level: Optional[str]) -> str:
    """Return a lower-case level name accepted by Uvicorn.

    ``WARN`` and ``FATAL`` map to their canonical names; empty or
    unknown values fall back to ``info``.
    """
    name = (level or "").strip().lower()
    name = LEVEL_ALIASES.get(name, name)
    return name if name in LEVELS else DEFAULT_LEVEL


def configure_server_loggers(level: Optional[str] = None) -> None:
    """Make Uvicorn's loggers propagate to the root handlers.

    Their own handlers are removed so records are not printed twice in
    Uvicorn's default format.  Pair with ``log_config=None`` on the
    Uvicorn ``Config`` so it does not install them again.
    """
    numeric_level = LEVELS[resolve_log_level(level)]
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True


def setup_logging(level: Optional[str] = DEFAULT_LEVEL, logfile: Optional[str] = None) -> None:
    """Configure the root logger and Uvicorn's loggers.

    Handlers are attached to the root logger only once per process, so
    repeated ``create_app`` calls (as in the tests) do not duplicate
    output.  The level is applied every time.

    Parameters
    ----------
    level : Optional[str]
        Level name, case insensitive; see ``resolve_log_level``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    numeric_level = LEVELS[resolve_log_level(level)]
    root = logging.getLogger()
    root.setLevel(numeric_level)
    configure_server_loggers(level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
