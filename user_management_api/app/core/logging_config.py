"""
Logging setup for the API process.

Handlers are attached to the root logger only once, so calling
``setup_logging`` again (tests, repeated ``create_app`` calls) keeps
the first configuration.  Records are written to the console and, when
``LOG_FILE`` is configured, appended to that file as well.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file destination, resolved against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # The driver logs every heartbeat and connection event at DEBUG.
    logging.getLogger("pymongo").setLevel(max(root.level, logging.INFO))
