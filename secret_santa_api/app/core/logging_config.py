"""
Logging setup for the service.

``setup_logging`` installs the service's console handler (and an
optional file handler) on the root logger.  The handlers carry a fixed
name, so calling it again only updates the level: it neither stacks
duplicate handlers nor backs off because some other tool (pytest,
uvicorn) attached a handler of its own first.
"""

import logging
from pathlib import Path
from typing import List, Optional

HANDLER_PREFIX = "secret_santa"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    ``level`` is a level name, case insensitive; unknown names mean
    ``INFO``.  ``logfile``, when given, adds a UTF-8 file handler; it is
    only honoured on the first call.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _own_handlers(root):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for index, handler in enumerate(handlers):
        handler.set_name(f"{HANDLER_PREFIX}.{index}")
        handler.setFormatter(formatter)
        root.addHandler(handler)
