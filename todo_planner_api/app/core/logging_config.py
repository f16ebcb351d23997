"""
Logging setup for the Todo Planner API.

``setup_logging`` installs the service's handlers on the root logger
from a ``Settings`` instance: a console handler always, plus a file
handler when ``LOG_FILE`` is set.  The directory of the log file is
created if needed.

The function may be called repeatedly (every ``create_app`` call does
so, and tests build many apps).  Handlers installed by a previous call
are removed and closed before the new ones are added, so settings can
change between calls without duplicating output.  Handlers installed by
anyone else, e.g. pytest's capture handler, are left alone.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_installed: List[logging.Handler] = []


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, ``INFO`` if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(config: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        log_path = Path(config.log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(config: Settings) -> None:
    """Configure the root logger from ``config.log_level`` and ``config.log_file``."""
    root = logging.getLogger()

    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    root.setLevel(resolve_level(config.log_level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(config):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)
