"""
Logging setup for the Dog API.

``setup_logging`` attaches a console handler, and optionally a file
handler, to the root logger.  Every module logs through
``logging.getLogger(__name__)`` so records carry the dotted module
name, e.g. ``dog_api.app.core.store``.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (``"DEBUG"``, ``"INFO"``...), case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to copy log records to.  Missing parent directories are
        created.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app runs once per test; keep the first configuration.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
