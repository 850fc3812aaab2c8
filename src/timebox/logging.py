from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LOG_FILE, ensure_data_dir

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_INITIALIZED = False


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("TIMEBOX_LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    *,
    log_path: Optional[Path] = None,
    console: bool = True,
) -> None:
    """Attach the rotating file handler (and a console handler) to the root logger once."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    log_file = log_path or LOG_FILE
    if log_path is None:
        ensure_data_dir()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [
        RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
    ]
    if console:
        handlers.append(logging.StreamHandler())

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


__all__ = ["LOG_FORMAT", "configure_logging"]
