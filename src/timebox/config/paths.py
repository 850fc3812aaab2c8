from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Timebox"
APP_AUTHOR = "Timebox"
DATA_DIR = Path(os.getenv("TIMEBOX_DATA_DIR") or user_data_dir(APP_NAME, APP_AUTHOR))
SESSION_FILE = DATA_DIR / "session.json"
LOG_FILE = DATA_DIR / "timebox.log"


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
