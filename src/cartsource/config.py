"""Configuration utilities for CARTSOURCE.

This module centralizes small helpers and constants related to application configuration.
The domain core consumes no configuration; these settings only concern the CLI.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "cartsource"

LOG_PATH_ENV = "CARTSOURCE_LOG_PATH"  # pragma: no mutate
LOG_FILE_NAME = "latest.log"  # pragma: no mutate


def get_log_path() -> Path:
    """Get the flight-recorder log path.

    Returns:
        The value of `CARTSOURCE_LOG_PATH` when set, otherwise `latest.log` in the
        per-user log directory.
    """
    if path := os.environ.get(LOG_PATH_ENV):
        return Path(path)
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / LOG_FILE_NAME
