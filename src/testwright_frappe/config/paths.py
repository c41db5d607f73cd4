"""Path utilities for the tests directory and driver logs."""

import os
import tempfile
from pathlib import Path
from typing import Optional

from .environment import get_env_config


def tests_dir(config: Optional[dict] = None) -> Path:
    """Return the directory test files are written to and run from."""
    if config is None:
        config = get_env_config()
    return Path(config["tests_dir"])


def ensure_tests_dir(config: Optional[dict] = None) -> Path:
    """Return the tests directory, creating it (and any parents) if missing."""
    path = tests_dir(config)
    path.mkdir(parents=True, exist_ok=True)
    return path


def chromedriver_log_path() -> str:
    """Get the path to this process's ChromeDriver log file."""
    return os.path.join(tempfile.gettempdir(), f"testwright_chromedriver_{os.getpid()}.log")
