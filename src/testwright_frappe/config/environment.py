"""Environment configuration."""

import os
from pathlib import Path

import logging
logger = logging.getLogger(__name__)

from ..constants import DEFAULT_TEST_RUNNER


def get_env_config() -> dict:
    """
    Read environment variables into a config dict.

    Nothing is required. Every call re-reads the environment, so a changed
    .env takes effect on the next tool call without restarting the server.

    Optional:   CHROME_EXECUTABLE_PATH
                CHROMEDRIVER_PATH
                TESTWRIGHT_TESTS_DIR (default ./tests)
                TESTWRIGHT_TEST_RUNNER (default 'npx playwright test')
                TESTWRIGHT_WINDOW_SIZE (default '1280,720')
    """
    chrome_path = (os.getenv("CHROME_EXECUTABLE_PATH") or "").strip() or None
    chromedriver_path = (os.getenv("CHROMEDRIVER_PATH") or "").strip() or None

    tests_dir = (os.getenv("TESTWRIGHT_TESTS_DIR") or "").strip()
    if tests_dir:
        tests_dir = str(Path(tests_dir).expanduser().absolute())
    else:
        tests_dir = str(Path.cwd() / "tests")

    test_runner = (os.getenv("TESTWRIGHT_TEST_RUNNER") or "").strip() or DEFAULT_TEST_RUNNER

    window_size = (os.getenv("TESTWRIGHT_WINDOW_SIZE") or "").strip() or "1280,720"
    if not _valid_window_size(window_size):
        logger.warning(f"Ignoring malformed TESTWRIGHT_WINDOW_SIZE={window_size!r}")
        window_size = "1280,720"

    return {
        "chrome_path": chrome_path,
        "chromedriver_path": chromedriver_path,
        "tests_dir": tests_dir,
        "test_runner": test_runner,
        "window_size": window_size,
    }


def _valid_window_size(value: str) -> bool:
    parts = value.split(",")
    return len(parts) == 2 and all(p.strip().isdigit() for p in parts)
