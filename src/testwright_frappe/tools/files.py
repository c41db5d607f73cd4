"""create_test_file: write a test file into the tests directory."""

import asyncio
from pathlib import Path

from ..config import ensure_tests_dir
from ..decorators import action_result

import logging
logger = logging.getLogger(__name__)


def write_test_file(file_path: Path, test_content: str) -> None:
    # newline="" keeps the content byte-for-byte as sent
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(test_content)


@action_result(on_error=lambda err, args: f"Failed to create test file: {err}")
async def create_test_file(file_name: str, test_content: str) -> str:
    """
    Write `test_content` verbatim to <tests dir>/<file_name>.

    The tests directory is created if needed and an existing file is replaced.
    """
    tests_dir = ensure_tests_dir()
    file_path = tests_dir / file_name
    await asyncio.to_thread(write_test_file, file_path, test_content)
    logger.info(f"Wrote test file {file_path}")
    return f"Test file {file_name} created successfully at {file_path}"


__all__ = ["create_test_file"]
