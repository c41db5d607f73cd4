"""run_test_suite: run the test-runner CLI over the tests directory."""

import glob
import asyncio
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from .. import constants
from ..config import get_env_config, tests_dir as get_tests_dir
from ..decorators import action_result

import logging
logger = logging.getLogger(__name__)


def expand_pattern(tests_dir: Path, pattern: str) -> List[str]:
    """
    Expand `pattern` inside `tests_dir` the way sh expands `tests/<pattern>`.

    Matches come back sorted and relative to the tests directory's parent. A
    pattern that matches nothing is passed through literally.
    """
    prefix = tests_dir.name
    matches = sorted(glob.glob(pattern, root_dir=str(tests_dir))) if tests_dir.is_dir() else []
    if not matches:
        return [f"{prefix}/{pattern}"]
    return [f"{prefix}/{m}" for m in matches]


def build_runner_command(runner: str, targets: List[str], headless: bool = True) -> List[str]:
    cmd = shlex.split(runner) + list(targets)
    if not headless:
        cmd.append(constants.HEADED_FLAG)
    return cmd


def _suite_failed(err: Exception, args: dict) -> str:
    output = getattr(err, "stdout", None) or getattr(err, "output", None) or ""
    return f"Test suite failed:\n{err}\n{output}"


@action_result(on_error=_suite_failed)
async def run_test_suite(pattern: Optional[str] = None, headless: bool = True) -> str:
    """
    Run the configured runner (default `npx playwright test`) on tests/<pattern>.

    `pattern` defaults to `*.spec.js` only when omitted; an empty pattern runs
    the whole tests directory.

    Returns the combined stdout/stderr. A non-zero exit is a failure whose text
    includes whatever output was captured.
    """
    if pattern is None:
        pattern = constants.DEFAULT_TEST_PATTERN
    config = get_env_config()
    tests_dir = get_tests_dir(config)
    cmd = build_runner_command(
        config["test_runner"],
        expand_pattern(tests_dir, pattern),
        headless=bool(headless),
    )
    logger.info(f"Running test suite: {shlex.join(cmd)}")

    proc = await asyncio.to_thread(
        subprocess.run,
        cmd,
        cwd=str(tests_dir.parent),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=True,
    )
    return proc.stdout


__all__ = ["expand_pattern", "build_runner_command", "run_test_suite"]
