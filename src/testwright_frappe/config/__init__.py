"""Configuration management for browser automation."""

from .environment import get_env_config

from .paths import (
    tests_dir,
    ensure_tests_dir,
    chromedriver_log_path,
)

__all__ = [
    "get_env_config",
    "tests_dir",
    "ensure_tests_dir",
    "chromedriver_log_path",
]
