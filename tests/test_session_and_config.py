"""Tests for browser session lifecycle, driver options and environment config."""

import asyncio
import threading
from pathlib import Path

import pytest
from selenium.common.exceptions import WebDriverException
from urllib3.exceptions import MaxRetryError

from testwright_frappe import constants
from testwright_frappe.browser import session
from testwright_frappe.browser.driver import build_chrome_options
from testwright_frappe.browser.session import browser_session, run_in_browser
from testwright_frappe.config import get_env_config
from testwright_frappe.utils.diagnostics import collect_diagnostics
from _utils import FakeDriver, install_fake_browser

##
## We DO NOT want to use pytest-asyncio.
##

@pytest.fixture
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


class TestBrowserSession:

    def test_driver_quit_after_success(self, monkeypatch):
        driver = FakeDriver()
        install_fake_browser(monkeypatch, driver)

        with browser_session() as d:
            assert d is driver
            assert driver.quit_calls == 0

        assert driver.quit_calls == 1

    def test_driver_quit_after_error(self, monkeypatch):
        driver = FakeDriver()
        install_fake_browser(monkeypatch, driver)

        with pytest.raises(RuntimeError, match="boom"):
            with browser_session():
                raise RuntimeError("boom")

        assert driver.quit_calls == 1

    def test_quit_error_does_not_mask_body_error(self, monkeypatch):
        class BrokenQuit(FakeDriver):
            def quit(self):
                super().quit()
                raise WebDriverException("chrome already gone")

        driver = BrokenQuit()
        install_fake_browser(monkeypatch, driver)

        with pytest.raises(ValueError, match="body failed"):
            with browser_session():
                raise ValueError("body failed")

        assert driver.quit_calls == 1

    def test_dead_chromedriver_does_not_mask_body_error(self, monkeypatch):
        class DeadDriver(FakeDriver):
            def quit(self):
                super().quit()
                raise MaxRetryError(None, "http://localhost:9515/session", reason="Connection refused")

        driver = DeadDriver()
        install_fake_browser(monkeypatch, driver)

        with pytest.raises(ValueError, match="body failed"):
            with browser_session():
                raise ValueError("body failed")

        assert driver.quit_calls == 1

    def test_run_in_browser_uses_worker_thread(self, event_loop, monkeypatch):
        driver = FakeDriver()
        launches = install_fake_browser(monkeypatch, driver)
        main_thread = threading.get_ident()

        def body(d, value):
            return d, value, threading.get_ident()

        d, value, thread_id = event_loop.run_until_complete(run_in_browser(body, 42, headless=False))

        assert d is driver
        assert value == 42
        assert thread_id != main_thread
        assert launches == [False]
        assert driver.quit_calls == 1

    def test_sessions_unlimited_by_default(self, monkeypatch):
        monkeypatch.setattr(constants, "MAX_BROWSER_SESSIONS", 0)
        assert session._session_slots() is None

    def test_session_limit_is_released(self, monkeypatch):
        monkeypatch.setattr(constants, "MAX_BROWSER_SESSIONS", 1)
        monkeypatch.setattr(session, "_slots", None)
        install_fake_browser(monkeypatch, FakeDriver())

        for _ in range(3):
            with browser_session():
                slots = session._session_slots()
                assert slots.acquire(blocking=False) is False

        assert slots.acquire(blocking=False) is True
        slots.release()

    def test_launch_failure_releases_slot(self, monkeypatch):
        monkeypatch.setattr(constants, "MAX_BROWSER_SESSIONS", 1)
        monkeypatch.setattr(session, "_slots", None)
        install_fake_browser(monkeypatch, launch_error=WebDriverException("no chrome"))

        with pytest.raises(WebDriverException):
            with browser_session():
                pass

        slots = session._session_slots()
        assert slots.acquire(blocking=False) is True
        slots.release()


class TestChromeOptions:

    def test_headless_flag(self):
        args = build_chrome_options(True, {"window_size": "800,600"}).arguments
        assert "--headless=new" in args
        assert "--window-size=800,600" in args

    def test_headed_has_no_headless_flag(self):
        args = build_chrome_options(False, {}).arguments
        assert not any(a.startswith("--headless") for a in args)

    def test_binary_location(self):
        options = build_chrome_options(True, {"chrome_path": "/opt/chrome/chrome"})
        assert options.binary_location == "/opt/chrome/chrome"


class TestEnvConfig:

    def test_defaults(self, monkeypatch, tmp_path):
        for var in ("CHROME_EXECUTABLE_PATH", "CHROMEDRIVER_PATH", "TESTWRIGHT_TESTS_DIR",
                    "TESTWRIGHT_TEST_RUNNER", "TESTWRIGHT_WINDOW_SIZE"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.chdir(tmp_path)

        config = get_env_config()

        assert config["chrome_path"] is None
        assert config["chromedriver_path"] is None
        assert Path(config["tests_dir"]) == Path.cwd() / "tests"
        assert config["test_runner"] == "npx playwright test"
        assert config["window_size"] == "1280,720"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHROME_EXECUTABLE_PATH", " /usr/bin/chromium ")
        monkeypatch.setenv("TESTWRIGHT_TESTS_DIR", str(tmp_path / "e2e"))
        monkeypatch.setenv("TESTWRIGHT_TEST_RUNNER", "yarn playwright test")

        config = get_env_config()

        assert config["chrome_path"] == "/usr/bin/chromium"
        assert config["tests_dir"] == str(tmp_path / "e2e")
        assert config["test_runner"] == "yarn playwright test"

    def test_malformed_window_size_falls_back(self, monkeypatch):
        monkeypatch.setenv("TESTWRIGHT_WINDOW_SIZE", "huge")
        assert get_env_config()["window_size"] == "1280,720"


def test_diagnostics_mentions_error_and_driver():
    driver = FakeDriver()
    driver.current_url = "https://erp.example.com/login"

    text = collect_diagnostics(driver, TimeoutError("slow"), {"chrome_path": "/opt/chrome"})

    assert "Chrome binary     : /opt/chrome" in text
    assert "Driver version    : 120.0.1" in text
    assert "Current URL       : https://erp.example.com/login" in text
    assert "Error type        : TimeoutError" in text
