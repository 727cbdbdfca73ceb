"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live browser scenarios.

Key Features:
- One browser session per test session (BrowserManager)
- LoginPage fixture bound to that session
- Per-test prompt dismissal + readiness check with one refresh retry
- Screenshot capture on failure (Allure)

Live scenarios need a reachable application and installed Playwright
browsers, so they only run with RUN_UI_TESTS=1.

================================================================================
"""

import os
from typing import Generator

import allure
import pytest
from loguru import logger

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader, UISettings
from testsuites.ui_testing.framework.exceptions import UIInteractionError
from testsuites.ui_testing.framework.log_setup import init_logger
from testsuites.ui_testing.framework.playwright_driver import PlaywrightDriver
from testsuites.ui_testing.framework.waits import WaitPolicy
from testsuites.ui_testing.pages.login_page import LoginPage


def _ui_tests_enabled() -> bool:
    return os.getenv("RUN_UI_TESTS", "").lower() in ("1", "true", "yes", "on")


def pytest_collection_modifyitems(config, items):
    """Skip live scenarios unless explicitly enabled."""
    if _ui_tests_enabled():
        return
    skip_live = pytest.mark.skip(reason="live UI tests disabled (set RUN_UI_TESTS=1)")
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(skip_live)


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UISettings:
    """Browser/session settings from config/config.yaml + environment."""
    config = ConfigLoader()
    init_logger(
        level=config.get("logging.level", "INFO"),
        log_file=config.get("logging.file"),
    )
    return UISettings.from_config(config)


@pytest.fixture(scope="session")
def driver(ui_settings: UISettings) -> Generator[PlaywrightDriver, None, None]:
    """
    Session-scoped browser session.

    Opens the application once; torn down after the last scenario.
    """
    manager = BrowserManager(ui_settings)
    session = manager.start()
    try:
        session.get(ui_settings.base_url)
        yield session
    finally:
        manager.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(driver: PlaywrightDriver, ui_settings: UISettings) -> LoginPage:
    """Provides LoginPage bound to the session browser."""
    return LoginPage(
        driver,
        base_url=ui_settings.base_url,
        policy=WaitPolicy(timeout=ui_settings.implicit_wait),
    )


@pytest.fixture(autouse=True)
def prepared_login_page(request) -> None:
    """
    Bring the login page to a known state before each scenario.

    Dismisses transient prompts, waits for the page, and if the login form
    is still missing refreshes once and repeats.
    """
    if "login_page" not in request.fixturenames:
        return

    page: LoginPage = request.getfixturevalue("login_page")
    with allure.step("Prepare login page"):
        page.handle_notification_permission()
        try:
            page.wait_for_page_load()
            if not page.is_login_page_loaded():
                logger.info("Login form not found, refreshing and retrying setup")
                page.refresh()
                page.handle_notification_permission()
                page.wait_for_page_load()
        except UIInteractionError as e:
            logger.warning(f"Setup test failed: {e.reason}")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach a screenshot and locator health to Allure when a scenario fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("login_page")
        if page is not None:
            try:
                page.capture_failure(item.name)
            except Exception as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """Provides common test data for UI tests."""
    return {
        "invalid_user": {
            "user_id": os.getenv("UI_USER_ID", "invalid_user@test.com"),
            "password": os.getenv("UI_PASSWORD", "InvalidPassword123"),
        },
        "test_password": "TestPassword@123",
    }
