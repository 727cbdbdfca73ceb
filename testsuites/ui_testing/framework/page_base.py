"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and page readiness
    - Locator strategy declaration helper
    - Element interactions through ElementActions
    - Transient prompt dismissal
    - Screenshot and debugging utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

import allure
from loguru import logger

from .driver import BrowserDriver
from .element_actions import ElementActions
from .locators import LocatorExpr, LocatorStrategy
from .smart_locator import SmartLocator
from .transient_state import PromptOutcome, TransientStateHandler
from .waits import WaitPolicy, wait_for_document_ready


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare one `LocatorStrategy` per logical target and build
    intention-revealing operations on top of `self.actions`.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            def login(self, username: str, password: str):
                self.actions.type_text(self.username_input, username)
                self.actions.type_text(self.password_input, password)
                self.actions.click(self.login_button)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        driver: BrowserDriver,
        base_url: str = "",
        policy: Optional[WaitPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize page object.

        Args:
            driver: Browser session
            base_url: Base URL for the application
            policy: Default wait policy for interactions
            clock: Monotonic time source for waits
            sleep: Sleep function for waits and settle delays
        """
        self.driver = driver
        if not base_url:
            # Demo-safe default. Real deployments should override via config/env.
            base_url = os.getenv("UI_BASE_URL", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")
        self.policy = policy or WaitPolicy()
        self.smart = SmartLocator(driver)
        self.actions = ElementActions(
            driver, policy=self.policy, resolver=self.smart, clock=clock, sleep=sleep
        )
        self._clock = clock
        self._sleep = sleep

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @staticmethod
    def locator(
        name: str,
        primary: Union[str, LocatorExpr],
        *fallbacks: Union[str, LocatorExpr],
    ) -> LocatorStrategy:
        """
        Declare a locator strategy with primary + fallback selectors.

        Args:
            name: Logical target name used in logs and failure reasons
            primary: Primary selector ("id=..." / XPath / CSS shorthand)
            fallbacks: Fallback selectors tried in order

        Returns:
            Immutable LocatorStrategy
        """
        return LocatorStrategy.of(name, primary, *fallbacks)

    # =========================================================================
    # Navigation
    # =========================================================================

    def open(self) -> "BasePage":
        """Navigate to this page and wait for it to load."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.driver.get(self.url)
            logger.debug(f"Navigated to: {self.url}")
        self.wait_for_page_load()
        return self

    def navigate_to(self, path: str) -> None:
        """Navigate to a path relative to the base URL."""
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            self.driver.get(full_url)

    def refresh(self) -> None:
        with allure.step("Refresh page"):
            self.driver.refresh()

    def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        """
        Wait until the document reports readyState == "complete".

        Raises:
            WaitTimeoutError: If the page did not finish loading in time
        """
        wait_for_document_ready(
            self.driver,
            timeout=timeout or self.policy.timeout,
            poll_interval=self.policy.poll_interval,
            clock=self._clock,
            sleep=self._sleep,
        )

    def get_page_title(self) -> str:
        return self.driver.title

    def get_current_url(self) -> str:
        return self.driver.current_url

    def dismiss_transient_prompts(self) -> PromptOutcome:
        """Best-effort prompt dismissal followed by a reload. Never raises."""
        with allure.step("Dismiss transient browser prompts"):
            return TransientStateHandler(
                self.driver, clock=self._clock, sleep=self._sleep
            ).dismiss()

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(self, name: str, attach_to_allure: bool = True) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        data = self.driver.screenshot()
        filepath.write_bytes(data)

        if attach_to_allure:
            allure.attach(
                data,
                name=name,
                attachment_type=allure.attachment_type.PNG
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
            - Locator health report
        """
        with allure.step("Capture failure details"):
            self.screenshot(f"failure_{test_name}", attach_to_allure=True)

            allure.attach(
                self.driver.current_url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT
            )
            allure.attach(
                self.get_locator_health_report(),
                name="Locator Health",
                attachment_type=allure.attachment_type.TEXT
            )

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
