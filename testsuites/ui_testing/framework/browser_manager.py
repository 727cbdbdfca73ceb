"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle for UI automation.

Features:
    - Fixed set of supported browsers, validated before launch
    - Notification permission granted at context level
    - Session configuration (maximize, timeouts, clean cookies)
    - Returns a `PlaywrightDriver` bound to one page

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Playwright, sync_playwright

from .config_loader import UISettings
from .exceptions import UnsupportedBrowserError
from .playwright_driver import MAXIMIZED_VIEWPORT, PlaywrightDriver


# Browser identity -> (Playwright engine, release channel)
SUPPORTED_BROWSERS: Dict[str, Tuple[str, Optional[str]]] = {
    "chrome": ("chromium", None),
    "firefox": ("firefox", None),
    "edge": ("chromium", "msedge"),
}


def resolve_browser(browser: str) -> Tuple[str, Optional[str]]:
    """
    Map a browser identity to its Playwright engine and channel.

    Raises:
        UnsupportedBrowserError: For identities outside SUPPORTED_BROWSERS
    """
    key = (browser or "").strip().lower()
    if key not in SUPPORTED_BROWSERS:
        raise UnsupportedBrowserError(
            f"Browser not supported: {browser!r} "
            f"(expected one of: {', '.join(sorted(SUPPORTED_BROWSERS))})"
        )
    return SUPPORTED_BROWSERS[key]


class BrowserManager:
    """
    Manages one browser session for a batch of UI scenarios.

    Usage:
        with BrowserManager(UISettings.from_config()) as driver:
            driver.get("https://example.com")
    """

    # Chromium flags for stable automated runs
    CHROMIUM_ARGS = [
        "--disable-blink-features=AutomationControlled",
        "--disable-extensions",
        "--disable-plugins",
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ]

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": MAXIMIZED_VIEWPORT,
        "ignore_https_errors": True,
    }

    # Pre-granted on Chromium so the notification prompt is usually skipped
    CHROMIUM_PERMISSIONS = ["notifications"]

    def __init__(self, settings: Optional[UISettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Session settings (loaded from configuration if omitted)
        """
        self.settings = settings or UISettings.from_config()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._driver: Optional[PlaywrightDriver] = None

    def __enter__(self) -> PlaywrightDriver:
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> PlaywrightDriver:
        """
        Launch the browser and return a configured driver.

        Raises:
            UnsupportedBrowserError: Before anything is launched, for unknown browsers
        """
        engine, channel = resolve_browser(self.settings.browser)

        self._playwright = sync_playwright().start()
        try:
            launcher = getattr(self._playwright, engine)

            launch_options: Dict[str, Any] = {"headless": self.settings.headless}
            if engine == "chromium":
                launch_options["args"] = list(self.CHROMIUM_ARGS)
            if channel:
                launch_options["channel"] = channel

            self._browser = launcher.launch(**launch_options)
            context_options = dict(self.DEFAULT_CONTEXT_OPTIONS)
            if engine == "chromium":
                context_options["permissions"] = list(self.CHROMIUM_PERMISSIONS)

            self._context = self._browser.new_context(**context_options)
            page = self._context.new_page()

            self._driver = PlaywrightDriver(page, self._context)
            self._configure(self._driver)
        except BaseException:
            logger.error(f"Browser start failed: {self.settings.browser}")
            self.close()
            raise

        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )
        return self._driver

    def _configure(self, driver: PlaywrightDriver) -> None:
        driver.maximize_window()
        driver.set_timeouts(self.settings.implicit_wait, self.settings.page_load_timeout)
        driver.delete_all_cookies()

    def close(self) -> None:
        """Close page, context, browser and Playwright. Safe to call twice."""
        if self._driver:
            try:
                self._driver.quit()
            except Exception as e:
                logger.debug(f"Page close failed: {e}")
            self._driver = None

        if self._context:
            try:
                self._context.close()
            except Exception as e:
                logger.debug(f"Context close failed: {e}")
            self._context = None

        if self._browser:
            try:
                self._browser.close()
            except Exception as e:
                logger.debug(f"Browser close failed: {e}")
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    @property
    def driver(self) -> Optional[PlaywrightDriver]:
        return self._driver


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
    "resolve_browser",
]
