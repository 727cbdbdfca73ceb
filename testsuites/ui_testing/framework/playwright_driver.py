"""
================================================================================
Playwright Driver Adapter
================================================================================

Production implementation of the `BrowserDriver` / `ElementHandle`
protocols on top of the Playwright sync API.

Lookups use `Page.query_selector`, which returns the first match or None
without waiting. Waiting is done explicitly by `ElementActions`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger
from playwright.sync_api import BrowserContext, ElementHandle as PwElementHandle, Page

from .locators import LocatorExpr


# Viewport used for "maximize" (Playwright has no OS-level window control)
MAXIMIZED_VIEWPORT: Dict[str, int] = {"width": 1920, "height": 1080}


class PlaywrightElement:
    """`ElementHandle` backed by a Playwright element handle."""

    def __init__(self, handle: PwElementHandle):
        self._handle = handle

    def click(self) -> None:
        self._handle.click()

    def clear(self) -> None:
        self._handle.fill("")

    def send_keys(self, text: str) -> None:
        self._handle.type(text)

    def get_attribute(self, name: str) -> Optional[str]:
        # Live DOM properties (e.g. typed `value`) are not reflected in attributes
        if name == "value":
            return self._handle.input_value()
        return self._handle.get_attribute(name)

    def get_text(self) -> str:
        return self._handle.inner_text()

    def is_enabled(self) -> bool:
        return self._handle.is_enabled()

    def is_displayed(self) -> bool:
        return self._handle.is_visible()


class PlaywrightDriver:
    """
    `BrowserDriver` backed by a Playwright page.

    Usage:
        driver = PlaywrightDriver(page)
        driver.get("https://example.com/login")
        element = driver.find_element(LocatorExpr.by_id("userID"))
    """

    def __init__(self, page: Page, context: Optional[BrowserContext] = None):
        self.page = page
        self.context = context or page.context

    def find_element(self, expr: LocatorExpr) -> Optional[PlaywrightElement]:
        handle = self.page.query_selector(expr.as_selector())
        if handle is None:
            return None
        return PlaywrightElement(handle)

    def get(self, url: str) -> None:
        self.page.goto(url, wait_until="load")
        logger.debug(f"Navigated to: {url}")

    def refresh(self) -> None:
        self.page.reload(wait_until="load")

    def maximize_window(self) -> None:
        self.page.set_viewport_size(MAXIMIZED_VIEWPORT)

    def set_timeouts(self, implicit_wait: float, page_load_timeout: float) -> None:
        # Playwright timeouts are in milliseconds
        self.page.set_default_timeout(implicit_wait * 1000)
        self.page.set_default_navigation_timeout(page_load_timeout * 1000)

    def delete_all_cookies(self) -> None:
        self.context.clear_cookies()

    def execute_script(self, script: str, *args: Any) -> Any:
        """
        Run `script` in the page.

        Accepts WebDriver-style bodies ("return document.readyState") by
        wrapping them in a function.
        """
        body = f"(args) => {{ {script} }}"
        return self.page.evaluate(body, list(args))

    def screenshot(self) -> bytes:
        return self.page.screenshot(full_page=True)

    @property
    def title(self) -> str:
        return self.page.title()

    @property
    def current_url(self) -> str:
        return self.page.url

    def quit(self) -> None:
        self.page.close()


__all__ = [
    "PlaywrightDriver",
    "PlaywrightElement",
    "MAXIMIZED_VIEWPORT",
]
