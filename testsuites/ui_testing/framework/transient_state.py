"""
================================================================================
Transient Prompt Handling
================================================================================

Best-effort dismissal of ephemeral browser UI (notification permission
prompts, "reload to continue" overlays) before a scenario runs.

Sequence:
    1. Wait a bounded settle delay for a prompt to render
    2. Click the first displayed button from a fixed vocabulary
    3. Otherwise request the permission through page script
    4. Reload the page and wait for the document to be ready

Nothing in here ever raises: a page without a prompt is the common case.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Sequence

from loguru import logger

from .driver import BrowserDriver
from .locators import LocatorExpr
from .waits import (
    PROMPT_SETTLE_SECONDS,
    RELOAD_SETTLE_TIMEOUT,
    wait_for_document_ready,
)


DISMISS_BUTTON_TEXTS: Sequence[str] = ("Allow", "Reload", "Continue", "Proceed")

NOTIFICATION_PERMISSION_SCRIPT = (
    "if (window.Notification && Notification.requestPermission) {"
    " Notification.requestPermission().then(function (p) { console.log(p); });"
    " return true; } return false;"
)


class PromptOutcome(str, Enum):
    """What the handler did. Informational only."""

    CLICKED = "clicked"
    SCRIPT_GRANTED = "script_granted"
    NONE = "none"


def dismiss_button(text: str) -> LocatorExpr:
    """XPath for a button whose text contains `text`."""
    return LocatorExpr.xpath(f"//button[contains(text(), '{text}')]")


class TransientStateHandler:
    """
    Detects and dismisses transient prompts, then resynchronizes the page.

    Usage:
        handler = TransientStateHandler(driver)
        handler.dismiss()
    """

    def __init__(
        self,
        driver: BrowserDriver,
        settle_seconds: float = PROMPT_SETTLE_SECONDS,
        reload_timeout: float = RELOAD_SETTLE_TIMEOUT,
        button_texts: Sequence[str] = DISMISS_BUTTON_TEXTS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.driver = driver
        self.settle_seconds = settle_seconds
        self.reload_timeout = reload_timeout
        self.button_texts = tuple(button_texts)
        self._clock = clock
        self._sleep = sleep

    def dismiss(self) -> PromptOutcome:
        """
        Run the full dismissal sequence.

        Returns:
            PromptOutcome describing which mechanism (if any) was used
        """
        outcome = PromptOutcome.NONE
        try:
            self._settle()
            if self._click_dismiss_button():
                outcome = PromptOutcome.CLICKED
            elif self._grant_via_script():
                outcome = PromptOutcome.SCRIPT_GRANTED
        except Exception as e:
            logger.warning(f"Notification handling: {e}")

        self._reload()
        logger.debug(f"Transient prompt handling finished: {outcome.value}")
        return outcome

    def _settle(self) -> None:
        if self.settle_seconds > 0:
            self._sleep(self.settle_seconds)

    def _click_dismiss_button(self) -> bool:
        for text in self.button_texts:
            try:
                button = self.driver.find_element(dismiss_button(text))
                if button is not None and button.is_displayed():
                    button.click()
                    logger.info(f"Dismissed transient prompt via '{text}' button")
                    return True
            except Exception as e:
                logger.debug(f"Dismiss button '{text}' not usable: {e}")
        return False

    def _grant_via_script(self) -> bool:
        try:
            granted = self.driver.execute_script(NOTIFICATION_PERMISSION_SCRIPT)
        except Exception as e:
            logger.warning(f"JavaScript notification handling failed: {e}")
            return False
        if granted:
            logger.debug("Requested notification permission via page script")
        return bool(granted)

    def _reload(self) -> None:
        try:
            self.driver.refresh()
        except Exception as e:
            logger.warning(f"Page reload after prompt handling failed: {e}")
            return

        try:
            wait_for_document_ready(
                self.driver,
                timeout=self.reload_timeout,
                clock=self._clock,
                sleep=self._sleep,
            )
        except Exception as e:
            logger.warning(f"Page did not settle after reload: {e}")


def dismiss_transient_prompts(driver: BrowserDriver, **kwargs) -> PromptOutcome:
    """Module-level shortcut for `TransientStateHandler(driver, **kwargs).dismiss()`."""
    return TransientStateHandler(driver, **kwargs).dismiss()


__all__ = [
    "DISMISS_BUTTON_TEXTS",
    "PromptOutcome",
    "TransientStateHandler",
    "dismiss_button",
    "dismiss_transient_prompts",
]
