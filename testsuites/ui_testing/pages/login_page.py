"""
================================================================================
Login Page Object
================================================================================

Page Object for the user-ID / password login page.

Design goals:
  - One LocatorStrategy per logical target (primary + fallbacks)
  - Every operation re-resolves its elements (no cached handles)
  - Read-style probes answer with a safe default instead of raising

================================================================================
"""

from __future__ import annotations

from typing import Tuple

import allure
from loguru import logger

from testsuites.ui_testing.framework.exceptions import UIInteractionError
from testsuites.ui_testing.framework.locators import LocatorExpr
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.transient_state import PromptOutcome


# Generic "error-ish" selectors tried when the dedicated error banner is absent
ERROR_MESSAGE_FALLBACKS: Tuple[LocatorExpr, ...] = tuple(
    LocatorExpr.css(selector)
    for selector in (
        ".error",
        ".alert",
        ".message",
        ".notification",
        "[class*='error']",
        "[class*='alert']",
        "[class*='invalid']",
    )
)


class LoginPage(PageBase):
    """Login page object."""

    URL_PATH = ""
    PAGE_TITLE = "Login"

    user_id_input = PageBase.locator(
        "user_id_input",
        "id=userID",
        "input[type='text']",
        "input[placeholder*='User']",
        "input[placeholder*='Email']",
        "input[name='username']",
        "input[name='email']",
    )

    password_input = PageBase.locator(
        "password_input",
        "id=password",
        "input[type='password']",
        "input[placeholder*='Password']",
        "input[name='password']",
    )

    login_button = PageBase.locator(
        "login_button",
        "id=loginBtn",
        "button[type='submit']",
        "input[type='submit']",
        "//button[contains(., 'Login')]",
        "//button[contains(., 'Sign In')]",
    )

    password_visibility_toggle = PageBase.locator(
        "password_visibility_toggle",
        "//span[contains(@class, 'eye-icon') or contains(@class, 'password-toggle')]",
        "[class*='eye']",
        "[class*='toggle']",
        "[class*='visibility']",
        "i[class*='fa-eye']",
    )

    error_message = PageBase.locator(
        "error_message",
        "//div[contains(@class, 'error-message') or contains(@class, 'alert')]",
    )

    # =========================================================================
    # Setup helpers
    # =========================================================================

    def handle_notification_permission(self) -> PromptOutcome:
        """Dismiss the notification prompt (if any) and reload. Never raises."""
        return self.dismiss_transient_prompts()

    # =========================================================================
    # Actions
    # =========================================================================

    def enter_user_id(self, user_id: str) -> None:
        self.actions.type_text(self.user_id_input, user_id)

    def enter_password(self, password: str) -> None:
        self.actions.type_text(self.password_input, password)

    @allure.step("Click login button")
    def click_login_button(self) -> None:
        self.actions.click(self.login_button)

    @allure.step("Click password visibility toggle")
    def click_password_visibility_toggle(self) -> None:
        self.actions.click(self.password_visibility_toggle)

    def perform_login(self, user_id: str, password: str) -> None:
        """Enter credentials and submit. Each step fails independently."""
        with allure.step(f"Login (user_id={user_id})"):
            self.enter_user_id(user_id)
            self.enter_password(password)
            self.click_login_button()

    def clear_all_fields(self) -> None:
        """Best-effort clear of both inputs."""
        try:
            self.actions.clear(self.user_id_input)
            self.actions.clear(self.password_input)
        except UIInteractionError as e:
            logger.warning(f"Failed to clear fields: {e.reason}")

    # =========================================================================
    # Probes
    # =========================================================================

    def is_login_button_enabled(self) -> bool:
        """False when the button is disabled or cannot be found."""
        try:
            return self.actions.is_enabled(self.login_button)
        except UIInteractionError as e:
            logger.debug(f"Login button state unavailable: {e.reason}")
            return False

    def is_password_masked(self) -> bool:
        """True when the password input has type="password" (or cannot be inspected)."""
        try:
            return self.actions.get_attribute(self.password_input, "type") == "password"
        except UIInteractionError as e:
            logger.debug(f"Password type unavailable, assuming masked: {e.reason}")
            return True

    def get_error_message(self) -> str:
        """Error banner text, or "" when no error is shown."""
        return self.actions.read_message(self.error_message, ERROR_MESSAGE_FALLBACKS)

    def is_error_message_displayed(self) -> bool:
        return bool(self.get_error_message())

    def is_login_page_loaded(self) -> bool:
        """True only when user id field, password field and login button all resolve."""
        loaded = all(
            self.smart.exists(strategy)
            for strategy in (self.user_id_input, self.password_input, self.login_button)
        )
        logger.debug(f"Login page loaded: {loaded}")
        return loaded

    def is_user_id_field_empty(self) -> bool:
        return self._is_field_empty(self.user_id_input)

    def is_password_field_empty(self) -> bool:
        return self._is_field_empty(self.password_input)

    def are_both_fields_empty(self) -> bool:
        return self.is_user_id_field_empty() and self.is_password_field_empty()

    def _is_field_empty(self, strategy) -> bool:
        # Unresolvable fields count as empty
        try:
            value = self.actions.get_attribute(strategy, "value")
        except UIInteractionError as e:
            logger.debug(f"{strategy.name} value unavailable: {e.reason}")
            return True
        return value is None or not value.strip()


__all__ = [
    "LoginPage",
    "ERROR_MESSAGE_FALLBACKS",
]
