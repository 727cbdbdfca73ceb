"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework with resilient element resolution.

Components:
    - locators: Locator expressions and per-target strategies
    - smart_locator: Primary + fallback element resolution
    - waits: Explicit-wait primitive and wait policies
    - element_actions: Resolve -> wait -> act with typed failures
    - transient_state: Best-effort browser prompt dismissal
    - page_base: Base page object
    - browser_manager: Browser session lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from .exceptions import (
    DriverError,
    ElementNotFoundError,
    InteractionTimeoutError,
    UIInteractionError,
    UnsupportedBrowserError,
    WaitTimeoutError,
)
from .locators import LocatorExpr, LocatorKind, LocatorStrategy
from .smart_locator import SmartLocator
from .waits import WaitCondition, WaitPolicy, wait_until
from .element_actions import ElementActions
from .transient_state import PromptOutcome, TransientStateHandler, dismiss_transient_prompts
from .page_base import BasePage

__all__ = [
    "DriverError",
    "ElementNotFoundError",
    "InteractionTimeoutError",
    "UIInteractionError",
    "UnsupportedBrowserError",
    "WaitTimeoutError",
    "LocatorExpr",
    "LocatorKind",
    "LocatorStrategy",
    "SmartLocator",
    "WaitCondition",
    "WaitPolicy",
    "wait_until",
    "ElementActions",
    "PromptOutcome",
    "TransientStateHandler",
    "dismiss_transient_prompts",
    "BasePage",
]
