"""
================================================================================
UI Framework Exceptions
================================================================================

Uniform failure surface for element resolution and interaction.

Callers (Page Objects, tests) only ever see these types; raw Playwright
errors are wrapped in `DriverError` before they leave the framework.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional


class UIInteractionError(Exception):
    """Base class for every failure raised by the UI framework."""

    @property
    def reason(self) -> str:
        """Human-readable failure reason for test reports."""
        return str(self)


class ElementNotFoundError(UIInteractionError):
    """Raised when no locator of a strategy matched (primary and fallbacks)."""

    def __init__(self, target: str, attempts: Optional[List[str]] = None):
        self.target = target
        self.attempts = list(attempts or [])
        message = f"{target} was not found with any locator strategy"
        if self.attempts:
            message += ":\n" + "\n".join(f"  - {a}" for a in self.attempts)
        super().__init__(message)

    @property
    def reason(self) -> str:
        return f"{self.target} was not found with any locator strategy"


class InteractionTimeoutError(UIInteractionError):
    """Raised when a resolved element never reached the required condition."""

    def __init__(self, target: str, condition: str, timeout: float):
        self.target = target
        self.condition = condition
        self.timeout = timeout
        super().__init__(
            f"{target} did not become {condition} within {timeout:g}s"
        )


class DriverError(UIInteractionError):
    """Raised when the automation library failed during an otherwise valid action."""

    def __init__(self, target: str, action: str, cause: BaseException):
        self.target = target
        self.action = action
        self.cause = cause
        super().__init__(
            f"{action} on {target} failed: {type(cause).__name__}: {cause}"
        )


class WaitTimeoutError(UIInteractionError):
    """Raised by the explicit-wait primitive when its deadline passes."""
    pass


class UnsupportedBrowserError(UIInteractionError):
    """Raised at session setup for a browser identity outside the supported set."""
    pass


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


__all__ = [
    "UIInteractionError",
    "ElementNotFoundError",
    "InteractionTimeoutError",
    "DriverError",
    "WaitTimeoutError",
    "UnsupportedBrowserError",
    "ConfigurationError",
]
