"""
================================================================================
Browser Automation Driver Contract
================================================================================

Structural interfaces the framework depends on.

The resolver, interaction wrapper and transient-state handler only talk to
these protocols. `PlaywrightDriver` is the production implementation; unit
tests use an in-memory fake DOM.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from .locators import LocatorExpr


class ElementHandle(Protocol):
    """A live UI element. Never cached beyond the operation that resolved it."""

    def click(self) -> None: ...

    def clear(self) -> None: ...

    def send_keys(self, text: str) -> None: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def get_text(self) -> str: ...

    def is_enabled(self) -> bool: ...

    def is_displayed(self) -> bool: ...


class BrowserDriver(Protocol):
    """One browser session (single page)."""

    def find_element(self, expr: LocatorExpr) -> Optional[ElementHandle]:
        """Return the first match for `expr` or None. May raise on invalid selectors."""
        ...

    def get(self, url: str) -> None: ...

    def refresh(self) -> None: ...

    def maximize_window(self) -> None: ...

    def set_timeouts(self, implicit_wait: float, page_load_timeout: float) -> None: ...

    def delete_all_cookies(self) -> None: ...

    def execute_script(self, script: str, *args: Any) -> Any: ...

    def screenshot(self) -> bytes: ...

    @property
    def title(self) -> str: ...

    @property
    def current_url(self) -> str: ...

    def quit(self) -> None: ...


__all__ = [
    "ElementHandle",
    "BrowserDriver",
]
