"""
================================================================================
Smart Locator
================================================================================

Element resolution with ordered fallback strategies:
    - Primary locator first; fallbacks only when it fails
    - Single pass, no implicit waiting (waits live in ElementActions)
    - Usage analytics for locator maintenance

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from .driver import BrowserDriver, ElementHandle
from .exceptions import ElementNotFoundError
from .locators import LocatorStrategy


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        element_name: Logical target name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Resolves a `LocatorStrategy` against the live page.

    The returned handle is valid for the calling operation only. Every
    interaction resolves again because the DOM may change between steps.

    Usage:
        >>> smart = SmartLocator(driver)
        >>> element = smart.resolve(LocatorStrategy.of("login_button", "id=loginBtn"))
    """

    def __init__(self, driver: BrowserDriver):
        """
        Initialize SmartLocator with a driver session.

        Args:
            driver: Browser session to query
        """
        self.driver = driver
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def resolve(self, strategy: LocatorStrategy) -> ElementHandle:
        """
        Locate the element for `strategy`.

        Tries the primary locator, then each fallback in declared order, and
        returns the first match. A driver exception during lookup counts as a
        miss for that locator.

        Args:
            strategy: Locator strategy of the logical target

        Returns:
            Handle to the matched element

        Raises:
            ElementNotFoundError: When every locator failed
        """
        errors = []

        for strategy_name, expr in strategy.candidates():
            try:
                element = self.driver.find_element(expr)
            except Exception as e:
                errors.append(f"{strategy_name}: {expr} -> {str(e)[:80]}")
                continue

            if element is None:
                errors.append(f"{strategy_name}: {expr} -> no match")
                continue

            self._record(strategy, strategy_name, str(expr))
            return element

        logger.debug(
            f"All locators failed for '{strategy.name}':\n"
            + "\n".join(f"  - {err}" for err in errors)
        )
        raise ElementNotFoundError(strategy.name, errors)

    def exists(self, strategy: LocatorStrategy) -> bool:
        """Return True if any locator of `strategy` currently matches."""
        try:
            self.resolve(strategy)
            return True
        except ElementNotFoundError:
            return False

    def _record(self, strategy: LocatorStrategy, strategy_name: str, selector: str) -> None:
        used_fallback = strategy_name != "primary"
        health = LocatorHealth(
            element_name=strategy.name,
            primary_selector=str(strategy.primary),
            used_fallback=used_fallback,
            fallback_name=strategy_name if used_fallback else None,
            fallback_selector=selector if used_fallback else None,
        )
        self._health_records.append(health)

        if used_fallback:
            logger.warning(
                f"⚠️ Element '{strategy.name}' used fallback: "
                f"{strategy_name} -> {selector}"
            )
            self._fallback_used[strategy.name] = health
        else:
            logger.debug(f"✅ Element '{strategy.name}' found: {selector}")

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists targets whose primary locator failed at least once
        (maintenance candidates).

        Returns:
            Formatted health report string
        """
        if not self._fallback_used:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "LocatorHealth",
]
