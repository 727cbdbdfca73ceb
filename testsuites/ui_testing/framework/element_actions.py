# ================================================================================
# Element Actions Module
# ================================================================================
#
# Resolve -> wait -> act, with a uniform error surface.
#
# Key Features:
#   - Fresh resolution for every interaction (no cached handles)
#   - Explicit wait gating (clickable / visible) before each action
#   - Driver exceptions re-raised as DriverError
#   - Allure step integration
#
# Failure contract:
#   ElementNotFoundError     no locator matched (propagated unchanged)
#   InteractionTimeoutError  element found, condition never held
#   DriverError              automation library raised during the action
#
# ================================================================================

import time
from typing import Any, Callable, Iterable, Optional

import allure
from loguru import logger

from .driver import BrowserDriver, ElementHandle
from .exceptions import (
    DriverError,
    ElementNotFoundError,
    InteractionTimeoutError,
    WaitTimeoutError,
)
from .locators import LocatorExpr, LocatorStrategy
from .smart_locator import SmartLocator
from .waits import WaitCondition, WaitPolicy, element_satisfies, wait_until


SENSITIVE_MARKERS = ("password", "secret", "token")


def _mask(strategy: LocatorStrategy, value: str) -> str:
    if any(marker in strategy.name.lower() for marker in SENSITIVE_MARKERS):
        return "*" * len(value)
    return value


class ElementActions:
    """
    Interaction wrapper used by Page Objects.

    Every method takes the target's `LocatorStrategy`, resolves it through
    `SmartLocator`, waits for the policy condition, then performs the action.
    Resolution and waiting happen once per call; retries belong to callers.

    Example:
        actions = ElementActions(driver)
        actions.type_text(USER_ID, "demo_user")
        actions.click(LOGIN_BUTTON)
    """

    def __init__(
        self,
        driver: BrowserDriver,
        policy: Optional[WaitPolicy] = None,
        resolver: Optional[SmartLocator] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize ElementActions.

        Args:
            driver: Browser session
            policy: Default wait policy (10s, clickable)
            resolver: SmartLocator to use (created for `driver` if omitted)
            clock: Monotonic time source for waits
            sleep: Sleep function for waits
        """
        self.driver = driver
        self.policy = policy or WaitPolicy()
        self.resolver = resolver or SmartLocator(driver)
        self._clock = clock
        self._sleep = sleep

    # =========================================================================
    # Core protocol
    # =========================================================================

    def acquire(
        self,
        strategy: LocatorStrategy,
        policy: Optional[WaitPolicy] = None,
        condition: Optional[WaitCondition] = None,
    ) -> ElementHandle:
        """
        Resolve `strategy` and block until the wait condition holds.

        Args:
            strategy: Target locator strategy
            policy: Wait policy override
            condition: Condition override (applied on top of the policy)

        Returns:
            Element handle ready for the action

        Raises:
            ElementNotFoundError: No locator matched
            InteractionTimeoutError: Condition did not hold within the timeout
        """
        policy = policy or self.policy
        if condition is not None:
            policy = policy.with_condition(condition)

        element = self.resolver.resolve(strategy)

        try:
            wait_until(
                lambda: element_satisfies(element, policy.condition),
                timeout=policy.timeout,
                poll_interval=policy.poll_interval,
                description=f"{strategy.name} to be {policy.condition.value}",
                clock=self._clock,
                sleep=self._sleep,
            )
        except WaitTimeoutError as e:
            raise InteractionTimeoutError(
                strategy.name, policy.condition.value, policy.timeout
            ) from e

        return element

    def _perform(
        self,
        strategy: LocatorStrategy,
        action: str,
        fn: Callable[[ElementHandle], Any],
        policy: Optional[WaitPolicy] = None,
        condition: Optional[WaitCondition] = None,
    ) -> Any:
        element = self.acquire(strategy, policy=policy, condition=condition)
        try:
            return fn(element)
        except Exception as e:
            logger.error(f"{action} failed on '{strategy.name}': {e}")
            raise DriverError(strategy.name, action, e) from e

    # =========================================================================
    # Mutating actions
    # =========================================================================

    def type_text(
        self,
        strategy: LocatorStrategy,
        text: str,
        policy: Optional[WaitPolicy] = None,
    ) -> None:
        """
        Replace the field's content with `text`.

        The field is cleared first, so typing twice leaves the second value.
        """
        shown = _mask(strategy, text)
        with allure.step(f"Type into {strategy.name}: {shown}"):
            logger.info(f"Typing into {strategy.name}: '{shown[:50]}'")

            def _type(element: ElementHandle) -> None:
                element.clear()
                element.send_keys(text)

            self._perform(strategy, "type", _type, policy=policy)

    def click(
        self,
        strategy: LocatorStrategy,
        policy: Optional[WaitPolicy] = None,
    ) -> None:
        """Click the element once it is clickable."""
        with allure.step(f"Click: {strategy.name}"):
            logger.info(f"Clicking element: {strategy.name}")
            self._perform(strategy, "click", lambda el: el.click(), policy=policy)
            logger.debug(f"Successfully clicked: {strategy.name}")

    def clear(
        self,
        strategy: LocatorStrategy,
        policy: Optional[WaitPolicy] = None,
    ) -> None:
        """Clear an input field."""
        with allure.step(f"Clear: {strategy.name}"):
            self._perform(strategy, "clear", lambda el: el.clear(), policy=policy)

    # =========================================================================
    # Read operations
    # =========================================================================

    def get_text(
        self,
        strategy: LocatorStrategy,
        policy: Optional[WaitPolicy] = None,
    ) -> str:
        """Return the visible text of the element."""
        text = self._perform(
            strategy, "get_text", lambda el: el.get_text(),
            policy=policy, condition=WaitCondition.VISIBLE,
        )
        logger.debug(f"Got text from {strategy.name}: '{text}'")
        return text or ""

    def get_attribute(
        self,
        strategy: LocatorStrategy,
        attribute: str,
        policy: Optional[WaitPolicy] = None,
    ) -> Optional[str]:
        """Return an attribute value (None when the attribute is absent)."""
        value = self._perform(
            strategy, f"get_attribute({attribute})",
            lambda el: el.get_attribute(attribute),
            policy=policy, condition=WaitCondition.VISIBLE,
        )
        logger.debug(f"Got attribute {attribute} from {strategy.name}: '{value}'")
        return value

    def is_enabled(
        self,
        strategy: LocatorStrategy,
        policy: Optional[WaitPolicy] = None,
    ) -> bool:
        """
        Return the element's enabled state.

        Waits for visibility only; a disabled element is a valid answer, not
        a timeout.
        """
        return bool(self._perform(
            strategy, "is_enabled", lambda el: el.is_enabled(),
            policy=policy, condition=WaitCondition.VISIBLE,
        ))

    def is_displayed(self, strategy: LocatorStrategy) -> bool:
        """Return True if the element resolves and is displayed right now."""
        try:
            element = self.resolver.resolve(strategy)
            return bool(element.is_displayed())
        except ElementNotFoundError:
            return False
        except Exception as e:
            raise DriverError(strategy.name, "is_displayed", e) from e

    def read_message(
        self,
        strategy: LocatorStrategy,
        generic_fallbacks: Iterable[LocatorExpr] = (),
        policy: Optional[WaitPolicy] = None,
    ) -> str:
        """
        Read a message element (error banner, toast) that may legitimately be absent.

        Tries `strategy` with a visibility wait first. If that fails for any
        reason, each generic locator is tried once without waiting and the
        first displayed match wins. Returns "" when nothing is found.
        """
        try:
            return self.get_text(
                strategy, policy=(policy or self.policy).with_condition(WaitCondition.VISIBLE)
            )
        except (ElementNotFoundError, InteractionTimeoutError, DriverError) as e:
            logger.debug(f"Primary message lookup for '{strategy.name}' failed: {e.reason}")

        for expr in generic_fallbacks:
            try:
                element = self.driver.find_element(expr)
                if element is not None and element.is_displayed():
                    text = element.get_text() or ""
                    logger.debug(f"Message for '{strategy.name}' found via {expr}: '{text}'")
                    return text
            except Exception as e:
                logger.debug(f"Generic message locator {expr} failed: {e}")

        return ""


__all__ = [
    "ElementActions",
]
