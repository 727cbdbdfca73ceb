# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Condition-based waiting for UI interactions.
#
# Key Features:
#   - Explicit-wait primitive (predicate + timeout + poll interval)
#   - Named element conditions (clickable, visible) and page readiness
#   - Injectable clock/sleep so tests can run on a virtual timeline
#
# Usage:
#   wait_until(lambda: element.is_displayed(), timeout=10, description="banner visible")
#   policy = WaitPolicy(timeout=5, condition=WaitCondition.VISIBLE)
#
# ================================================================================

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable

from loguru import logger

from .exceptions import WaitTimeoutError


# Fixed delay for ephemeral browser prompts to render. Whether a prompt will
# appear at all is unknowable before this elapses.
PROMPT_SETTLE_SECONDS = 2.0

# Upper bound for the post-reload document-ready wait.
RELOAD_SETTLE_TIMEOUT = 10.0

DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.25


class WaitCondition(str, Enum):
    """Interactive states an element or page must reach before an action."""

    CLICKABLE = "clickable"
    VISIBLE = "visible"
    PAGE_READY = "page ready"


@dataclass(frozen=True)
class WaitPolicy:
    """
    Configuration for explicit waits.

    Attributes:
        timeout: Total timeout in seconds
        condition: Condition that must hold before acting
        poll_interval: Delay between condition checks in seconds
    """
    timeout: float = DEFAULT_TIMEOUT
    condition: WaitCondition = WaitCondition.CLICKABLE
    poll_interval: float = DEFAULT_POLL_INTERVAL

    def with_condition(self, condition: WaitCondition) -> "WaitPolicy":
        return replace(self, condition=condition)

    def with_timeout(self, timeout: float) -> "WaitPolicy":
        return replace(self, timeout=timeout)


def wait_until(
    predicate: Callable[[], Any],
    timeout: float = DEFAULT_TIMEOUT,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    description: str = "condition",
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """
    Block until `predicate` returns a truthy value or the timeout elapses.

    Exceptions raised by the predicate are treated as "not yet" (the DOM may
    be mid-update); the last one is chained onto the timeout error.

    Args:
        predicate: Zero-argument callable checked repeatedly
        timeout: Total timeout in seconds
        poll_interval: Delay between checks in seconds
        description: Human-readable description for logging
        clock: Monotonic time source
        sleep: Sleep function

    Returns:
        The first truthy value returned by the predicate

    Raises:
        WaitTimeoutError: If the predicate never held within the timeout
    """
    deadline = clock() + timeout
    last_error = None
    attempts = 0

    while True:
        attempts += 1
        try:
            result = predicate()
            if result:
                if attempts > 1:
                    logger.debug(f"{description} satisfied after {attempts} checks")
                return result
        except Exception as e:
            last_error = e

        remaining = deadline - clock()
        if remaining <= 0:
            break
        sleep(min(poll_interval, remaining))

    message = f"Timed out after {timeout:g}s waiting for {description}"
    logger.debug(message)
    if last_error is not None:
        raise WaitTimeoutError(message) from last_error
    raise WaitTimeoutError(message)


def element_satisfies(element: Any, condition: WaitCondition) -> bool:
    """
    Check an element against a named condition.

    CLICKABLE means displayed and enabled; VISIBLE means displayed.
    PAGE_READY is a page-level condition and holds trivially for elements.
    """
    if condition is WaitCondition.CLICKABLE:
        return bool(element.is_displayed() and element.is_enabled())
    if condition is WaitCondition.VISIBLE:
        return bool(element.is_displayed())
    return True


def document_ready(driver: Any) -> bool:
    """Return True once the page reports `document.readyState == "complete"`."""
    return driver.execute_script("return document.readyState") == "complete"


def wait_for_document_ready(
    driver: Any,
    timeout: float = DEFAULT_TIMEOUT,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Wait for the current document to finish loading."""
    wait_until(
        lambda: document_ready(driver),
        timeout=timeout,
        poll_interval=poll_interval,
        description="document ready",
        clock=clock,
        sleep=sleep,
    )


__all__ = [
    "PROMPT_SETTLE_SECONDS",
    "RELOAD_SETTLE_TIMEOUT",
    "WaitCondition",
    "WaitPolicy",
    "wait_until",
    "element_satisfies",
    "document_ready",
    "wait_for_document_ready",
]
