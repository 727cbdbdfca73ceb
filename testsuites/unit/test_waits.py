import pytest

from testsuites.ui_testing.framework.exceptions import WaitTimeoutError
from testsuites.ui_testing.framework.waits import (
    WaitCondition,
    WaitPolicy,
    document_ready,
    element_satisfies,
    wait_for_document_ready,
    wait_until,
)
from testsuites.unit.fakes import FakeDriver, FakeElement


def test_wait_until_returns_first_truthy_value(clock):
    results = iter([None, 0, "ready"])

    value = wait_until(lambda: next(results), timeout=5, poll_interval=0.5, clock=clock, sleep=clock.sleep)

    assert value == "ready"
    assert clock.now == pytest.approx(1.0)


def test_wait_until_times_out_on_virtual_clock(clock):
    with pytest.raises(WaitTimeoutError) as exc_info:
        wait_until(lambda: False, timeout=1.0, poll_interval=0.25, description="banner", clock=clock, sleep=clock.sleep)

    assert "banner" in str(exc_info.value)
    assert clock.now == pytest.approx(1.0)


def test_predicate_errors_are_retried_then_chained(clock):
    def predicate():
        raise RuntimeError("detached")

    with pytest.raises(WaitTimeoutError) as exc_info:
        wait_until(predicate, timeout=0.5, poll_interval=0.1, clock=clock, sleep=clock.sleep)

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_last_sleep_never_overshoots_deadline(clock):
    with pytest.raises(WaitTimeoutError):
        wait_until(lambda: False, timeout=1.0, poll_interval=0.375, clock=clock, sleep=clock.sleep)

    assert clock.sleeps == [0.375, 0.375, 0.25]


def test_element_conditions():
    visible_disabled = FakeElement(enabled=False)
    hidden = FakeElement(displayed=False)

    assert element_satisfies(visible_disabled, WaitCondition.VISIBLE)
    assert not element_satisfies(visible_disabled, WaitCondition.CLICKABLE)
    assert not element_satisfies(hidden, WaitCondition.VISIBLE)
    assert element_satisfies(FakeElement(), WaitCondition.CLICKABLE)


def test_document_ready(clock):
    driver = FakeDriver(ready_state="loading")
    assert not document_ready(driver)

    with pytest.raises(WaitTimeoutError):
        wait_for_document_ready(driver, timeout=1, clock=clock, sleep=clock.sleep)

    driver.ready_state = "complete"
    wait_for_document_ready(driver, timeout=1, clock=clock, sleep=clock.sleep)


def test_wait_policy_defaults_and_overrides():
    policy = WaitPolicy()

    assert policy.timeout == 10.0
    assert policy.condition is WaitCondition.CLICKABLE
    assert policy.with_condition(WaitCondition.VISIBLE).condition is WaitCondition.VISIBLE
    assert policy.with_timeout(3).timeout == 3
    assert policy.timeout == 10.0
