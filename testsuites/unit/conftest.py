import pytest

from testsuites.unit.fakes import FakeClock, FakeDriver


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()
