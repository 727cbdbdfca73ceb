"""
Stub browser for framework unit tests.

`FakeDriver` is an in-memory DOM keyed by locator expression. It records
every lookup so tests can assert which locators were evaluated. Time is
virtual: `FakeClock.sleep` advances `FakeClock.now` instantly.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from testsuites.ui_testing.framework.locators import LocatorExpr


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeElement:
    def __init__(
        self,
        clock: Optional[FakeClock] = None,
        text: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
        displayed: bool = True,
        enabled: bool = True,
        ready_at: float = 0.0,
        on_click: Optional[Callable[["FakeElement"], None]] = None,
        fail_on: tuple = (),
    ):
        self.clock = clock
        self.text = text
        self.attributes = dict(attributes or {})
        self.displayed = displayed
        self.enabled = enabled
        self.ready_at = ready_at
        self.on_click = on_click
        self.fail_on = set(fail_on)
        self.clicks = 0

    def _check(self, action: str) -> None:
        if action in self.fail_on:
            raise RuntimeError(f"stale element during {action}")

    def _ready(self) -> bool:
        return self.clock is None or self.clock.now >= self.ready_at

    def click(self) -> None:
        self._check("click")
        self.clicks += 1
        if self.on_click:
            self.on_click(self)

    def clear(self) -> None:
        self._check("clear")
        self.attributes["value"] = ""

    def send_keys(self, text: str) -> None:
        self._check("send_keys")
        self.attributes["value"] = self.attributes.get("value", "") + text

    def get_attribute(self, name: str) -> Optional[str]:
        self._check("get_attribute")
        return self.attributes.get(name)

    def get_text(self) -> str:
        self._check("get_text")
        if self.text is not None:
            return self.text
        return self.attributes.get("value", "")

    def is_enabled(self) -> bool:
        return self.enabled and self._ready()

    def is_displayed(self) -> bool:
        return self.displayed and self._ready()


class FakeDriver:
    def __init__(
        self,
        elements: Optional[Dict[Union[str, LocatorExpr], FakeElement]] = None,
        broken: tuple = (),
        ready_state: str = "complete",
        script_result: Any = True,
    ):
        self.elements: Dict[LocatorExpr, FakeElement] = {
            LocatorExpr.parse(key): el for key, el in (elements or {}).items()
        }
        self.broken = {LocatorExpr.parse(key) for key in broken}
        self.ready_state = ready_state
        self.script_result = script_result
        self.find_calls: List[LocatorExpr] = []
        self.scripts: List[str] = []
        self.refreshes = 0
        self.visited: List[str] = []
        self.title = "Login"
        self.current_url = "http://localhost:3000/login"

    def add(self, key: Union[str, LocatorExpr], element: FakeElement) -> FakeElement:
        self.elements[LocatorExpr.parse(key)] = element
        return element

    def remove(self, key: Union[str, LocatorExpr]) -> None:
        self.elements.pop(LocatorExpr.parse(key), None)

    def find_element(self, expr: LocatorExpr) -> Optional[FakeElement]:
        self.find_calls.append(expr)
        if expr in self.broken:
            raise RuntimeError(f"invalid selector: {expr}")
        return self.elements.get(expr)

    def get(self, url: str) -> None:
        self.visited.append(url)
        self.current_url = url

    def refresh(self) -> None:
        self.refreshes += 1

    def maximize_window(self) -> None:
        pass

    def set_timeouts(self, implicit_wait: float, page_load_timeout: float) -> None:
        pass

    def delete_all_cookies(self) -> None:
        pass

    def execute_script(self, script: str, *args: Any) -> Any:
        self.scripts.append(script)
        if "document.readyState" in script:
            return self.ready_state
        return self.script_result

    def screenshot(self) -> bytes:
        return b"\x89PNG"

    def quit(self) -> None:
        pass


class ExplodingDriver:
    """Every call raises."""

    def __getattr__(self, name: str) -> Any:
        raise RuntimeError(f"driver unavailable: {name}")
