"""
================================================================================
Locator Strategies
================================================================================

Descriptive, immutable locator definitions.

A `LocatorStrategy` names one logical UI target (e.g. "password_input") and
lists a primary locator plus ordered fallbacks. Nothing here touches the
browser; resolution happens in `smart_locator.SmartLocator`.

Locator Priority Order (recommended):
    1. id / data-testid (most stable)
    2. name / placeholder attributes
    3. Generic CSS (type-based)
    4. XPath (last resort)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple, Union


class LocatorKind(str, Enum):
    """Selector syntaxes understood by the driver."""

    CSS = "css"
    XPATH = "xpath"
    ID = "id"


@dataclass(frozen=True)
class LocatorExpr:
    """
    A single element-finding expression.

    Attributes:
        kind: Selector syntax
        value: The raw selector / id value
    """
    kind: LocatorKind
    value: str

    @classmethod
    def css(cls, selector: str) -> "LocatorExpr":
        return cls(LocatorKind.CSS, selector)

    @classmethod
    def xpath(cls, expression: str) -> "LocatorExpr":
        return cls(LocatorKind.XPATH, expression)

    @classmethod
    def by_id(cls, element_id: str) -> "LocatorExpr":
        return cls(LocatorKind.ID, element_id)

    @classmethod
    def parse(cls, raw: Union[str, "LocatorExpr"]) -> "LocatorExpr":
        """
        Build an expression from shorthand.

        Rules:
            - `LocatorExpr` instances pass through unchanged
            - "id=foo" -> id lookup
            - strings starting with "/" or "(" -> XPath
            - anything else -> CSS selector

        Examples:
            >>> LocatorExpr.parse("//button[@type='submit']").kind
            <LocatorKind.XPATH: 'xpath'>
            >>> LocatorExpr.parse("input[name='username']").kind
            <LocatorKind.CSS: 'css'>
        """
        if isinstance(raw, LocatorExpr):
            return raw
        text = raw.strip()
        if not text:
            raise ValueError("Locator expression must not be empty")
        if text.startswith("id="):
            return cls.by_id(text[3:])
        if text.startswith("/") or text.startswith("("):
            return cls.xpath(text)
        return cls.css(text)

    def as_selector(self) -> str:
        """Render as a Playwright selector-engine string."""
        if self.kind is LocatorKind.XPATH:
            return f"xpath={self.value}"
        if self.kind is LocatorKind.ID:
            escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
            return f'css=[id="{escaped}"]'
        return f"css={self.value}"

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


@dataclass(frozen=True)
class LocatorStrategy:
    """
    Primary locator plus ordered fallbacks for one logical UI target.

    Attributes:
        name: Logical target identity used in logs and failure reasons
        primary: Preferred locator
        fallbacks: Alternatives tried in order when the primary fails
    """
    name: str
    primary: LocatorExpr
    fallbacks: Tuple[LocatorExpr, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("LocatorStrategy requires a name")
        if self.primary is None:
            raise ValueError(f"LocatorStrategy '{self.name}' requires a primary locator")
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "fallbacks", tuple(self.fallbacks))

    @classmethod
    def of(
        cls,
        name: str,
        primary: Union[str, LocatorExpr],
        *fallbacks: Union[str, LocatorExpr],
    ) -> "LocatorStrategy":
        """
        Convenience constructor accepting shorthand strings.

        Usage:
            >>> LocatorStrategy.of("user_id_input", "id=userID", "input[name='username']")
        """
        return cls(
            name=name,
            primary=LocatorExpr.parse(primary),
            fallbacks=tuple(LocatorExpr.parse(fb) for fb in fallbacks),
        )

    def candidates(self) -> Iterator[Tuple[str, LocatorExpr]]:
        """Yield (strategy_name, expr) pairs: primary first, then fallback_1..n."""
        yield "primary", self.primary
        for i, expr in enumerate(self.fallbacks, start=1):
            yield f"fallback_{i}", expr


__all__ = [
    "LocatorKind",
    "LocatorExpr",
    "LocatorStrategy",
]
