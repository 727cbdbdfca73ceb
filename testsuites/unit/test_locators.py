import dataclasses

import pytest

from testsuites.ui_testing.framework.locators import LocatorExpr, LocatorKind, LocatorStrategy


@pytest.mark.parametrize(
    "raw, kind, value",
    [
        ("id=userID", LocatorKind.ID, "userID"),
        ("//button[contains(text(), 'Allow')]", LocatorKind.XPATH, "//button[contains(text(), 'Allow')]"),
        ("(//input)[1]", LocatorKind.XPATH, "(//input)[1]"),
        ("input[name='username']", LocatorKind.CSS, "input[name='username']"),
        ("  #loginBtn ", LocatorKind.CSS, "#loginBtn"),
    ],
)
def test_parse_shorthand(raw, kind, value):
    expr = LocatorExpr.parse(raw)
    assert expr.kind is kind
    assert expr.value == value


def test_parse_rejects_empty_and_passes_expr_through():
    with pytest.raises(ValueError):
        LocatorExpr.parse("   ")

    expr = LocatorExpr.xpath("//h1")
    assert LocatorExpr.parse(expr) is expr


def test_as_selector_uses_playwright_engines():
    assert LocatorExpr.css(".error").as_selector() == "css=.error"
    assert LocatorExpr.xpath("//h1").as_selector() == "xpath=//h1"
    assert LocatorExpr.by_id("userID").as_selector() == 'css=[id="userID"]'
    assert LocatorExpr.by_id('a"b').as_selector() == 'css=[id="a\\"b"]'


def test_candidates_are_primary_then_fallbacks_in_order():
    strategy = LocatorStrategy.of("password_input", "id=password", "input[type='password']", "//input[2]")

    names = [name for name, _ in strategy.candidates()]
    exprs = [expr for _, expr in strategy.candidates()]

    assert names == ["primary", "fallback_1", "fallback_2"]
    assert exprs == [
        LocatorExpr.by_id("password"),
        LocatorExpr.css("input[type='password']"),
        LocatorExpr.xpath("//input[2]"),
    ]


def test_strategy_is_immutable():
    strategy = LocatorStrategy("login_button", LocatorExpr.by_id("loginBtn"), [LocatorExpr.css("button")])

    assert isinstance(strategy.fallbacks, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        strategy.name = "other"


def test_strategy_requires_name_and_primary():
    with pytest.raises(ValueError):
        LocatorStrategy.of("", "id=userID")
    with pytest.raises(ValueError):
        LocatorStrategy("user_id_input", None)
