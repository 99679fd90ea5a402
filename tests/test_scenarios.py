"""End-to-end usage through the public ``castor`` surface."""

from __future__ import annotations

import math

import pytest

import castor
from castor import option, result
from tests.helpers import divide

pytestmark = pytest.mark.integration


def square(x: float) -> float:
    return x * x


def sqrt(x: float) -> castor.Result[float, str]:
    if x < 0:
        return result.err("Cannot square root negative number")
    return result.ok(math.sqrt(x))


def test_divide_success_unwraps() -> None:
    outcome = divide(10, 2)
    assert outcome == castor.Ok(5)
    assert outcome.unwrap() == 5


def test_divide_by_zero_falls_back() -> None:
    outcome = divide(10, 0)
    assert outcome == castor.Err("Cannot divide by zero")
    assert math.isnan(outcome.unwrap_or(math.nan))


def test_map_then_and_then() -> None:
    assert result.ok(5).map(square).and_then(lambda x: divide(x, 5)).unwrap() == 5


def test_map_err_is_hidden_by_unwrap_or() -> None:
    failed = result.err("boom").map_err(lambda e: e + "!!")
    assert failed.unwrap_or("default") == "default"
    assert castor.assert_err(failed).error == "boom!!"


def test_unwrap_err_raises() -> None:
    with pytest.raises(castor.UnwrapError, match="^Cannot unwrap Err$"):
        result.err("x").unwrap()


def test_option_and_then_to_none() -> None:
    assert option.some(5).and_then(lambda _: option.none()).unwrap_or("default") == (
        "default"
    )


def test_sqrt_pipeline() -> None:
    assert divide(10, 2).and_then(sqrt).map(round).unwrap() == 2
    assert divide(-8, 2).and_then(sqrt) == castor.Err(
        "Cannot square root negative number"
    )


def test_chaining_example() -> None:
    rendered = (
        result.ok(5)
        .map(square)
        .and_then(lambda x: divide(x, 2))
        .map_err(lambda e: e + "!!")
        .map(str)
        .unwrap_or("default")
    )
    assert rendered == "12.5"


def test_conversion_between_containers() -> None:
    lookup = {"a": 1}

    def find(key: str) -> castor.Option[int]:
        return option.some(lookup[key]) if key in lookup else option.none()

    assert find("a").to_result("missing").map(lambda v: v + 1) == castor.Ok(2)
    assert find("b").to_result("missing") == castor.Err("missing")
    assert divide(1, 0).to_option().unwrap_or(-1) == -1


def test_failures_reach_caller_boundary() -> None:
    """Nothing in the containers swallows the signal; the caller sees it."""

    def handler() -> str:
        try:
            return str(divide(1, 0).unwrap())
        except castor.CastorError as exc:
            return f"caught: {exc}"

    assert handler() == "caught: Cannot unwrap Err"
