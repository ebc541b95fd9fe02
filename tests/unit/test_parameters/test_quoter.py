"""Tests for rendering individual bind values."""

from datetime import date
from decimal import Decimal
from enum import IntEnum
from typing import Any
from unittest.mock import Mock

import pytest

from sqlbind.exceptions import InvalidQuoteResultError
from sqlbind.parameters import Parameter, ParameterQuoter, QuotedFragment, interpolate


@pytest.fixture
def quoter() -> ParameterQuoter:
    return ParameterQuoter(lambda value: str(value).replace("'", "''"))


def test_null(quoter: ParameterQuoter) -> None:
    fragment = quoter.quote(None)

    assert fragment.text == "NULL"
    assert fragment.length == 4


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (42, "42"),
        (-17, "-17"),
        (10**20, "100000000000000000000"),
        (3.14, "3.14"),
        (-0.5, "-0.5"),
        (1e20, "1e+20"),
        (1.1e-2, "0.011"),
    ],
)
def test_numbers_are_unquoted(quoter: ParameterQuoter, value: Any, expected: str) -> None:
    assert quoter.quote(value).text == expected


@pytest.mark.parametrize("value", [0, 7, -123456789, 0.1, 2.5e-308, 1.7976931348623157e308, 1 / 3])
def test_numbers_parse_back_to_the_same_value(quoter: ParameterQuoter, value: Any) -> None:
    text = quoter.quote(value).text
    assert type(value)(text) == value


@pytest.mark.parametrize("value", [None, 5, 2.75])
def test_null_and_number_quoting_is_stable(quoter: ParameterQuoter, value: Any) -> None:
    assert quoter.quote(value) == quoter.quote(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("O'Brien", "'O''Brien'"),
        ("", "''"),
        (True, "'True'"),
        (Decimal("1.50"), "'1.50'"),
        (date(2012, 9, 22), "'2012-09-22'"),
        (float("nan"), "'nan'"),
        (float("inf"), "'inf'"),
    ],
)
def test_other_values_are_quoted(quoter: ParameterQuoter, value: Any, expected: str) -> None:
    assert quoter.quote(value).text == expected


def test_external_quote_receives_raw_value() -> None:
    external_quote = Mock(return_value="escaped")
    quoter = ParameterQuoter(external_quote)

    fragment = quoter.quote(Parameter.other(12))

    external_quote.assert_called_once_with(12)
    assert fragment == QuotedFragment("'escaped'")
    assert fragment.length == len("'escaped'")


@pytest.mark.parametrize("result", [None, b"bytes", 1, ["x"]])
def test_non_text_quote_result(result: Any) -> None:
    quoter = ParameterQuoter(lambda value: result)

    with pytest.raises(InvalidQuoteResultError) as exc_info:
        quoter.quote("x", 3)

    assert exc_info.value.position == 3
    assert exc_info.value.result == result


def test_external_quote_errors_propagate() -> None:
    quoter = ParameterQuoter(Mock(side_effect=ValueError("boom")))

    with pytest.raises(ValueError, match="boom"):
        quoter.quote("x")


def test_quote_all(quoter: ParameterQuoter) -> None:
    fragments, total = quoter.quote_all([None, 12, "a'b"])

    assert [fragment.text for fragment in fragments] == ["NULL", "12", "'a''b'"]
    assert total == 4 + 2 + 6


def test_quote_all_reports_position() -> None:
    quoter = ParameterQuoter(lambda value: 1 if value == "bad" else value)

    with pytest.raises(InvalidQuoteResultError) as exc_info:
        quoter.quote_all(["good", None, "bad"])

    assert exc_info.value.position == 2


class ReprFloat(float):
    def __repr__(self) -> str:
        return f"ReprFloat({float(self)})"


class ReprInt(int):
    def __repr__(self) -> str:
        return f"ReprInt({int(self)})"


class Color(IntEnum):
    RED = 1


@pytest.mark.parametrize(
    ("value", "expected"),
    [(ReprFloat(1.5), "1.5"), (ReprInt(42), "42"), (Color.RED, "1")],
)
def test_number_subclasses_render_as_plain_literals(quoter: ParameterQuoter, value: Any, expected: str) -> None:
    assert quoter.quote(value).text == expected


def test_float_subclass_round_trips_through_interpolation() -> None:
    assert interpolate("SELECT ?", [ReprFloat(0.1)], quote=str) == "SELECT 0.1"
