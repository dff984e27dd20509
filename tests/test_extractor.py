"""Test `_Price` attribute parsing and first-match lookup."""

from decimal import Decimal

import pytest

from cart_price_transform.src.extractor import extract_target_price, parse_price_value
from cart_price_transform.src.models import Attribute


@pytest.mark.parametrize("value, expected", [
    ("$600", Decimal("600")),
    ("$19.99", Decimal("19.99")),
    ("$0", Decimal("0")),
    ("$.5", Decimal("0.5")),
    ("$5.", Decimal("5")),
    ("$-5", Decimal("-5")),
    ("$+5", Decimal("5")),
    ("$1e3", Decimal("1000")),
])
def test_parse_valid_values(value, expected):
    """Dollar-prefixed plain decimals parse."""
    assert parse_price_value(value) == expected


@pytest.mark.parametrize("value", [
    "600",          # no leading $
    "abc",
    "$",            # empty remainder
    "$abc",
    "$$600",        # second $
    "$600$",
    "$ 600",        # whitespace
    "$600 ",
    "$600\n",       # trailing newline
    "$600\r\n",
    "$600\t",
    "$\n600",
    "$٦٠٠",    # Arabic-Indic digits
    "$６００",    # full-width digits
    "$6٠٠",         # mixed ASCII and non-ASCII digits
    "$1,000.00",    # thousands separator
    "$19,99",       # comma decimal separator
    "$1_000",
    "$NaN",
    "$inf",
    "$Infinity",
    "",
    "USD 600",
])
def test_parse_malformed_values(value):
    """Malformed values yield None instead of raising."""
    assert parse_price_value(value) is None


def test_extract_from_absent_or_empty_attributes():
    """No attributes at all means no target price."""
    assert extract_target_price(None) is None
    assert extract_target_price([]) is None


def test_extract_ignores_other_keys():
    """Only the `_Price` key is consulted."""
    attributes = [
        Attribute("Price", "$10"),
        Attribute("_price", "$20"),
        Attribute("_Engraving", "Hello"),
    ]
    assert extract_target_price(attributes) is None


def test_extract_first_match_wins():
    """Duplicate keys resolve to the first usable entry."""
    attributes = [
        Attribute("_Color", "red"),
        Attribute("_Price", "$600"),
        Attribute("_Price", "$300"),
    ]
    assert extract_target_price(attributes) == Decimal("600")


def test_extract_skips_malformed_duplicate():
    """A malformed earlier `_Price` does not hide a valid later one."""
    attributes = [
        Attribute("_Price", "abc"),
        Attribute("_Price", "$450"),
    ]
    assert extract_target_price(attributes) == Decimal("450")


def test_extract_only_malformed():
    """A lone malformed `_Price` yields nothing."""
    assert extract_target_price([Attribute("_Price", "abc")]) is None
