import math

import pytest

from fractol.atod import parse_double


@pytest.mark.parametrize(
    "text, expected",
    [("1.5", 1.5), ("-0.8", -0.8), ("0.285", 0.285), ("+3.25", 3.25), ("-0.4", -0.4)],
)
def test_values_with_separator(text, expected):
    assert parse_double(text) == pytest.approx(expected)


@pytest.mark.parametrize("number", ["0.5", "1.25", "-2.75", "0.01", "-0.7269"])
def test_comma_matches_dot(number):
    assert parse_double(number.replace(".", ",")) == parse_double(number)


def test_leading_whitespace_is_skipped():
    assert parse_double(" \t\n-0.5") == parse_double("-0.5")


def test_trailing_text_is_ignored():
    assert parse_double("0.75xyz") == parse_double("0.75")


def test_trailing_separator_gives_whole_number():
    assert parse_double("3.") == 3.0


def test_fraction_only():
    assert parse_double(".5") == pytest.approx(0.5)


def test_integer_digits_are_reread_without_separator():
    assert parse_double("12") == pytest.approx(12.12)


def test_zero_without_separator_stays_zero():
    assert parse_double("0") == 0.0


def test_no_digits_gives_zero():
    assert parse_double("abc") == 0.0
    assert parse_double("") == 0.0


def test_lone_minus_gives_negative_zero():
    result = parse_double("-")
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


@pytest.mark.parametrize("number", ["0.3", "1.75", "0.123", "2.5"])
def test_sign_is_symmetric(number):
    assert parse_double("-" + number) == -parse_double(number)