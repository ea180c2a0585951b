from __future__ import annotations

import pytest

from netflix_fun.utils.number_format import format_number, format_percent_change, safe_number_format
from netflix_fun.utils.time import format_time_ago, minutes_since_creation


@pytest.mark.parametrize(
    "value, expected",
    [
        (2_500_000_000, "2.5B"),
        (1_000_000_000, "1.0B"),
        (1_200_000, "1.2M"),
        (450_000, "450.0K"),
        (1_000, "1.0K"),
        (999, "999"),
        (12.5, "12.5"),
        (0, "0"),
        (0.0, "0"),
    ],
)
def test_format_number_suffixes(value, expected):
    assert format_number(value) == expected


def test_format_number_suffix_thresholds():
    for value in (1e9, 7.3e9, 4.2e12):
        assert format_number(value).endswith("B")
    for value in (1e6, 5.5e6, 999e6):
        assert format_number(value).endswith("M")
    for value in (1e3, 42_000, 999_000):
        assert format_number(value).endswith("K")


@pytest.mark.parametrize("value", [None, float("nan"), "abc", True, {}])
def test_format_number_missing(value):
    assert format_number(value) == "N/A"


def test_safe_number_format():
    assert safe_number_format("12.3456789", 2) == "12.35"
    assert safe_number_format(0.5) == "0.50000000"
    assert safe_number_format(3, 0) == "3"
    assert safe_number_format(None) == "N/A"
    assert safe_number_format("not a number") == "N/A"
    assert safe_number_format(float("nan"), 2) == "N/A"


def test_numeric_prefix_of_strings_is_used():
    assert safe_number_format("12abc", 2) == "12.00"
    assert format_number(" 1500 tokens") == "1.5K"
    assert format_percent_change("-4.5%") == "-4.50%"
    assert safe_number_format(".5x", 1) == "0.5"
    assert safe_number_format("abc12") == "N/A"


def test_format_percent_change():
    assert format_percent_change(42.8) == "+42.80%"
    assert format_percent_change("-3.2") == "-3.20%"
    assert format_percent_change(0) == "0.00%"
    assert format_percent_change(None) == "N/A"
    assert format_percent_change(None, missing="") == ""


def test_minutes_since_creation_floors():
    now = 1_700_000_000_000
    assert minutes_since_creation(now - 90 * 60_000, now) == 90
    assert minutes_since_creation(now - 90 * 60_000 - 59_000, now) == 90
    assert minutes_since_creation(now, now) == 0


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "0m ago"),
        (59, "59m ago"),
        (90, "1h 30m ago"),
        (24 * 60 - 1, "23h 59m ago"),
        (25 * 60, "1d 1h ago"),
        (3 * 24 * 60, "3d 0h ago"),
    ],
)
def test_format_time_ago(minutes, expected):
    assert format_time_ago(minutes) == expected
