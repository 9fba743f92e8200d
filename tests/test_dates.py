# tests/test_dates.py

from __future__ import annotations

import pytest

from gedcom_import.dates.normalizer import UNKNOWN_YEAR, extract_year, normalize_date


def test_full_date():
    assert normalize_date("01 JAN 1900") == "1900-01-01"


def test_single_digit_day_is_padded():
    assert normalize_date("1 DEC 1970") == "1970-12-01"


def test_lowercase_month():
    assert normalize_date("15 mar 1905") == "1905-03-15"


def test_extra_whitespace():
    assert normalize_date("  10   JUN  1930 ") == "1930-06-10"


@pytest.mark.parametrize(
    "raw",
    [
        "01 XYZ 1900",
        "JAN 1900",
        "1900",
        "ABT 1900",
        "BET 1 JAN 1800 AND 2 FEB 1810",
        "31 FEB 1900",
        "AA JAN 1900",
        "01 JAN YYYY",
        "",
        None,
    ],
)
def test_unnormalizable_dates_are_none(raw):
    assert normalize_date(raw) is None


def test_extract_year_first_four_digits():
    assert extract_year("ABT 1850") == "1850"
    assert extract_year("BET 1800 AND 1810") == "1800"


def test_extract_year_sentinel():
    assert extract_year("Unknown") == UNKNOWN_YEAR
    assert extract_year("") == UNKNOWN_YEAR
    assert extract_year(None) == UNKNOWN_YEAR
