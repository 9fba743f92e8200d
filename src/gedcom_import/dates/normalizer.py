# src/gedcom_import/dates/normalizer.py

from __future__ import annotations

import re
from datetime import date as Date
from typing import Optional


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

UNKNOWN_YEAR = "Unknown"

_YEAR_RE = re.compile(r"\d{4}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize_date(raw: Optional[str]) -> Optional[str]:
    """
    Convert a GEDCOM "DD MON YYYY" date to ISO "YYYY-MM-DD".

    Total: anything else (qualifiers, partial dates, unknown months,
    impossible calendar days, empty input) returns None.

        normalize_date("01 JAN 1900") -> "1900-01-01"
        normalize_date("1 jan 1900")  -> "1900-01-01"
        normalize_date("01 XYZ 1900") -> None
        normalize_date("JAN 1900")    -> None
    """
    if not raw:
        return None

    parts = str(raw).split()
    if len(parts) != 3:
        return None

    day_s, month_s, year_s = parts
    month = MONTHS.get(month_s.upper())
    if month is None or not day_s.isdigit() or not year_s.isdigit():
        return None

    try:
        return Date(int(year_s), month, int(day_s)).isoformat()
    except ValueError:
        return None


def extract_year(raw: Optional[str]) -> str:
    """
    First 4-digit run in ``raw`` for display and grouping, else UNKNOWN_YEAR.
    Never used for stored dates.
    """
    if not raw:
        return UNKNOWN_YEAR
    match = _YEAR_RE.search(str(raw))
    return match.group(0) if match else UNKNOWN_YEAR
