from .normalizer import MONTHS, UNKNOWN_YEAR, extract_year, normalize_date

__all__ = [
    "MONTHS",
    "UNKNOWN_YEAR",
    "extract_year",
    "normalize_date",
]
