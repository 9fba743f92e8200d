"""
Normalization helpers for raw GEDCOM values (names and places).
"""

from .names import split_name
from .places import Location, split_place

__all__ = [
    "Location",
    "split_name",
    "split_place",
]
