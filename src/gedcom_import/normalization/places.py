from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    city: str
    country: str = ""


def split_place(raw: Optional[str]) -> Optional[Location]:
    """
    Split a comma-separated PLAC value: the first jurisdiction is the city,
    everything after it is kept together as the country.

        "Boston, Suffolk, Massachusetts, USA"
            -> Location(city="Boston", country="Suffolk, Massachusetts, USA")
    """
    if not raw or not raw.strip():
        return None
    parts = [p.strip() for p in raw.split(",")]
    return Location(city=parts[0], country=", ".join(p for p in parts[1:] if p))
