"""
names.py
Split GEDCOM display names into given and family name.

GEDCOM writes the surname between slashes: "John /Smith/", "/Smith/",
"Anna Maria /de la Cruz/ Jr". Names without slashes fall back to the first
space.
"""

from __future__ import annotations

from typing import Optional, Tuple

SURNAME_DELIMITER = "/"


def _clean_ws(s: Optional[str]) -> str:
    if s is None:
        return ""
    return " ".join(str(s).split())


def split_name(raw: Optional[str]) -> Tuple[str, str]:
    """
    Return (given, family) for a GEDCOM NAME value. Never raises.

        "John /Smith/" -> ("John", "Smith")
        "John Smith"   -> ("John", "Smith")
        "Cher"         -> ("Cher", "")
        ""             -> ("", "")

    Text after the closing slash (suffixes) is dropped. An unclosed slash
    takes the rest of the line as the family name.
    """
    name = _clean_ws(raw)
    if not name:
        return "", ""

    if SURNAME_DELIMITER in name:
        given, _, rest = name.partition(SURNAME_DELIMITER)
        family = rest.split(SURNAME_DELIMITER, 1)[0]
        return _clean_ws(given), _clean_ws(family)

    given, _, family = name.partition(" ")
    return given, family
