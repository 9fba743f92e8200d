# src/gedcom_import/identity/uuid_factory.py
from __future__ import annotations

import hashlib
import uuid
from typing import Optional


# -----------------------------
# Core deterministic hashing
# -----------------------------

def _stable_hash(key: str) -> str:
    # SHA1 is fine for identity fingerprints (not security).
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def _uuid_from_key(key: str) -> str:
    """
    Convert an arbitrary key string into a canonical UUID-like value
    (8-4-4-4-12). Deterministic for the same key.
    """
    h32 = _stable_hash(key)[:32]
    return f"{h32[0:8]}-{h32[8:12]}-{h32[12:16]}-{h32[16:20]}-{h32[20:32]}"


def deterministic_uuid(*parts: object) -> str:
    key = "|".join("" if p is None else str(p) for p in parts)
    return _uuid_from_key(key)


def new_uuid() -> str:
    """A fresh random id."""
    return str(uuid.uuid4())


# -----------------------------
# Pointer normalization
# -----------------------------

def normalize_pointer(pointer: Optional[str]) -> Optional[str]:
    """
    Normalize a GEDCOM pointer for hashing:
      - strip whitespace
      - uppercase
      - ensure wrapped in @...@
    """
    if pointer is None:
        return None

    p = pointer.strip().upper()
    if not p:
        return None

    if not p.startswith("@"):
        p = "@" + p
    if not p.endswith("@") or len(p) == 1:
        p = p + "@"
    return p


# -----------------------------
# Id factory
# -----------------------------

class IdFactory:
    """
    Hands out ids for one transform call.

    With ``deterministic=False`` every id is a fresh uuid4. With
    ``deterministic=True`` ids are derived from the source pointers, so
    re-importing the same document yields the same ids.
    """

    def __init__(self, deterministic: bool = False):
        self.deterministic = deterministic
        self._person_ids: set[str] = set()
        self._relationship_ids: set[str] = set()
        self._relationship_count = 0

    def person_id(self, pointer: str, position: int) -> str:
        if not self.deterministic:
            return new_uuid()
        p = normalize_pointer(pointer)
        pid = deterministic_uuid("PERSON", p) if p else deterministic_uuid("PERSON", "#", position)
        if pid in self._person_ids:
            # Repeated pointer: fall back to document position to stay unique.
            pid = deterministic_uuid("PERSON", p, "#", position)
        self._person_ids.add(pid)
        return pid

    def relationship_id(
        self,
        relationship_type: str,
        person1: str,
        person2: str,
        family_pointer: Optional[str],
    ) -> str:
        if not self.deterministic:
            return new_uuid()
        position = self._relationship_count
        self._relationship_count += 1
        key = (
            "REL",
            relationship_type,
            normalize_pointer(family_pointer),
            normalize_pointer(person1),
            normalize_pointer(person2),
        )
        rid = deterministic_uuid(*key)
        if rid in self._relationship_ids:
            # Repeated CHIL or FAM: fall back to output position to stay unique.
            rid = deterministic_uuid(*key, "#", position)
        self._relationship_ids.add(rid)
        return rid

    def event_id(self, owner_id: str, event: str, discriminator: object = "") -> str:
        if not self.deterministic:
            return new_uuid()
        return deterministic_uuid("EVT", owner_id, event, discriminator)

    def tree_id(self, first_pointer: Optional[str]) -> str:
        if not self.deterministic:
            return new_uuid()
        return deterministic_uuid("TREE", normalize_pointer(first_pointer))


__all__ = [
    "IdFactory",
    "deterministic_uuid",
    "new_uuid",
    "normalize_pointer",
]
