from __future__ import annotations

from .models import (
    FamilyTreeResult,
    Gender,
    Person,
    Relationship,
    RelationshipType,
    TimelineEvent,
)
from .transformer import build_person, family_relationships, transform, tree_name_for

__all__ = [
    "FamilyTreeResult",
    "Gender",
    "Person",
    "Relationship",
    "RelationshipType",
    "TimelineEvent",
    "build_person",
    "family_relationships",
    "transform",
    "tree_name_for",
]
