from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from gedcom_import.core.context import ParseWarning
from gedcom_import.exporter.json_exporter import build_result_dict
from gedcom_import.normalization.places import Location


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class RelationshipType(str, Enum):
    SPOUSE = "spouse"
    PARENT = "parent"


@dataclass
class TimelineEvent:
    """
    A birth, marriage or death entry on a person's timeline.

    ``year`` is for display only ("1900" or "Unknown"); ``date`` is the
    normalized ISO date when the raw date could be normalized.
    """
    id: str
    event: str
    year: str
    date: Optional[str] = None
    place: Optional[str] = None
    location: Optional[Location] = None
    description: str = ""


@dataclass
class Person:
    id: str
    pointer: str
    first_name: str
    last_name: str
    gender: Gender
    created_at: str
    updated_at: str
    birth_date: Optional[str] = None
    death_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_place: Optional[str] = None
    biography: str = ""
    birth: Optional[TimelineEvent] = None
    death: Optional[TimelineEvent] = None
    timeline: List[TimelineEvent] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


@dataclass
class Relationship:
    """
    A directed edge. For PARENT, person1 is the parent and person2 the child;
    for SPOUSE, person1 is the husband and person2 the wife.
    """
    id: str
    person1_id: str
    person2_id: str
    relationship_type: RelationshipType
    created_at: str
    updated_at: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    notes: str = ""
    family_pointer: Optional[str] = None


@dataclass
class FamilyTreeResult:
    """
    Final value of one import. Not mutated after it is returned.

    ``pointer_index`` maps each source pointer to the generated Person id;
    callers join relationship endpoints through it unless the parse ran with
    ``resolve_endpoints``.
    """
    id: str
    name: str
    description: str
    created_at: str
    updated_at: str
    people: List[Person] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)
    warnings: List[ParseWarning] = field(default_factory=list)
    pointer_index: Dict[str, str] = field(default_factory=dict)
    endpoints_resolved: bool = False

    @property
    def tree_name(self) -> str:
        return self.name

    def person_for_pointer(self, pointer: str) -> Optional[Person]:
        person_id = self.pointer_index.get(pointer)
        if person_id is None:
            return None
        for person in self.people:
            if person.id == person_id:
                return person
        return None

    def to_dict(self) -> Dict[str, Any]:
        return build_result_dict(self)
