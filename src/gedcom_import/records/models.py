from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"

    @classmethod
    def from_gedcom(cls, value: Optional[str]) -> "Sex":
        code = (value or "").strip().upper()
        if code == "M":
            return cls.MALE
        if code == "F":
            return cls.FEMALE
        return cls.UNKNOWN


@dataclass
class RawEvent:
    """BIRT / DEAT / MARR substructure; both fields stay raw."""
    date: Optional[str] = None
    place: Optional[str] = None


@dataclass
class RawIndividual:
    pointer: str
    name: str = ""
    sex: Sex = Sex.UNKNOWN
    birth: Optional[RawEvent] = None
    death: Optional[RawEvent] = None

    # FAMC / FAMS pointers captured during assembly
    families_as_child: List[str] = field(default_factory=list)
    families_as_spouse: List[str] = field(default_factory=list)

    # Individual pointers filled by the linker pass
    parents: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)


@dataclass
class RawFamilyUnit:
    pointer: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[RawEvent] = None

    def parents(self) -> List[str]:
        """Defined parent pointers, husband first."""
        return [p for p in (self.husband, self.wife) if p]


@dataclass
class GedcomData:
    """Assembler output: flat record lists in document order."""
    individuals: List[RawIndividual] = field(default_factory=list)
    families: List[RawFamilyUnit] = field(default_factory=list)

    def individual_index(self) -> Dict[str, RawIndividual]:
        # First record wins when a pointer repeats.
        index: Dict[str, RawIndividual] = {}
        for ind in self.individuals:
            index.setdefault(ind.pointer, ind)
        return index
