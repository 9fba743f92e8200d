from __future__ import annotations

from .assembler import (
    AssemblyState,
    FamilyOpen,
    IndividualOpen,
    NoOpenRecord,
    advance,
    assemble,
    flush,
)
from .linker import link_families
from .models import GedcomData, RawEvent, RawFamilyUnit, RawIndividual, Sex

__all__ = [
    "AssemblyState",
    "FamilyOpen",
    "GedcomData",
    "IndividualOpen",
    "NoOpenRecord",
    "RawEvent",
    "RawFamilyUnit",
    "RawIndividual",
    "Sex",
    "advance",
    "assemble",
    "flush",
    "link_families",
]
