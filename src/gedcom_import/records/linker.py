from __future__ import annotations

from typing import Optional

from gedcom_import.core.context import UNRESOLVED_POINTER, ParseContext
from gedcom_import.records.models import GedcomData


def _append_unique(items, value) -> None:
    if value not in items:
        items.append(value)


def link_families(data: GedcomData, context: Optional[ParseContext] = None) -> GedcomData:
    """
    Cross-record linking pass over assembled data.

    Fills ``parents``, ``children`` and ``spouses`` on each RawIndividual
    from the family units. Pointers that name no individual are skipped
    (reported as ``unresolved-pointer`` warnings in strict mode).

    Idempotent: clears the derived lists before rebuilding them.
    """
    individuals = data.individual_index()

    for ind in data.individuals:
        ind.parents.clear()
        ind.children.clear()
        ind.spouses.clear()

    def lookup(pointer: str, family_pointer: str, role: str):
        found = individuals.get(pointer)
        if found is None and context is not None:
            context.warn(
                UNRESOLVED_POINTER,
                f"Family {family_pointer}: {role} {pointer} matches no individual",
                pointer=pointer,
            )
        return found

    for fam in data.families:
        husband = lookup(fam.husband, fam.pointer, "HUSB") if fam.husband else None
        wife = lookup(fam.wife, fam.pointer, "WIFE") if fam.wife else None

        if husband is not None and fam.wife:
            _append_unique(husband.spouses, fam.wife)
        if wife is not None and fam.husband:
            _append_unique(wife.spouses, fam.husband)

        for child_ptr in fam.children:
            child = lookup(child_ptr, fam.pointer, "CHIL")
            for parent_ptr, parent in ((fam.husband, husband), (fam.wife, wife)):
                if not parent_ptr:
                    continue
                if parent is not None:
                    _append_unique(parent.children, child_ptr)
                if child is not None:
                    _append_unique(child.parents, parent_ptr)

    return data
