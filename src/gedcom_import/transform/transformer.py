"""
transformer.py
Raw individuals/families -> Person and Relationship records.

Output rules:
  - one Person per RawIndividual, document order, no merging
  - one SPOUSE edge per family that names both husband and wife
  - one PARENT edge per (defined parent, child) pair per family
  - edge endpoints are source pointers unless resolve_endpoints is set
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from gedcom_import.core.context import ParseContext, ParseOptions
from gedcom_import.dates.normalizer import extract_year, normalize_date
from gedcom_import.identity.uuid_factory import IdFactory
from gedcom_import.logging import get_logger
from gedcom_import.normalization.names import split_name
from gedcom_import.normalization.places import split_place
from gedcom_import.records.models import GedcomData, RawEvent, RawFamilyUnit, RawIndividual, Sex
from gedcom_import.transform.models import (
    FamilyTreeResult,
    Gender,
    Person,
    Relationship,
    RelationshipType,
    TimelineEvent,
)

log = get_logger(__name__)

TREE_DESCRIPTION = "Family tree imported from GEDCOM file"

_GENDERS = {
    Sex.MALE: Gender.MALE,
    Sex.FEMALE: Gender.FEMALE,
    Sex.UNKNOWN: Gender.OTHER,
}


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

def _describe(verb: str, event: RawEvent, extra: str = "") -> str:
    parts = [verb]
    if extra:
        parts.append(extra)
    if event.date:
        parts.append(f"on {event.date}")
    if event.place:
        parts.append(f"in {event.place}")
    return " ".join(parts)


def _timeline_event(
    ids: IdFactory,
    owner_id: str,
    kind: str,
    event: Optional[RawEvent],
    description: str,
    discriminator: object = "",
) -> Optional[TimelineEvent]:
    if event is None or not (event.date or event.place):
        return None
    return TimelineEvent(
        id=ids.event_id(owner_id, kind, discriminator),
        event=kind,
        year=extract_year(event.date),
        date=normalize_date(event.date),
        place=event.place,
        location=split_place(event.place),
        description=description,
    )


def _marriages_by_pointer(
    families: List[RawFamilyUnit],
) -> Dict[str, List[Tuple[RawFamilyUnit, str]]]:
    """pointer -> [(family, spouse pointer)] for families with both spouses."""
    marriages: Dict[str, List[Tuple[RawFamilyUnit, str]]] = {}
    for fam in families:
        if not (fam.husband and fam.wife):
            continue
        marriages.setdefault(fam.husband, []).append((fam, fam.wife))
        marriages.setdefault(fam.wife, []).append((fam, fam.husband))
    return marriages


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------

def build_person(
    ind: RawIndividual,
    *,
    ids: IdFactory,
    position: int,
    timestamp: str,
    marriages: Optional[List[Tuple[RawFamilyUnit, str]]] = None,
    names: Optional[Dict[str, str]] = None,
) -> Person:
    """Transform one RawIndividual. Missing optional fields stay None."""
    given, family = split_name(ind.name)
    person_id = ids.person_id(ind.pointer, position)

    birth = _timeline_event(
        ids, person_id, "birth", ind.birth, _describe("Born", ind.birth or RawEvent())
    )
    death = _timeline_event(
        ids, person_id, "death", ind.death, _describe("Died", ind.death or RawEvent())
    )

    timeline: List[TimelineEvent] = [birth] if birth else []
    for fam, spouse_ptr in marriages or []:
        spouse_name = (names or {}).get(spouse_ptr) or spouse_ptr
        marriage = _timeline_event(
            ids,
            person_id,
            "marriage",
            fam.marriage,
            _describe("Married", fam.marriage or RawEvent(), f"to {spouse_name}"),
            discriminator=fam.pointer,
        )
        if marriage:
            timeline.append(marriage)
    if death:
        timeline.append(death)

    return Person(
        id=person_id,
        pointer=ind.pointer,
        first_name=given,
        last_name=family,
        gender=_GENDERS.get(ind.sex, Gender.OTHER),
        created_at=timestamp,
        updated_at=timestamp,
        birth_date=normalize_date(ind.birth.date) if ind.birth else None,
        death_date=normalize_date(ind.death.date) if ind.death else None,
        birth_place=ind.birth.place if ind.birth else None,
        death_place=ind.death.place if ind.death else None,
        biography="",
        birth=birth,
        death=death,
        timeline=timeline,
    )


# ---------------------------------------------------------------------------
# Relationships
# ---------------------------------------------------------------------------

def family_relationships(
    fam: RawFamilyUnit,
    *,
    ids: IdFactory,
    timestamp: str,
) -> List[Relationship]:
    """
    Edges for one family: at most one SPOUSE edge (husband and wife both
    present) followed by one PARENT edge per defined parent per child.
    """
    edges: List[Relationship] = []

    if fam.husband and fam.wife:
        marriage = fam.marriage or RawEvent()
        edges.append(
            Relationship(
                id=ids.relationship_id("spouse", fam.husband, fam.wife, fam.pointer),
                person1_id=fam.husband,
                person2_id=fam.wife,
                relationship_type=RelationshipType.SPOUSE,
                created_at=timestamp,
                updated_at=timestamp,
                start_date=normalize_date(marriage.date),
                notes=f"Married in {marriage.place}" if marriage.place else "",
                family_pointer=fam.pointer,
            )
        )

    parents = fam.parents()
    for child in fam.children:
        for parent in parents:
            edges.append(
                Relationship(
                    id=ids.relationship_id("parent", parent, child, fam.pointer),
                    person1_id=parent,
                    person2_id=child,
                    relationship_type=RelationshipType.PARENT,
                    created_at=timestamp,
                    updated_at=timestamp,
                    family_pointer=fam.pointer,
                )
            )

    return edges


def _resolve_endpoints(
    relationships: List[Relationship],
    pointer_index: Dict[str, str],
) -> None:
    for rel in relationships:
        rel.person1_id = pointer_index.get(rel.person1_id, rel.person1_id)
        rel.person2_id = pointer_index.get(rel.person2_id, rel.person2_id)


def tree_name_for(people: List[Person], default: str) -> str:
    """
    "{given} {family} Family Tree" for the first person, built from the
    non-empty name parts only ("Cher" gives "Cher Family Tree" with no
    double space). A first person with no name at all, or no people,
    gives ``default``.
    """
    if not people:
        return default
    name = people[0].full_name
    return f"{name} Family Tree" if name else default


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def transform(
    data: GedcomData,
    options: Optional[ParseOptions] = None,
    context: Optional[ParseContext] = None,
    now: Optional[str] = None,
) -> FamilyTreeResult:
    """
    Build the FamilyTreeResult for assembled (and linked) GedcomData.

    Args:
        data: Assembler output.
        options: Parse options; defaults to ParseOptions().
        context: Per-call context whose warnings are copied to the result.
        now: ISO timestamp for audit fields; defaults to current UTC time.
    """
    if context is None:
        context = ParseContext(options=options or ParseOptions())
    options = options or context.options

    ids = IdFactory(deterministic=options.deterministic_ids)
    timestamp = now or _utc_now_iso()

    marriages = _marriages_by_pointer(data.families)
    display_names = {
        ind.pointer: " ".join(p for p in split_name(ind.name) if p) or ind.pointer
        for ind in data.individuals
    }

    people: List[Person] = []
    pointer_index: Dict[str, str] = {}
    for position, ind in enumerate(data.individuals):
        person = build_person(
            ind,
            ids=ids,
            position=position,
            timestamp=timestamp,
            marriages=marriages.get(ind.pointer),
            names=display_names,
        )
        people.append(person)
        pointer_index.setdefault(ind.pointer, person.id)

    relationships: List[Relationship] = []
    for fam in data.families:
        relationships.extend(family_relationships(fam, ids=ids, timestamp=timestamp))

    if options.resolve_endpoints:
        _resolve_endpoints(relationships, pointer_index)

    result = FamilyTreeResult(
        id=ids.tree_id(data.individuals[0].pointer if data.individuals else None),
        name=tree_name_for(people, options.default_tree_name),
        description=TREE_DESCRIPTION,
        created_at=timestamp,
        updated_at=timestamp,
        people=people,
        relationships=relationships,
        warnings=list(context.warnings),
        pointer_index=pointer_index,
        endpoints_resolved=options.resolve_endpoints,
    )

    log.info(
        "Transformed %d people and %d relationships into %r",
        len(people),
        len(relationships),
        result.name,
    )
    return result
