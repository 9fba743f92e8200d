"""
Record assembler: folds a Token stream into individuals and family units.

The cursor is an explicit tagged union:

    NoOpenRecord | IndividualOpen(draft, current_event) | FamilyOpen(draft, current_event)

``advance`` is the transition function and ``assemble`` folds it over the
tokens. The current event (BIRT/DEAT/MARR) lives on the open-record state and
stays current across later level-1 lines until another event tag replaces it
or a level-0 line closes the record.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Set, Union

from gedcom_import.core.context import DUPLICATE_POINTER, UNKNOWN_TAG, ParseContext
from gedcom_import.loader.tokenizer import Token
from gedcom_import.logging import get_logger
from gedcom_import.records.models import (
    GedcomData,
    RawEvent,
    RawFamilyUnit,
    RawIndividual,
    Sex,
)

log = get_logger(__name__)

INDIVIDUAL_TAG = "INDI"
FAMILY_TAG = "FAM"

# Level-0 records that are dropped without a strict-mode warning
SILENT_RECORD_TAGS = {"HEAD", "TRLR"}

INDIVIDUAL_EVENT_TAGS = {"BIRT": "birth", "DEAT": "death"}
FAMILY_EVENT_TAGS = {"MARR": "marriage"}


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NoOpenRecord:
    """Between records, or inside a level-0 record that is being discarded."""


@dataclass(frozen=True)
class IndividualOpen:
    draft: RawIndividual
    current_event: Optional[RawEvent] = None


@dataclass(frozen=True)
class FamilyOpen:
    draft: RawFamilyUnit
    current_event: Optional[RawEvent] = None


OpenRecord = Union[NoOpenRecord, IndividualOpen, FamilyOpen]

NO_OPEN_RECORD = NoOpenRecord()


@dataclass(frozen=True)
class AssemblyState:
    """
    One step of the fold. ``record`` is replaced on every transition; the
    accumulator lists belong to a single assemble() call.
    """
    record: OpenRecord = NO_OPEN_RECORD
    individuals: List[RawIndividual] = field(default_factory=list)
    families: List[RawFamilyUnit] = field(default_factory=list)
    seen_pointers: Set[str] = field(default_factory=set)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def flush(state: AssemblyState) -> AssemblyState:
    """Move the open draft (if any) into the output lists and close it."""
    record = state.record
    if isinstance(record, IndividualOpen):
        state.individuals.append(record.draft)
    elif isinstance(record, FamilyOpen):
        state.families.append(record.draft)
    return replace(state, record=NO_OPEN_RECORD)


def _open_record(
    state: AssemblyState,
    token: Token,
    context: Optional[ParseContext],
) -> AssemblyState:
    state = flush(state)
    pointer = token.value

    if token.tag in (INDIVIDUAL_TAG, FAMILY_TAG):
        if pointer in state.seen_pointers and context is not None:
            context.warn(
                DUPLICATE_POINTER,
                f"Line {token.lineno}: pointer {pointer} is defined more than once",
                lineno=token.lineno,
                pointer=pointer,
            )
        state.seen_pointers.add(pointer)

    if token.tag == INDIVIDUAL_TAG:
        return replace(state, record=IndividualOpen(RawIndividual(pointer=pointer)))
    if token.tag == FAMILY_TAG:
        return replace(state, record=FamilyOpen(RawFamilyUnit(pointer=pointer)))

    if context is not None and token.tag not in SILENT_RECORD_TAGS:
        context.warn(
            UNKNOWN_TAG,
            f"Line {token.lineno}: skipping unsupported record {token.tag}",
            lineno=token.lineno,
        )
    return state


def _individual_detail(record: IndividualOpen, token: Token) -> Optional[IndividualOpen]:
    draft = record.draft
    tag = token.tag

    if tag == "NAME":
        draft.name = token.value
        return record
    if tag == "SEX":
        draft.sex = Sex.from_gedcom(token.value)
        return record
    if tag in INDIVIDUAL_EVENT_TAGS:
        event = RawEvent()
        setattr(draft, INDIVIDUAL_EVENT_TAGS[tag], event)
        return replace(record, current_event=event)
    if tag == "FAMC":
        draft.families_as_child.append(token.value)
        return record
    if tag == "FAMS":
        draft.families_as_spouse.append(token.value)
        return record
    return None


def _family_detail(record: FamilyOpen, token: Token) -> Optional[FamilyOpen]:
    draft = record.draft
    tag = token.tag

    if tag == "HUSB":
        draft.husband = token.value or None
        return record
    if tag == "WIFE":
        draft.wife = token.value or None
        return record
    if tag == "CHIL":
        if token.value:
            draft.children.append(token.value)
        return record
    if tag in FAMILY_EVENT_TAGS:
        event = RawEvent()
        setattr(draft, FAMILY_EVENT_TAGS[tag], event)
        return replace(record, current_event=event)
    return None


def _event_detail(event: Optional[RawEvent], token: Token) -> bool:
    if event is None:
        return False
    if token.tag == "DATE":
        event.date = token.value or None
        return True
    if token.tag == "PLAC":
        event.place = token.value or None
        return True
    return False


def advance(
    state: AssemblyState,
    token: Token,
    context: Optional[ParseContext] = None,
) -> AssemblyState:
    """
    Apply one token to the assembly state.

    Unrecognized tags leave the state unchanged; with a strict context they
    also produce an ``unknown-tag`` warning.
    """
    if token.level == 0:
        return _open_record(state, token, context)

    record = state.record
    if isinstance(record, NoOpenRecord):
        return state

    handled = False
    if token.level == 1:
        if isinstance(record, IndividualOpen):
            updated = _individual_detail(record, token)
        else:
            updated = _family_detail(record, token)
        if updated is not None:
            state = replace(state, record=updated)
            handled = True
    elif token.level == 2:
        handled = _event_detail(record.current_event, token)

    if not handled and context is not None:
        context.warn(
            UNKNOWN_TAG,
            f"Line {token.lineno}: ignoring {token.level} {token.tag} in {record.draft.pointer}",
            lineno=token.lineno,
            pointer=record.draft.pointer,
        )
    return state


def assemble(
    tokens: Iterable[Token],
    context: Optional[ParseContext] = None,
) -> GedcomData:
    """
    Fold a token stream into GedcomData (individuals and families in
    document order). Never raises for unexpected content.
    """
    state = AssemblyState()
    for token in tokens:
        state = advance(state, token, context)
    state = flush(state)

    log.debug(
        "Assembled %d individuals and %d families",
        len(state.individuals),
        len(state.families),
    )
    return GedcomData(individuals=state.individuals, families=state.families)
