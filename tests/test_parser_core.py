from __future__ import annotations

import asyncio

import pytest

from gedcom_import import (
    FileSource,
    GedcomImporter,
    ParseOptions,
    ProcessingError,
    StringSource,
    parse_gedcom,
    parse_gedcom_file,
    parse_gedcom_text,
)
from gedcom_import.core.exceptions import DEFAULT_PROCESSING_MESSAGE


def _by_name(result, first, last):
    return next(p for p in result.people if p.first_name == first and p.last_name == last)


def _content(result):
    """People/relationship content without generated ids and timestamps."""
    people = [
        (p.pointer, p.first_name, p.last_name, p.gender, p.birth_date, p.death_date)
        for p in result.people
    ]
    rels = [
        (r.person1_id, r.person2_id, r.relationship_type, r.start_date)
        for r in result.relationships
    ]
    return people, rels, result.tree_name


def test_end_to_end_fixture(family_ged_text):
    result = parse_gedcom_text(family_ged_text)

    assert len(result.people) == 3
    john = _by_name(result, "John", "Smith")
    mary = _by_name(result, "Mary", "Jones")
    james = _by_name(result, "James", "Smith")

    assert john.gender == "male"
    assert mary.gender == "female"
    assert james.gender == "male"
    assert john.birth_date == "1900-01-01"
    assert john.death_date == "1970-12-01"
    assert mary.birth_date == "1905-03-15"
    assert james.birth_date == "1930-06-10"

    assert len(result.relationships) == 3
    spouse = [r for r in result.relationships if r.relationship_type == "spouse"]
    assert [(r.person1_id, r.person2_id) for r in spouse] == [("@I1@", "@I2@")]

    parents = [
        r.person1_id
        for r in result.relationships
        if r.relationship_type == "parent" and r.person2_id == "@I3@"
    ]
    assert sorted(parents) == ["@I1@", "@I2@"]

    assert result.tree_name == "John Smith Family Tree"
    assert result.warnings == []


def test_pointer_index_joins_edges_to_people(family_ged_text):
    result = parse_gedcom_text(family_ged_text)

    for rel in result.relationships:
        assert result.person_for_pointer(rel.person1_id) is not None
        assert result.person_for_pointer(rel.person2_id) is not None


def test_reparse_is_idempotent(family_ged_text):
    first = parse_gedcom_text(family_ged_text)
    second = parse_gedcom_text(family_ged_text)

    assert _content(first) == _content(second)
    assert {p.id for p in first.people}.isdisjoint({p.id for p in second.people})


def test_malformed_lines_do_not_change_output(family_ged_text):
    noisy_lines = []
    for line in family_ged_text.splitlines():
        noisy_lines.extend([line, "", "garbage", "   "])
    noisy = "\n".join(["", "X"] + noisy_lines)

    assert _content(parse_gedcom_text(noisy)) == _content(parse_gedcom_text(family_ged_text))


def test_crlf_document(family_ged_text):
    crlf = family_ged_text.replace("\n", "\r\n")
    assert _content(parse_gedcom_text(crlf)) == _content(parse_gedcom_text(family_ged_text))


def test_empty_document():
    result = parse_gedcom_text("")
    assert result.people == []
    assert result.relationships == []
    assert result.tree_name == "Imported Family Tree"


def test_strict_mode_surfaces_warnings():
    text = "0 @I1@ INDI\n1 OCCU Farmer\nbad line\n0 @F1@ FAM\n1 HUSB @I1@\n1 CHIL @I9@\n"
    result = parse_gedcom_text(text, ParseOptions(strict=True))

    codes = sorted(w.code for w in result.warnings)
    assert codes == ["malformed-line", "unknown-tag", "unresolved-pointer"]
    assert len(result.relationships) == 1


def test_lenient_mode_is_default_and_silent():
    text = "0 @I1@ INDI\n1 OCCU Farmer\nbad line\n"
    result = GedcomImporter(ParseOptions()).run(text)
    assert result.warnings == []
    assert len(result.people) == 1


def test_non_text_input_raises_processing_error():
    with pytest.raises(ProcessingError) as excinfo:
        parse_gedcom_text(b"0 HEAD")  # type: ignore[arg-type]
    assert "bytes" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_processing_error_fallback_message():
    assert str(ProcessingError()) == DEFAULT_PROCESSING_MESSAGE
    assert str(ProcessingError("")) == DEFAULT_PROCESSING_MESSAGE


def test_parse_from_async_source(family_ged_text):
    result = asyncio.run(parse_gedcom(StringSource(family_ged_text)))
    assert len(result.people) == 3


def test_parse_from_file_source(family_ged_path):
    result = asyncio.run(parse_gedcom(FileSource(family_ged_path)))
    assert len(result.relationships) == 3


def test_failing_source_raises_processing_error():
    class BrokenSource:
        async def text(self) -> str:
            raise OSError("Failed to read file")

    with pytest.raises(ProcessingError, match="Failed to read file"):
        asyncio.run(parse_gedcom(BrokenSource()))


def test_parse_gedcom_file(family_ged_path):
    assert len(parse_gedcom_file(family_ged_path).people) == 3


def test_parse_gedcom_file_missing(tmp_path):
    with pytest.raises(ProcessingError, match="not found"):
        parse_gedcom_file(tmp_path / "missing.ged")


def test_unicode_separator_inside_name_keeps_surname():
    text = "0 @I1@ INDI\n1 NAME John\u2028Paul /Smith/\n1 SEX M\n"
    result = parse_gedcom_text(text, ParseOptions(strict=True))

    assert len(result.people) == 1
    assert result.people[0].last_name == "Smith"
    assert result.warnings == []
