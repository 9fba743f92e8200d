from gedcom_import.core.context import ParseContext, ParseOptions
from gedcom_import.records import GedcomData, RawFamilyUnit, RawIndividual, link_families


def _data():
    return GedcomData(
        individuals=[
            RawIndividual(pointer="@I1@"),
            RawIndividual(pointer="@I2@"),
            RawIndividual(pointer="@I3@"),
        ],
        families=[
            RawFamilyUnit(pointer="@F1@", husband="@I1@", wife="@I2@", children=["@I3@"]),
        ],
    )


def test_spouses_linked():
    data = link_families(_data())
    h, w, _ = data.individuals

    assert h.spouses == ["@I2@"]
    assert w.spouses == ["@I1@"]


def test_parents_and_children_linked():
    data = link_families(_data())
    h, w, c = data.individuals

    assert c.parents == ["@I1@", "@I2@"]
    assert h.children == ["@I3@"]
    assert w.children == ["@I3@"]


def test_linking_is_idempotent():
    data = link_families(link_families(_data()))
    h, _, c = data.individuals

    assert h.spouses == ["@I2@"]
    assert c.parents == ["@I1@", "@I2@"]


def test_missing_references_do_not_crash():
    data = GedcomData(
        individuals=[RawIndividual(pointer="@I1@")],
        families=[RawFamilyUnit(pointer="@F1@", husband="@I404@", children=["@I1@", "@I999@"])],
    )

    link_families(data)

    assert data.individuals[0].parents == ["@I404@"]


def test_strict_mode_reports_unresolved_pointers():
    data = GedcomData(
        individuals=[RawIndividual(pointer="@I1@")],
        families=[RawFamilyUnit(pointer="@F1@", husband="@I404@", children=["@I1@", "@I999@"])],
    )
    ctx = ParseContext(options=ParseOptions(strict=True))

    link_families(data, ctx)

    unresolved = [w.pointer for w in ctx.warnings if w.code == "unresolved-pointer"]
    assert unresolved == ["@I404@", "@I999@"]
