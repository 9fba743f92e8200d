import pytest

from gedcom_import.normalization import Location, split_name, split_place


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("John /Smith/", ("John", "Smith")),
        ("John Smith", ("John", "Smith")),
        ("Cher", ("Cher", "")),
        ("", ("", "")),
        (None, ("", "")),
        ("/Smith/", ("", "Smith")),
        ("Anna Maria /de la Cruz/ Jr", ("Anna Maria", "de la Cruz")),
        ("Mary Ann Smith", ("Mary", "Ann Smith")),
        ("John /Smith", ("John", "Smith")),
        ("  John   /Smith/  ", ("John", "Smith")),
    ],
)
def test_split_name(raw, expected):
    assert split_name(raw) == expected


def test_split_place_city_and_country():
    assert split_place("Boston, Massachusetts, USA") == Location(
        city="Boston", country="Massachusetts, USA"
    )


def test_split_place_single_part():
    assert split_place("London") == Location(city="London", country="")


def test_split_place_empty():
    assert split_place("") is None
    assert split_place(None) is None
    assert split_place("   ") is None
