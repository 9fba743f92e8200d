"""
gedcom_import: convert GEDCOM documents into people, relationships and
tree metadata.

    from gedcom_import import parse_gedcom_text

    result = parse_gedcom_text(text)
    result.people, result.relationships, result.tree_name
"""

from gedcom_import.core.context import ParseContext, ParseOptions, ParseWarning
from gedcom_import.core.exceptions import GedcomImportError, InputTypeError, ProcessingError
from gedcom_import.loader.file_loader import (
    FileSource,
    StringSource,
    TextSource,
    ensure_gedcom_filename,
)
from gedcom_import.parser_core import (
    GedcomImporter,
    parse_gedcom,
    parse_gedcom_file,
    parse_gedcom_text,
)
from gedcom_import.transform.models import (
    FamilyTreeResult,
    Gender,
    Person,
    Relationship,
    RelationshipType,
    TimelineEvent,
)

__version__ = "0.1.0"

__all__ = [
    "FamilyTreeResult",
    "FileSource",
    "GedcomImportError",
    "GedcomImporter",
    "Gender",
    "InputTypeError",
    "ParseContext",
    "ParseOptions",
    "ParseWarning",
    "Person",
    "ProcessingError",
    "Relationship",
    "RelationshipType",
    "StringSource",
    "TextSource",
    "TimelineEvent",
    "ensure_gedcom_filename",
    "parse_gedcom",
    "parse_gedcom_file",
    "parse_gedcom_text",
]
