from gedcom_import.core.context import ParseContext, ParseOptions, ParseWarning
from gedcom_import.core.exceptions import (
    GedcomImportError,
    InputTypeError,
    ProcessingError,
)

__all__ = [
    "GedcomImportError",
    "InputTypeError",
    "ParseContext",
    "ParseOptions",
    "ParseWarning",
    "ProcessingError",
]
