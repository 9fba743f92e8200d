from __future__ import annotations

DEFAULT_PROCESSING_MESSAGE = "Failed to process GEDCOM file"


class GedcomImportError(Exception):
    """Base exception for gedcom_import failures."""


class InputTypeError(GedcomImportError):
    """Raised by callers when the input is not a GEDCOM file."""


class ProcessingError(GedcomImportError):
    """Raised when reading, assembling or transforming a document fails."""

    def __init__(self, message: str | None = None):
        super().__init__(message or DEFAULT_PROCESSING_MESSAGE)
