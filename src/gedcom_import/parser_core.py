"""
parser_core.py
Top-level import engine with logging and error wrapping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gedcom_import.config import get_config
from gedcom_import.core.context import MALFORMED_LINE, ParseContext, ParseOptions
from gedcom_import.core.exceptions import ProcessingError
from gedcom_import.loader.file_loader import FileSource, TextSource
from gedcom_import.loader.tokenizer import iter_tokens
from gedcom_import.logging import get_logger
from gedcom_import.records.assembler import assemble
from gedcom_import.records.linker import link_families
from gedcom_import.records.models import GedcomData
from gedcom_import.transform.models import FamilyTreeResult
from gedcom_import.transform.transformer import transform

log = get_logger(__name__)


class GedcomImporter:
    """
    High-level importer:
      - tokenizes text
      - assembles individuals and families
      - links family pointers onto individuals
      - transforms into people and relationships

    Each run() builds its own ParseContext; an importer instance holds no
    per-document state and can be reused or shared.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options if options is not None else ParseOptions.from_config(get_config())

    # ---------------------------------------------------------
    # Stages
    # ---------------------------------------------------------
    def read(self, text: str, context: ParseContext) -> GedcomData:
        """Tokenize, assemble and link one document."""

        def on_skip(lineno, raw, exc):
            context.warn(MALFORMED_LINE, str(exc), lineno=lineno)

        tokens = iter_tokens(text, on_skip=on_skip)
        data = assemble(tokens, context)
        return link_families(data, context)

    # ---------------------------------------------------------
    # Full run
    # ---------------------------------------------------------
    def run(self, text: str) -> FamilyTreeResult:
        """
        Full import sequence. Any failure surfaces as ProcessingError with
        the original message (or a generic fallback).
        """
        context = ParseContext(options=self.options)
        log.info("Running GEDCOM import (strict=%s)", self.options.strict)

        try:
            if not isinstance(text, str):
                raise TypeError(f"Expected document text, got {type(text).__name__}")
            data = self.read(text, context)
            result = transform(data, self.options, context)
        except Exception as exc:
            log.exception("GEDCOM import failed.")
            raise ProcessingError(str(exc)) from exc

        log.info(
            "Import completed: %d people, %d relationships, %d warnings",
            len(result.people),
            len(result.relationships),
            len(result.warnings),
        )
        return result

    async def run_source(self, source: TextSource) -> FamilyTreeResult:
        try:
            text = await source.text()
        except Exception as exc:
            log.exception("Reading GEDCOM source failed.")
            raise ProcessingError(str(exc)) from exc
        return self.run(text)


# ---------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------

def parse_gedcom_text(text: str, options: Optional[ParseOptions] = None) -> FamilyTreeResult:
    """Import an already-buffered GEDCOM document."""
    return GedcomImporter(options).run(text)


async def parse_gedcom(source: TextSource, options: Optional[ParseOptions] = None) -> FamilyTreeResult:
    """Await ``source.text()`` and import it."""
    return await GedcomImporter(options).run_source(source)


def parse_gedcom_file(
    path: Union[str, Path],
    options: Optional[ParseOptions] = None,
) -> FamilyTreeResult:
    """Synchronous convenience wrapper for local files."""
    try:
        text = FileSource(path).read_text()
    except Exception as exc:
        log.exception("Reading GEDCOM file failed.")
        raise ProcessingError(str(exc)) from exc
    return parse_gedcom_text(text, options)
