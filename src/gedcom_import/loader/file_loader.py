# src/gedcom_import/loader/file_loader.py

"""
Text sources for the importer.

The core only needs "read the whole document as text". Anything that
offers ``async def text() -> str`` can be handed to ``parse_gedcom``;
FileSource and StringSource cover local files and in-memory payloads.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from gedcom_import.core.exceptions import InputTypeError
from gedcom_import.logging import get_logger

log = get_logger(__name__)

GEDCOM_SUFFIXES = (".ged", ".gedcom")


@runtime_checkable
class TextSource(Protocol):
    async def text(self) -> str:
        ...


class StringSource:
    """An already-buffered document, e.g. an HTTP request body."""

    def __init__(self, content: str, name: str = "<memory>"):
        self.content = content
        self.name = name

    async def text(self) -> str:
        return self.content


class FileSource:
    """A GEDCOM document on the local filesystem."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return self.path.name

    def read_text(self) -> str:
        if not self.path.is_file():
            raise FileNotFoundError(f"GEDCOM file not found: {self.path}")

        log.info("Reading GEDCOM file: %s", self.path)
        with self.path.open("r", encoding=self.encoding, errors="replace") as f:
            return f.read()

    async def text(self) -> str:
        return await asyncio.to_thread(self.read_text)


def is_gedcom_filename(name: str) -> bool:
    return str(name).lower().endswith(GEDCOM_SUFFIXES)


def ensure_gedcom_filename(name: Union[str, Path]) -> None:
    """
    Raise InputTypeError unless ``name`` ends in .ged or .gedcom
    (case-insensitive). Upload handlers and the CLI call this before parsing.
    """
    if not is_gedcom_filename(str(name)):
        raise InputTypeError(
            f"Please upload a GEDCOM file (.ged or .gedcom), got: {Path(str(name)).name}"
        )
