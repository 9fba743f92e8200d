# src/gedcom_import/loader/__init__.py

"""
Public interface for the line reader and text sources.

    from gedcom_import.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        iter_tokens,
        FileSource,
        StringSource,
        TextSource,
        ensure_gedcom_filename,
    )
"""

from __future__ import annotations

from .file_loader import (
    FileSource,
    StringSource,
    TextSource,
    ensure_gedcom_filename,
    is_gedcom_filename,
)
from .tokenizer import GedcomSyntaxError, Token, iter_tokens, tokenize_line

__all__ = [
    "FileSource",
    "GedcomSyntaxError",
    "StringSource",
    "TextSource",
    "Token",
    "ensure_gedcom_filename",
    "is_gedcom_filename",
    "iter_tokens",
    "tokenize_line",
]
