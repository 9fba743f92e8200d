# src/gedcom_import/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from gedcom_import.logging import get_logger

log = get_logger(__name__)

POINTER_DELIMITER = "@"
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "DATE".
        value: Remainder of the line after the tag (may be empty). For
            pointer-first lines ("0 @I1@ INDI") this is the pointer.
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be split into level and tag."""


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Accepted shapes:
        <level> <tag> [<value>]
        <level> <@pointer@> <tag>

    In the second shape the pointer comes before the tag; tag and value are
    swapped so downstream code always sees tag="INDI", value="@I1@".

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 1 JAN 1900"
    """
    raw = _strip_eol(line)

    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    parts = raw.split(None, 2)
    if len(parts) < 2:
        raise GedcomSyntaxError(
            f"Line {lineno}: expected at least level and tag -> {raw!r}"
        )

    level_str = parts[0]
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    tag = parts[1]
    value = parts[2].strip() if len(parts) > 2 else ""

    if tag.startswith(POINTER_DELIMITER):
        # "0 @I1@ INDI": the real tag is the first word of the remainder.
        pointer = tag
        rest = value.split(None, 1)
        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but missing tag -> {raw!r}"
            )
        tag = rest[0]
        value = pointer

    return Token(
        lineno=lineno,
        level=int(level_str),
        tag=tag,
        value=value,
        raw=raw,
    )


def iter_tokens(
    lines: str | Iterable[str],
    on_skip: Optional[Callable[[int, str, GedcomSyntaxError], None]] = None,
) -> Iterator[Token]:
    """
    Lazily yield one Token per usable line of a GEDCOM document.

    Blank lines and lines that fail tokenize_line() are skipped. Skipped
    non-blank lines are passed to ``on_skip`` when given.

    Args:
        lines: Whole document text, or any iterable of lines.
        on_skip: Optional callback(lineno, raw, error) for malformed lines.
    """
    if isinstance(lines, str):
        lines = LINE_BREAK.split(lines)

    for lineno, raw_line in enumerate(lines, start=1):
        stripped = _strip_eol(raw_line)

        if not stripped.strip() or stripped.strip() == "\ufeff":
            continue

        try:
            yield tokenize_line(stripped, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.debug("Skipping malformed line: %s", exc)
            if on_skip is not None:
                on_skip(lineno, stripped, exc)
