from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_import.config import get_config
from gedcom_import.core.context import ParseOptions
from gedcom_import.core.exceptions import GedcomImportError
from gedcom_import.exporter.json_exporter import serialize_result
from gedcom_import.loader.file_loader import ensure_gedcom_filename
from gedcom_import.logging import get_logger, list_active_loggers, set_level
from gedcom_import.parser_core import parse_gedcom_file
from gedcom_import.transform.models import FamilyTreeResult

log = get_logger(__name__)
console = Console(stderr=True)


def build_options(
    *,
    strict: Optional[bool] = None,
    resolve_endpoints: Optional[bool] = None,
    deterministic_ids: Optional[bool] = None,
) -> ParseOptions:
    """Config-file options with command-line flags layered on top."""
    options = ParseOptions.from_config(get_config())
    overrides = {
        "strict": strict,
        "resolve_endpoints": resolve_endpoints,
        "deterministic_ids": deterministic_ids,
    }
    return replace(options, **{k: v for k, v in overrides.items() if v is not None})


def load_tree(path: Path, options: ParseOptions, *, verbose: bool = False) -> FamilyTreeResult:
    """
    Check the filename, then run the full import. Import errors are printed
    and turned into exit code 1.
    """
    if verbose:
        set_level(logging.DEBUG)
        log.debug("Active loggers: %s", ", ".join(list_active_loggers()))

    t0 = time.perf_counter()

    try:
        ensure_gedcom_filename(path)
        result = parse_gedcom_file(path, options)
    except GedcomImportError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if verbose:
        console.log(f"Imported {path.name} in {time.perf_counter() - t0:.2f}s")

    return result


def write_json(result: FamilyTreeResult, *, out: Optional[Path], pretty: bool) -> None:
    """
    Write JSON to stdout or file.
    """
    payload = serialize_result(result, indent=2 if pretty else None)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
