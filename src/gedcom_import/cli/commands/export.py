from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_import.cli.utils import build_options, load_tree, write_json

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Collect warnings for unknown tags and unresolved pointers",
    ),
    resolve_endpoints: Optional[bool] = typer.Option(
        None,
        "--resolve-endpoints/--raw-endpoints",
        help="Use generated person ids as relationship endpoints",
    ),
    deterministic_ids: Optional[bool] = typer.Option(
        None,
        "--deterministic-ids/--random-ids",
        help="Derive ids from GEDCOM pointers",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a GEDCOM file as people/relationships JSON (stdout by default).
    """
    options = build_options(
        strict=strict,
        resolve_endpoints=resolve_endpoints,
        deterministic_ids=deterministic_ids,
    )
    result = load_tree(gedcom, options, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    write_json(result, out=out, pretty=pretty)

    if verbose:
        console.log(f"Export complete: {result.tree_name}")
