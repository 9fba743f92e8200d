from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_import.cli.utils import build_options, load_tree

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Also list warnings for unknown tags and unresolved pointers",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    result = load_tree(gedcom, build_options(strict=strict), verbose=verbose)
    kinds = Counter(r.relationship_type.value for r in result.relationships)

    table = Table(title=result.tree_name)
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(result.people)))
    table.add_row("Relationships", str(len(result.relationships)))
    table.add_row("Spouse edges", str(kinds.get("spouse", 0)))
    table.add_row("Parent edges", str(kinds.get("parent", 0)))
    table.add_row("Warnings", str(len(result.warnings)))

    console.print(table)

    if result.warnings:
        warnings = Table(title="Warnings")
        warnings.add_column("Line", justify="right")
        warnings.add_column("Code")
        warnings.add_column("Message")
        for w in result.warnings:
            warnings.add_row("" if w.lineno is None else str(w.lineno), w.code, w.message)
        console.print(warnings)
