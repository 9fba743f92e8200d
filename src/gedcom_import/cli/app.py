from __future__ import annotations

import typer

from gedcom_import.cli.commands.export import export_command
from gedcom_import.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-import",
    help="Import GEDCOM files into people and relationships",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
