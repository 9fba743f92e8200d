"""
CLI command modules for gedcom_import.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_import.cli.commands.export import export_command
from gedcom_import.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "stats_command",
]
