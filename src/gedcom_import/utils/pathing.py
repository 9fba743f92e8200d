# src/gedcom_import/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/gedcom_import/utils/pathing.py,
# so the project root is three parents up from its directory.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root (the directory holding
    src/, tests/ and config/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a fixture under tests/data/.

        tests_data_path("family.ged")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
