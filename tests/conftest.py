import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


from gedcom_import.utils import tests_data_path  # noqa: E402


@pytest.fixture
def family_ged_path() -> Path:
    return tests_data_path("family.ged")


@pytest.fixture
def family_ged_text(family_ged_path) -> str:
    return family_ged_path.read_text(encoding="utf-8")
