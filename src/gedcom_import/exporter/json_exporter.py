"""
json_exporter.py
JSON rendering for FamilyTreeResult.

- Converts dataclasses, enums and nested containers to plain dicts/lists
- Emits the public shape: ``people``, ``relationships``, ``treeName``
- Deterministic key order for stable output
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from gedcom_import.logging import get_logger

if TYPE_CHECKING:
    from gedcom_import.transform.models import FamilyTreeResult

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enum -> its value
    - Primitives pass through
    - dataclasses -> dict (recursively, properties not included)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_result_dict(result: "FamilyTreeResult") -> Dict[str, Any]:
    """
    Convert an import result into a JSON-safe dict.
    """
    return {
        "id": result.id,
        "treeName": result.name,
        "description": result.description,
        "created_at": result.created_at,
        "updated_at": result.updated_at,
        "people": [_to_json_compatible(p) for p in result.people],
        "relationships": [_to_json_compatible(r) for r in result.relationships],
        "pointer_index": dict(result.pointer_index),
        "endpoints_resolved": result.endpoints_resolved,
        "warnings": [_to_json_compatible(w) for w in result.warnings],
    }


def serialize_result(result: "FamilyTreeResult", indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(
            build_result_dict(result),
            separators=(",", ":"),
            ensure_ascii=False,
        )
    return json.dumps(build_result_dict(result), indent=indent, ensure_ascii=False)


def export_result_json(
    result: "FamilyTreeResult",
    output_path: str | Path,
    indent: int | None = 2,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting tree JSON to: %s (people=%d, relationships=%d)",
        output_path,
        len(result.people),
        len(result.relationships),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_result(result, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
