"""
Exporter package.

Re-exports the JSON rendering helpers for import results.
"""

from __future__ import annotations

from .json_exporter import build_result_dict, export_result_json, serialize_result

__all__ = ["build_result_dict", "export_result_json", "serialize_result"]
