import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_import.yml"
CONFIG_ENV_VAR = "GEDCOM_IMPORT_CONFIG"

DEFAULTS = {
    "logging": {"level": "INFO", "file": "gedcom_import.log", "to_file": False},
    "parser": {
        "strict": False,
        "resolve_endpoints": False,
        "deterministic_ids": False,
        "default_tree_name": "Imported Family Tree",
    },
    "debug": False,
}


class GIConfig:
    def __init__(self, data):
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.paths = data.get("paths", {})
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GIConfig':
    """Read the YAML config; an absent file falls back to DEFAULTS."""
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        return GIConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GIConfig(data)

_config_cache = None

def get_config() -> 'GIConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
