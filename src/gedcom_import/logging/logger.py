"""
Centralized logging configuration for gedcom_import.

Key behaviors
-------------
* Single entry point via ``get_logger`` so handlers/formatters stay consistent.
* Console logging on the shared ``gedcom_import`` base logger.
* Optional master log file (``logging.to_file``) and per-module log files
  (``logging.per_module``), both controlled by ``config/gedcom_import.yml``.
* Optional log rotation via ``logging.rotate``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from gedcom_import.config import get_config
from gedcom_import.utils.pathing import resolve_project_path

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "gedcom_import"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module_files: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = resolve_project_path(log_dir)

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _rotate_logs, _per_module_files

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module_files = bool(cfg.logging.get("per_module", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(cfg.debug)

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if cfg.logging.get("to_file", False):
        master_path = _log_dir() / cfg.logging.get("file", "gedcom_import.log")
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    console = StreamHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    filename = f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(_log_dir() / filename, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger that shares the project-wide handlers.

    Names outside the ``gedcom_import`` namespace are prefixed so they
    propagate to the base logger (``get_logger("cli")`` ->
    ``gedcom_import.cli``).
    """
    base_logger = _configure_base_logger()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name == BASE_LOGGER_NAME:
        _logger_cache[logger_name] = base_logger
        return base_logger

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)
    logger.propagate = True

    if _per_module_files and not _module_handler_exists(logger):
        _attach_module_handler(logger, logger_name)

    _logger_cache[logger_name] = logger
    return logger


def set_level(level: int) -> None:
    """Adjust the level of the base logger and every cached module logger."""
    global _effective_level
    base_logger = _configure_base_logger()
    _effective_level = level
    base_logger.setLevel(level)
    for handler in base_logger.handlers:
        handler.setLevel(level)
    for logger in _logger_cache.values():
        logger.setLevel(level)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
