from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from gedcom_import.logging import get_logger

log = get_logger(__name__)

# Warning codes raised in strict mode
UNKNOWN_TAG = "unknown-tag"
MALFORMED_LINE = "malformed-line"
UNRESOLVED_POINTER = "unresolved-pointer"
DUPLICATE_POINTER = "duplicate-pointer"

DEFAULT_TREE_NAME = "Imported Family Tree"


@dataclass(frozen=True)
class ParseOptions:
    """
    Caller-facing switches for one parse.

    strict:
        Collect a ParseWarning for every unknown tag, skipped line and
        unresolved pointer instead of ignoring them silently.
    resolve_endpoints:
        Rewrite relationship endpoints from source pointers to the
        generated Person ids.
    deterministic_ids:
        Derive ids from source pointers so re-imports produce stable ids.
    """

    strict: bool = False
    resolve_endpoints: bool = False
    deterministic_ids: bool = False
    default_tree_name: str = DEFAULT_TREE_NAME

    @classmethod
    def from_config(cls, cfg: Any) -> "ParseOptions":
        parser_cfg = getattr(cfg, "parser", None) or {}
        return cls(
            strict=bool(parser_cfg.get("strict", False)),
            resolve_endpoints=bool(parser_cfg.get("resolve_endpoints", False)),
            deterministic_ids=bool(parser_cfg.get("deterministic_ids", False)),
            default_tree_name=str(
                parser_cfg.get("default_tree_name") or DEFAULT_TREE_NAME
            ),
        )


@dataclass(frozen=True)
class ParseWarning:
    code: str
    message: str
    lineno: Optional[int] = None
    pointer: Optional[str] = None


@dataclass
class ParseContext:
    """
    Per-call state shared by the tokenizer, assembler, linker and transformer.
    One context belongs to exactly one parse.
    """

    options: ParseOptions = field(default_factory=ParseOptions)
    warnings: List[ParseWarning] = field(default_factory=list)

    @property
    def strict(self) -> bool:
        return self.options.strict

    def warn(
        self,
        code: str,
        message: str,
        *,
        lineno: Optional[int] = None,
        pointer: Optional[str] = None,
    ) -> None:
        """Record a warning in strict mode; otherwise only debug-log it."""
        if not self.options.strict:
            log.debug("%s: %s", code, message)
            return
        self.warnings.append(
            ParseWarning(code=code, message=message, lineno=lineno, pointer=pointer)
        )
        log.warning("%s: %s", code, message)
