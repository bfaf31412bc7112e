"""Mapping configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env(name: str, default=None, cast=str):
    val = os.getenv(name, default)
    if val is None:
        return None
    if cast is bool:
        return str(val).strip().lower() in {"1", "true", "yes", "on"}
    if cast is int:
        try:
            return int(val)
        except (TypeError, ValueError):
            return int(default) if default is not None else None
    return str(val)


@dataclass(frozen=True)
class MappingConfig:
    # strict=True also fails on empty Bal/TxDtls elements and on a missing Amt
    strict: bool = _env("CAMT_STRICT", False, bool)
    json_indent: int = _env("CAMT_JSON_INDENT", 2, int)


@lru_cache(maxsize=1)
def get_config() -> MappingConfig:
    return MappingConfig()
