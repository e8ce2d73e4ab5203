from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models.brief import Brief


class BriefImportError(ValueError):
    """Raised when a brief document cannot be imported. Nothing is partially applied."""


def dump_brief(brief: Brief, *, indent: int | None = 2) -> str:
    return brief.model_dump_json(by_alias=True, indent=indent)


def load_brief(text: str | bytes) -> Brief:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BriefImportError(f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except UnicodeDecodeError as exc:
        raise BriefImportError("Invalid JSON: document is not UTF-8 text") from exc
    return brief_from_data(data)


def brief_from_data(data: Any) -> Brief:
    """Validate already-decoded brief data, e.g. an entry read back from a project store."""
    if not isinstance(data, dict):
        raise BriefImportError("Invalid brief: top-level JSON value must be an object")
    try:
        return Brief.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "brief"
        raise BriefImportError(f"Invalid brief: {location}: {first['msg']}") from exc


def read_brief_file(path: Path) -> Brief:
    if not path.exists():
        raise FileNotFoundError(f"Brief file not found: {path}")
    return load_brief(path.read_text(encoding="utf-8"))


def write_brief_file(path: Path, brief: Brief) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_brief(brief) + "\n", encoding="utf-8")


__all__ = ["BriefImportError", "brief_from_data", "dump_brief", "load_brief", "read_brief_file", "write_brief_file"]
