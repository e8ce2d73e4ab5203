from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class Settings:
    environment: str = "dev"
    project_id: str | None = None
    store_backend: Literal["local", "firestore"] = "local"
    store_path: Path = Path("data/projects.json")

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("SITE_DRAFTER_STORE", "local").strip().lower()
        if backend not in ("local", "firestore"):
            raise ValueError(f"Unsupported SITE_DRAFTER_STORE: {backend!r} (expected 'local' or 'firestore')")
        return cls(
            environment=os.getenv("ENVIRONMENT", "dev"),
            project_id=os.getenv("PROJECT_ID") or None,
            store_backend=backend,  # type: ignore[arg-type]
            store_path=Path(os.getenv("SITE_DRAFTER_STORE_PATH", "data/projects.json")),
        )


__all__ = ["Settings"]
