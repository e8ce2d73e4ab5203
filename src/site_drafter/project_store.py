from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Protocol

from google.cloud import firestore

from .brief_io import brief_from_data
from .models.brief import Brief

logger = logging.getLogger(__name__)

STORAGE_KEY = "citeks-maker-projects"


class ProjectNotFoundError(KeyError):
    pass


class ProjectStore(Protocol):
    def list_names(self) -> list[str]:
        ...

    def save(self, name: str, brief: Brief) -> str:
        ...

    def load(self, name: str) -> Brief:
        ...

    def delete(self, name: str) -> None:
        ...


def clean_project_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Give this project a name first.")
    return cleaned


class LocalProjectStore:
    """Named drafts kept in one JSON file under a single namespaced key."""

    def __init__(self, *, path: Path, storage_key: str = STORAGE_KEY) -> None:
        self._path = path
        self._storage_key = storage_key
        self._lock = threading.Lock()

    def list_names(self) -> list[str]:
        with self._lock:
            return list(self._read())

    def save(self, name: str, brief: Brief) -> str:
        name = clean_project_name(name)
        with self._lock:
            projects = self._read()
            projects[name] = brief.model_dump(mode="json", by_alias=True)
            self._write(projects)
        logger.info("Saved project", extra={"project": name, "path": str(self._path)})
        return name

    def load(self, name: str) -> Brief:
        name = clean_project_name(name)
        with self._lock:
            data = self._read().get(name)
        if data is None:
            raise ProjectNotFoundError(name)
        return brief_from_data(data)

    def delete(self, name: str) -> None:
        name = clean_project_name(name)
        with self._lock:
            projects = self._read()
            if name not in projects:
                raise ProjectNotFoundError(name)
            del projects[name]
            self._write(projects)
        logger.info("Deleted project", extra={"project": name})

    def _read(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, json.JSONDecodeError):
            logger.warning("Project store unreadable, starting empty", exc_info=True, extra={"path": str(self._path)})
            return {}
        projects = data.get(self._storage_key) if isinstance(data, dict) else None
        return dict(projects) if isinstance(projects, dict) else {}

    def _write(self, projects: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".projects-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                json.dump({self._storage_key: projects}, fp, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class FirestoreProjectStore:
    """Firestore-backed drafts, one document per project name."""

    def __init__(self, project_id: str | None = None, *, collection: str = STORAGE_KEY) -> None:
        self._db = firestore.Client(project=project_id)
        self._collection = self._db.collection(collection)

    def list_names(self) -> list[str]:
        docs = self._collection.order_by("name").stream()
        return [doc.to_dict()["name"] for doc in docs]

    def save(self, name: str, brief: Brief) -> str:
        name = clean_project_name(name)
        self._collection.document(self._doc_id(name)).set(
            {
                "name": name,
                "brief": brief.model_dump(mode="json", by_alias=True),
                "updated_at": datetime.utcnow(),
            }
        )
        logger.info("Saved project", extra={"project": name})
        return name

    def load(self, name: str) -> Brief:
        name = clean_project_name(name)
        doc = self._collection.document(self._doc_id(name)).get()
        if not doc.exists:
            raise ProjectNotFoundError(name)
        return brief_from_data((doc.to_dict() or {}).get("brief"))

    def delete(self, name: str) -> None:
        name = clean_project_name(name)
        doc_ref = self._collection.document(self._doc_id(name))
        if not doc_ref.get().exists:
            raise ProjectNotFoundError(name)
        doc_ref.delete()
        logger.info("Deleted project", extra={"project": name})

    def _doc_id(self, name: str) -> str:
        # names are free text; the original is kept in the document body
        return hashlib.sha1(name.encode("utf-8")).hexdigest()


__all__ = [
    "FirestoreProjectStore",
    "LocalProjectStore",
    "ProjectNotFoundError",
    "ProjectStore",
    "STORAGE_KEY",
    "clean_project_name",
]
