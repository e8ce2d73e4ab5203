import hashlib
import json
from unittest import mock

import pytest

from site_drafter.brief_io import BriefImportError
from site_drafter.models.brief import Brief
from site_drafter.project_store import (
    STORAGE_KEY,
    FirestoreProjectStore,
    LocalProjectStore,
    ProjectNotFoundError,
)


def test_save_load_list_delete(tmp_path, harbor_brief):
    store = LocalProjectStore(path=tmp_path / "projects.json")

    assert store.list_names() == []
    assert store.save("  Sample – Harbor & Sage Law ", harbor_brief) == "Sample – Harbor & Sage Law"
    store.save("Acme draft", Brief())

    assert store.list_names() == ["Sample – Harbor & Sage Law", "Acme draft"]
    assert store.load("Sample – Harbor & Sage Law") == harbor_brief

    store.delete("Acme draft")
    assert store.list_names() == ["Sample – Harbor & Sage Law"]


def test_file_layout_uses_single_namespaced_key(tmp_path, harbor_brief):
    path = tmp_path / "projects.json"
    LocalProjectStore(path=path).save("Harbor", harbor_brief)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == [STORAGE_KEY]
    assert data[STORAGE_KEY]["Harbor"]["company"]["brand"]["heroImage"] == ""


def test_saving_same_name_overwrites(tmp_path, harbor_brief):
    store = LocalProjectStore(path=tmp_path / "projects.json")
    store.save("Draft", Brief())
    store.save("Draft", harbor_brief)
    assert store.list_names() == ["Draft"]
    assert store.load("Draft") == harbor_brief


def test_unknown_and_blank_names(tmp_path):
    store = LocalProjectStore(path=tmp_path / "projects.json")
    with pytest.raises(ProjectNotFoundError):
        store.load("missing")
    with pytest.raises(ProjectNotFoundError):
        store.delete("missing")
    with pytest.raises(ValueError):
        store.save("   ", Brief())


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "projects.json"
    path.write_text("{oops", encoding="utf-8")
    store = LocalProjectStore(path=path)

    assert store.list_names() == []
    store.save("Fresh", Brief())
    assert store.list_names() == ["Fresh"]


def test_firestore_store_writes_one_document_per_project(harbor_brief):
    with mock.patch("site_drafter.project_store.firestore.Client") as client_cls:
        collection = client_cls.return_value.collection.return_value
        store = FirestoreProjectStore(project_id="demo")
        store.save("Harbor/Sage", harbor_brief)

    client_cls.return_value.collection.assert_called_once_with(STORAGE_KEY)
    collection.document.assert_called_with(hashlib.sha1("Harbor/Sage".encode("utf-8")).hexdigest())
    payload = collection.document.return_value.set.call_args.args[0]
    assert payload["name"] == "Harbor/Sage"
    assert Brief.model_validate(payload["brief"]) == harbor_brief


def test_firestore_store_missing_document(harbor_brief):
    with mock.patch("site_drafter.project_store.firestore.Client") as client_cls:
        collection = client_cls.return_value.collection.return_value
        collection.document.return_value.get.return_value.exists = False
        store = FirestoreProjectStore(project_id="demo")

        with pytest.raises(ProjectNotFoundError):
            store.load("Nope")


def test_firestore_names_never_share_a_document(harbor_brief):
    with mock.patch("site_drafter.project_store.firestore.Client") as client_cls:
        collection = client_cls.return_value.collection.return_value
        store = FirestoreProjectStore(project_id="demo")
        store.save("Harbor/Sage", harbor_brief)
        store.save("Harbor-Sage", Brief())

    first, second = (call.args[0] for call in collection.document.call_args_list)
    assert first != second
    assert "/" not in first


def test_firestore_invalid_stored_brief_is_reported():
    with mock.patch("site_drafter.project_store.firestore.Client") as client_cls:
        collection = client_cls.return_value.collection.return_value
        snapshot = collection.document.return_value.get.return_value
        snapshot.exists = True
        snapshot.to_dict.return_value = {"name": "Broken", "brief": {"company": "nope"}}
        store = FirestoreProjectStore(project_id="demo")

        with pytest.raises(BriefImportError, match="Invalid brief: company"):
            store.load("Broken")


def test_invalid_stored_brief_is_reported(tmp_path):
    path = tmp_path / "projects.json"
    path.write_text(
        json.dumps({STORAGE_KEY: {"Broken": {"company": "nope"}, "Listed": ["not", "a", "brief"]}}),
        encoding="utf-8",
    )
    store = LocalProjectStore(path=path)

    assert store.list_names() == ["Broken", "Listed"]
    with pytest.raises(BriefImportError, match="Invalid brief: company"):
        store.load("Broken")
    with pytest.raises(BriefImportError, match="must be an object"):
        store.load("Listed")
