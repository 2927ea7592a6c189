"""Tests for publishing rendered documents to an object store."""

from __future__ import annotations

from pathlib import Path

import pytest

from framework_preview.errors import StorageError
from framework_preview.model import FrameworkKind
from framework_preview.storage import (
    LocalObjectStore,
    load_published,
    object_path_for,
    publish,
)


@pytest.fixture
def store(tmp_path: Path) -> LocalObjectStore:
    return LocalObjectStore(tmp_path, base_url="https://cdn.example.com/sites")


class TestObjectPath:
    """Project ids map to public/<id>.html."""

    def test_path(self) -> None:
        assert object_path_for("my-project_1") == "public/my-project_1.html"

    @pytest.mark.parametrize("project_id", ["", "../etc", "a/b", ".hidden", "a..b", "sp ace"])
    def test_rejects_unsafe_ids(self, project_id: str) -> None:
        with pytest.raises(StorageError):
            object_path_for(project_id)


class TestLocalObjectStore:
    """Filesystem-backed store."""

    def test_put_and_get(self, store: LocalObjectStore, tmp_path: Path) -> None:
        store.put_object("public/a.html", "<p>a</p>")
        assert (tmp_path / "public" / "a.html").read_text(encoding="utf-8") == "<p>a</p>"
        assert store.get_object("public/a.html") == "<p>a</p>"

    def test_missing_object(self, store: LocalObjectStore) -> None:
        assert store.get_object("public/none.html") is None

    def test_escape_rejected(self, store: LocalObjectStore) -> None:
        with pytest.raises(StorageError, match="escapes"):
            store.put_object("../outside.html", "x")

    def test_public_url_joins_base(self, store: LocalObjectStore) -> None:
        assert store.get_public_url("public/a.html") == "https://cdn.example.com/sites/public/a.html"


class TestPublish:
    """publish classifies, renders and stores in one step."""

    def test_publish_writes_rendered_document(self, store: LocalObjectStore, tmp_path: Path) -> None:
        site = publish("demo", '<div x-data="{ a: 1 }"></div>', store)
        assert site.path == "public/demo.html"
        assert site.kind == FrameworkKind.ALPINE
        assert site.url.endswith("/public/demo.html")
        stored = (tmp_path / "public" / "demo.html").read_text(encoding="utf-8")
        assert stored.startswith("<!DOCTYPE html>")
        assert "alpinejs" in stored

    def test_republish_overwrites(self, store: LocalObjectStore) -> None:
        publish("demo", "<p>one</p>", store)
        publish("demo", "<p>two</p>", store)
        assert "<p>two</p>" in load_published("demo", store)

    def test_load_missing(self, store: LocalObjectStore) -> None:
        assert load_published("never", store) is None

    def test_to_dict(self, store: LocalObjectStore) -> None:
        site = publish("demo", "<p>x</p>", store)
        assert site.to_dict() == {
            "project_id": "demo",
            "path": "public/demo.html",
            "url": "https://cdn.example.com/sites/public/demo.html",
            "kind": "vanilla",
        }
