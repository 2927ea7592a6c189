"""Publishing rendered documents for permanent hosting.

``publish`` is the save pipeline: classify, render, upload to an
:class:`~framework_preview.collaborators.ObjectStore`, hand back the
public URL.  :class:`LocalObjectStore` keeps objects on disk and is what
the CLI and web API use out of the box.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from framework_preview.classifier import classify
from framework_preview.collaborators import ObjectStore
from framework_preview.errors import StorageError
from framework_preview.model import FrameworkKind
from framework_preview.rewrite import render

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "public"

_PROJECT_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


@dataclass(frozen=True, slots=True)
class PublishedSite:
    project_id: str
    path: str
    url: str
    kind: FrameworkKind

    def to_dict(self) -> dict:
        return {
            "project_id": self.project_id,
            "path": self.path,
            "url": self.url,
            "kind": self.kind.value,
        }


def object_path_for(project_id: str) -> str:
    """Object path of a project's published document: ``public/<id>.html``."""
    if not project_id or not _PROJECT_ID.match(project_id) or ".." in project_id:
        raise StorageError(f"invalid project id: {project_id!r}")
    return f"{PUBLIC_PREFIX}/{project_id}.html"


class LocalObjectStore:
    """Filesystem-backed object store rooted at *root*."""

    def __init__(self, root: str | Path, base_url: str = "/"):
        self.root = Path(root)
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    def _resolve(self, path: str) -> Path:
        candidate = (self.root / path).resolve()
        if not candidate.is_relative_to(self.root.resolve()):
            raise StorageError(f"object path escapes store root: {path}")
        return candidate

    def put_object(self, path: str, html: str) -> None:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"failed to write {path}: {e}") from e
        logger.debug(f"Stored {len(html)} characters at {target}")

    def get_object(self, path: str) -> str | None:
        target = self._resolve(path)
        if not target.is_file():
            return None
        try:
            return target.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"failed to read {path}: {e}") from e

    def get_public_url(self, path: str) -> str:
        return self.base_url + path


def publish(project_id: str, source: str, store: ObjectStore) -> PublishedSite:
    """Render *source* and upload it as the project's public document.

    Raises
    ------
    StorageError
        If the project id is unusable or the store rejects the write.
    """
    path = object_path_for(project_id)
    verdict = classify(source)
    document = render(source, verdict)
    store.put_object(path, document)
    url = store.get_public_url(path)
    logger.info(f"Published {project_id} ({verdict.kind.value}) to {url}")
    return PublishedSite(project_id=project_id, path=path, url=url, kind=verdict.kind)


def load_published(project_id: str, store: ObjectStore) -> str | None:
    """Stored document for *project_id*, or ``None`` if never published."""
    return store.get_object(object_path_for(project_id))
